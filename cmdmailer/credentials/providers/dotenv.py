"""Provider de credentials depuis un fichier .env.

Ce module fournit DotEnvCredentialProvider qui lit un fichier .env
via python-dotenv sans modifier os.environ : le secret n'est donc
pas herite par la commande surveillee.
"""

from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values

from cmdmailer.credentials.base import CredentialProvider
from cmdmailer.logging.base import Logger


class DotEnvCredentialProvider(CredentialProvider):
    """Lit les credentials dans un fichier .env.

    Le fichier est lu une seule fois, au premier appel de get().

    Attributes:
        _dotenv_path: Chemin vers le fichier .env.
        _logger: Logger optionnel.
        _values: Contenu du fichier, None tant qu'il n'est pas lu.
    """

    def __init__(
        self,
        dotenv_path: Union[str, Path],
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialise le provider de fichier .env.

        Args:
            dotenv_path: Chemin vers le fichier .env.
            logger: Logger optionnel (injection de dependance).
        """
        self._dotenv_path = Path(dotenv_path)
        self._logger = logger
        self._values: Optional[Dict[str, Optional[str]]] = None

    def _load(self) -> Dict[str, Optional[str]]:
        if self._values is None:
            self._values = dict(dotenv_values(self._dotenv_path))
            if self._logger:
                self._logger.log_info(
                    f"Fichier .env lu : {self._dotenv_path}"
                )
        return self._values

    def get(
        self,
        service: str,
        key: str,
    ) -> Optional[str]:
        """Lit la variable key.upper() dans le fichier .env.

        Args:
            service: Nom du service (non utilise, pour
                compatibilite avec l'interface).
            key: Nom de la variable.

        Returns:
            Valeur de la variable ou None.
        """
        if not self.is_available():
            return None
        value = self._load().get(key.upper())
        return value if value else None

    def is_available(self) -> bool:
        """True si le fichier .env existe."""
        return self._dotenv_path.is_file()

    @property
    def source_name(self) -> str:
        return "dotenv"
