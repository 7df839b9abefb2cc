"""Mot de passe SMTP range dans le keyring systeme.

Le secret est enregistre hors de cmdmailer, par exemple avec :
    keyring set cmdmailer CMDMAILER_PASSWORD
"""

from typing import Any, Optional

import keyring
from keyring.errors import KeyringError

from cmdmailer.credentials.base import CredentialProvider
from cmdmailer.logging.base import Logger


class KeyringCredentialProvider(CredentialProvider):
    """Lit des credentials via FreeDesktop Secret Service.

    Une erreur du backend (keyring verrouille, pas de backend) est
    journalisee et traitee comme une absence de valeur : le mot de
    passe est alors signale manquant par la configuration.

    Attributes:
        _logger: Logger optionnel.
        _backend: Backend keyring injecte (pour tests unitaires).
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        keyring_backend: Optional[Any] = None,
    ) -> None:
        """Initialise le provider keyring.

        Args:
            logger: Logger optionnel (injection de dependance).
            keyring_backend: Objet exposant get_password(service,
                key). Defaut: le module keyring.
        """
        self._logger = logger
        self._backend = keyring_backend if keyring_backend is not None else keyring

    def get(
        self,
        service: str,
        key: str,
    ) -> Optional[str]:
        """Lit un credential depuis le keyring systeme.

        Args:
            service: Nom du service applicatif.
            key: Identifiant de la cle.

        Returns:
            Valeur du credential ou None si absent ou indisponible.
        """
        try:
            value = self._backend.get_password(service, key)
        except KeyringError as e:
            if self._logger:
                self._logger.log_warning(
                    f"Keyring indisponible pour {service!r} : {e}"
                )
            return None
        return value if value else None

    def is_available(self) -> bool:
        return True

    @property
    def source_name(self) -> str:
        return "keyring"
