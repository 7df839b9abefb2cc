"""Recherche du mot de passe SMTP absent de la configuration.

La chaine interroge ses sources dans l'ordre et s'arrete a la premiere
valeur non vide. Ordre par defaut : variable d'environnement
CMDMAILER_PASSWORD, fichier ~/.cmdmailer.env, keyring systeme.
"""

from pathlib import Path
from typing import Iterable, Mapping, Optional, Sequence, Tuple, Union

from cmdmailer.credentials.base import CredentialProvider
from cmdmailer.credentials.providers.dotenv import DotEnvCredentialProvider
from cmdmailer.credentials.providers.env import EnvCredentialProvider
from cmdmailer.credentials.providers.keyring import KeyringCredentialProvider
from cmdmailer.logging.base import Logger

SERVICE_NAME = "cmdmailer"
PASSWORD_KEY = "CMDMAILER_PASSWORD"


class CredentialChain(CredentialProvider):
    """Sources de mot de passe interrogees par priorite decroissante.

    Exemple :

        chain = CredentialChain.default(Path.home() / ".cmdmailer.env")
        password = chain.get(SERVICE_NAME, PASSWORD_KEY)

    Attributes:
        _providers: Sources, la plus prioritaire en tete.
        _logger: Journal d'execution optionnel.
    """

    def __init__(
        self,
        providers: Iterable[CredentialProvider],
        logger: Optional[Logger] = None,
    ) -> None:
        self._providers: Tuple[CredentialProvider, ...] = tuple(providers)
        self._logger = logger

    @property
    def providers(self) -> Sequence[CredentialProvider]:
        return self._providers

    def _lookup(
        self, service: str, key: str
    ) -> Tuple[Optional[str], Optional[str]]:
        usable = (p for p in self._providers if p.is_available())
        for provider in usable:
            value = provider.get(service, key)
            if value:
                return value, provider.source_name
        return None, None

    def get(
        self,
        service: str,
        key: str,
    ) -> Optional[str]:
        """Retourne la premiere valeur non vide parmi les sources.

        Une source indisponible (fichier .env absent) est sautee.
        Le journal mentionne la source retenue, jamais la valeur.

        Returns:
            Le secret, ou None si aucune source ne le fournit.
        """
        value, source = self._lookup(service, key)
        if self._logger:
            if source:
                self._logger.log_info(
                    f"Mot de passe SMTP fourni par {source!r} ({key})"
                )
            else:
                self._logger.log_warning(
                    f"Aucune source ne fournit {key} pour {service!r}"
                )
        return value

    def is_available(self) -> bool:
        return any(p.is_available() for p in self._providers)

    @property
    def source_name(self) -> str:
        return "chain"

    @classmethod
    def default(
        cls,
        dotenv_path: Optional[Union[str, Path]] = None,
        logger: Optional[Logger] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "CredentialChain":
        """Chaine standard de cmdmailer.

        Args:
            dotenv_path: Fichier .env a consulter apres l'environnement ;
                None retire cette source.
            logger: Journal partage avec les sources.
            environ: Environnement lu par la premiere source
                (defaut: os.environ).
        """
        sources = [EnvCredentialProvider(environ)]
        if dotenv_path is not None:
            sources.append(DotEnvCredentialProvider(dotenv_path, logger))
        sources.append(KeyringCredentialProvider(logger))
        return cls(sources, logger)
