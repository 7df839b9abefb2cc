"""Provider de credentials depuis les variables d'environnement."""

import os
from typing import Mapping, Optional

from cmdmailer.credentials.base import CredentialProvider


class EnvCredentialProvider(CredentialProvider):
    """Lit les credentials depuis l'environnement du processus.

    La variable cherchee est le parametre key en majuscules.
    Exemple : key="cmdmailer_password"
    -> environ.get("CMDMAILER_PASSWORD")

    Attributes:
        _environ: Environnement lu (defaut: os.environ).
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Initialise le provider.

        Args:
            environ: Environnement a lire ; permet d'injecter un
                dictionnaire dans les tests.
        """
        self._environ = environ if environ is not None else os.environ

    def get(
        self,
        service: str,
        key: str,
    ) -> Optional[str]:
        """Lit environ[key.upper()] ou None si absent ou vide."""
        value = self._environ.get(key.upper())
        return value if value else None

    def is_available(self) -> bool:
        return True

    @property
    def source_name(self) -> str:
        return "env"
