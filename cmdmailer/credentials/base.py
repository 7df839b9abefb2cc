"""Interface abstraite des sources de mot de passe SMTP.

Ce module definit l'ABC CredentialProvider (lecture seule) : cmdmailer
ne fait que lire un secret absent de la configuration, il n'en stocke
jamais.
"""

from abc import ABC, abstractmethod
from typing import Optional


class CredentialProvider(ABC):
    """Interface de lecture d'un credential depuis une source."""

    @abstractmethod
    def get(
        self,
        service: str,
        key: str,
    ) -> Optional[str]:
        """Retourne la valeur du credential ou None si absent.

        Args:
            service: Nom du service applicatif.
            key: Nom de la cle.

        Returns:
            Valeur du credential ou None si absent.
        """
        pass  # pragma: no cover

    @abstractmethod
    def is_available(self) -> bool:
        """Indique si ce provider est operationnel.

        Returns:
            True si le provider peut etre utilise.
        """
        pass  # pragma: no cover

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Nom court de la source (ex: "env", "dotenv", "keyring")."""
        pass  # pragma: no cover
