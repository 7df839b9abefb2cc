"""Interface abstraite pour le journal d'exécution."""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Interface pour le journal d'exécution de cmdmailer."""

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Log une erreur."""
        pass
