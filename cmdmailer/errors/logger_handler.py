"""
    LoggerErrorHandler
"""
from cmdmailer.errors.base import ErrorHandler
from cmdmailer.errors.exceptions import (ApplicationError,
                                         ConfigurationMissingError)
from cmdmailer.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour logger les erreurs.

    Enregistre les erreurs dans le journal d'exécution via le Logger
    injecté au constructeur.
    """

    def __init__(self, logger: Logger) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
        """
        self.logger = logger

    def handle(self, error: Exception) -> None:
        """Log l'erreur avec son type.

        Args:
            error: L'exception à logger.
        """
        if isinstance(error, ConfigurationMissingError):
            for line in error.diagnostics():
                self.logger.log_error(line)
        elif isinstance(error, ApplicationError):
            self.logger.log_error(f"{type(error).__name__}: {str(error)}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )
