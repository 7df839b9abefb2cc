"""
    ConsoleErrorHandler : diagnostics courts sur stderr
"""
import sys
from typing import Optional, TextIO

from cmdmailer.errors.base import ErrorHandler
from cmdmailer.errors.exceptions import (ApplicationError,
                                         ConfigurationMissingError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs sur la sortie d'erreur.

    Stdout appartient à la commande exécutée : les diagnostics
    sont écrits sur stderr, une ligne "Error: ..." par problème.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        """Initialise le handler console.

        Args:
            stream: Flux de sortie (défaut: sys.stderr au moment
                de l'affichage).
        """
        self._stream = stream

    def _print(self, message: str) -> None:
        print(message, file=self._stream or sys.stderr)

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur sur la sortie d'erreur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, ConfigurationMissingError):
            for line in error.diagnostics():
                self._print(line)
        elif isinstance(error, ApplicationError):
            self._print(f"Error: {error}")
        else:
            self._print(f"Error: unexpected {type(error).__name__}: {error}")
