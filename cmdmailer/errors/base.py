""" Interfaces abstraites pour la gestion des erreurs"""

from abc import ABC, abstractmethod


class ErrorHandler(ABC):
    """Interface de base pour les handlers d'erreurs.

        Chaque implémentation concrète définit une stratégie
        de traitement des erreurs (affichage console, logging, etc.).
        """
    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Traite une erreur.

        Args:
            error: L'exception à traiter.
        """
        pass


class ErrorHandlerChain():
    """Diffuse les erreurs à tous les handlers enregistrés.

    Chaque erreur est transmise à tous les handlers dans l'ordre
    d'ajout (ex: console puis logger).
    """

    def __init__(self):
        """Initialise la chaîne avec une liste vide de handlers."""
        self.handlers: list[ErrorHandler] = []

    def add_handler(self, handler: ErrorHandler) -> "ErrorHandlerChain":
        """Ajoute un handler à la chaîne.

        Args:
            handler: Le handler d'erreurs à ajouter.

        Returns:
            La chaîne elle-même pour le chaînage.
        """
        self.handlers.append(handler)
        return self

    def handle(self, error: Exception) -> int:
        """Fait passer l'erreur à travers tous les handlers.

        Args:
            error: L'exception à diffuser.

        Returns:
            Le code de sortie associé à l'erreur (1 pour une
            exception qui n'en déclare pas).
        """
        for handler in self.handlers:
            handler.handle(error)
        return getattr(error, "exit_code", 1)
