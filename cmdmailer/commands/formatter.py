"""Lignes du journal d'exécution pour le début et la fin de la commande.

Exemple de journal pour un utilisateur ordinaire :
    [user] Exécution : rsync -av /src /dst
    [user] Terminé (failed with exit code: 23) : rsync -av /src /dst
"""

from abc import ABC, abstractmethod
from typing import List


class CommandFormatter(ABC):
    """Mise en forme des lignes de journal de la commande surveillée."""

    @abstractmethod
    def format_start(self, command: List[str], is_root: bool) -> str:
        """Ligne écrite avant le lancement.

        Args:
            command: Commande et arguments.
            is_root: True si cmdmailer tourne sous l'uid 0.
        """
        pass

    @abstractmethod
    def format_end(
        self, command: List[str], status: str, is_root: bool
    ) -> str:
        """Ligne écrite après la classification.

        Args:
            command: Commande et arguments.
            status: Libellé de l'issue (ex: "succeeded").
            is_root: True si cmdmailer tourne sous l'uid 0.
        """
        pass


class PlainCommandFormatter(CommandFormatter):
    """Texte brut préfixé par [ROOT] ou [user], sans couleurs."""

    def __init__(self, root_tag: str = "[ROOT]", user_tag: str = "[user]"):
        self._tags = {True: root_tag, False: user_tag}

    def format_start(self, command: List[str], is_root: bool) -> str:
        return f"{self._tags[is_root]} Exécution : {' '.join(command)}"

    def format_end(
        self, command: List[str], status: str, is_root: bool
    ) -> str:
        return (
            f"{self._tags[is_root]} Terminé ({status}) : "
            f"{' '.join(command)}"
        )
