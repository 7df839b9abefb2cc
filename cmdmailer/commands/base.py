"""Interfaces abstraites et structures de données pour l'exécution
de la commande surveillée.

Ce module définit :
    - RunStatistics : Ligne de commande et temps CPU d'une exécution.
    - CommandRun : Résultat complet d'une exécution.
    - CommandExecutor : Interface abstraite pour les exécuteurs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import IO, List, Optional, Tuple

from cmdmailer.capture.buffer import CaptureBuffer
from cmdmailer.commands.classifier import TerminationOutcome


@dataclass(frozen=True)
class RunStatistics:
    """Statistiques d'une exécution.

    Attributes:
        command: Commande exécutée, figée en tuple.
        system_time: Temps CPU système en secondes.
        user_time: Temps CPU utilisateur en secondes.
    """

    command: Tuple[str, ...]
    system_time: float = 0.0
    user_time: float = 0.0


@dataclass(frozen=True)
class CommandRun:
    """Résultat d'une exécution.

    Attributes:
        outcome: Issue classifiée de la terminaison.
        statistics: Ligne de commande et temps CPU.
        capture: Sortie capturée, None si la capture est désactivée.
    """

    outcome: TerminationOutcome
    statistics: RunStatistics
    capture: Optional[CaptureBuffer] = None


class CommandExecutor(ABC):
    """Interface abstraite pour l'exécution de la commande surveillée."""

    @abstractmethod
    def run(
        self,
        command: List[str],
        capture: bool = True,
        stdin: Optional[IO] = None,
    ) -> CommandRun:
        """Exécute une commande jusqu'à sa terminaison.

        Args:
            command: Commande sous forme de liste.
            capture: Si True, duplique stdout/stderr dans un
                CaptureBuffer en plus de la console.
            stdin: Entrée standard (défaut: celle du processus).

        Returns:
            Résultat de l'exécution.
        """
        pass
