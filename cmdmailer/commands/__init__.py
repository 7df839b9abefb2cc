"""Module d'exécution de la commande surveillée.

Classes disponibles :
    RunStatistics : Ligne de commande et temps CPU.
    CommandRun : Résultat immuable d'une exécution.
    CommandExecutor : Interface abstraite pour les exécuteurs.
    LinuxCommandExecutor : Exécuteur concret via subprocess.
    TerminationOutcome et ses variantes : Issue d'une exécution.
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Formatage texte brut (journal fichier).
"""

from cmdmailer.commands.base import (
    CommandExecutor,
    CommandRun,
    RunStatistics,
)
from cmdmailer.commands.classifier import (
    CleanExit,
    ExitCodeFailure,
    SignalFailure,
    TerminationOutcome,
    UnknownFailure,
    classify,
    signal_description,
)
from cmdmailer.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from cmdmailer.commands.runner import LinuxCommandExecutor

__all__ = [
    # Structures de données
    "RunStatistics",
    "CommandRun",
    # Issues
    "TerminationOutcome",
    "CleanExit",
    "ExitCodeFailure",
    "SignalFailure",
    "UnknownFailure",
    "classify",
    "signal_description",
    # Interface abstraite
    "CommandExecutor",
    # Formateurs
    "CommandFormatter",
    "PlainCommandFormatter",
    # Implémentation Linux
    "LinuxCommandExecutor",
]
