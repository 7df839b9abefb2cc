"""Classification de la terminaison d'un processus.

Ce module définit les quatre issues possibles d'une exécution et la
fonction ``classify`` qui les déduit du statut brut retourné par
``os.wait4``/``os.waitpid``. La classification est totale : tout
statut, y compris un statut absent, produit une issue.
"""

import os
import signal
from dataclasses import dataclass
from typing import Optional

from cmdmailer.errors.exceptions import GENERIC_FAILURE_EXIT_CODE


@dataclass(frozen=True)
class TerminationOutcome:
    """Issue d'une exécution (classe de base, non instanciée).

    Attributes:
        success: True uniquement pour CleanExit.
        exit_code: Code de sortie à propager par cmdmailer.
        status: Libellé de l'issue, non échappé.
    """

    @property
    def success(self) -> bool:
        return False

    @property
    def exit_code(self) -> int:
        return GENERIC_FAILURE_EXIT_CODE

    @property
    def status(self) -> str:
        return "failed with an unknown error."


@dataclass(frozen=True)
class CleanExit(TerminationOutcome):
    """Le processus s'est terminé avec le code 0."""

    @property
    def success(self) -> bool:
        return True

    @property
    def exit_code(self) -> int:
        return 0

    @property
    def status(self) -> str:
        return "succeeded"


@dataclass(frozen=True)
class ExitCodeFailure(TerminationOutcome):
    """Le processus s'est terminé avec un code non nul.

    Attributes:
        code: Code de sortie du processus.
    """

    code: int

    @property
    def exit_code(self) -> int:
        return self.code

    @property
    def status(self) -> str:
        return f"failed with exit code: {self.code}"


@dataclass(frozen=True)
class SignalFailure(TerminationOutcome):
    """Le processus a été tué par un signal.

    Attributes:
        signal_name: Nom lisible du signal (ex: "killed").
    """

    signal_name: str

    @property
    def status(self) -> str:
        return f"failed with signal: {self.signal_name}"


@dataclass(frozen=True)
class UnknownFailure(TerminationOutcome):
    """Statut de terminaison illisible ou non pris en charge."""


def signal_description(signum: int) -> str:
    """Retourne le nom lisible d'un signal.

    Args:
        signum: Numéro du signal.

    Returns:
        Description système en minuscules (ex: "terminated"),
        ou "signal N" si le système n'en fournit pas.
    """
    try:
        description = signal.strsignal(signum)
    except ValueError:
        description = None
    if not description:
        return f"signal {signum}"
    return description.lower()


def classify(wait_status: Optional[int]) -> TerminationOutcome:
    """Déduit l'issue d'une exécution du statut brut de wait.

    Args:
        wait_status: Statut brut (os.wait4) ou None si indisponible.

    Returns:
        CleanExit, ExitCodeFailure, SignalFailure ou UnknownFailure.
    """
    if wait_status is None:
        return UnknownFailure()
    if os.WIFEXITED(wait_status):
        code = os.WEXITSTATUS(wait_status)
        if code == 0:
            return CleanExit()
        return ExitCodeFailure(code=code)
    if os.WIFSIGNALED(wait_status):
        return SignalFailure(
            signal_name=signal_description(os.WTERMSIG(wait_status))
        )
    return UnknownFailure()
