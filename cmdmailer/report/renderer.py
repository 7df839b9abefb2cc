"""Génération du rapport HTML d'une exécution.

Ce module fournit :
    - ReportDocument : rapport rendu (sujet + corps HTML), immuable.
    - ReportRenderer : construit le rapport à partir de l'issue, des
      statistiques et de la capture. Fonction pure : mêmes entrées,
      même document, octet pour octet.
    - format_duration : durée au format "1.5ms", "2m3.25s".
"""

import html
from dataclasses import dataclass
from typing import Optional

from cmdmailer.capture.buffer import CaptureBuffer
from cmdmailer.commands.base import RunStatistics
from cmdmailer.commands.classifier import TerminationOutcome

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000

TRUNCATION_NOTICE = "\n<hr>\nand more ..."


def _format_fraction(value: int, precision: int) -> str:
    """Écrit value / 10**precision sans zéros décimaux superflus."""
    integer, fraction = divmod(value, 10 ** precision)
    digits = f"{fraction:0{precision}d}".rstrip("0")
    return f"{integer}.{digits}" if digits else str(integer)


def format_duration(seconds: float) -> str:
    """Formate une durée comme le fait Go pour time.Duration.

    Args:
        seconds: Durée en secondes.

    Returns:
        Représentation compacte : "0s", "850ns", "1.5µs", "12.5ms",
        "2.25s", "1m3s", "1h0m2s".

    Example:
        >>> format_duration(0.0125)
        '12.5ms'
        >>> format_duration(63)
        '1m3s'
    """
    ns = round(seconds * _NS_PER_S)
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    ns = abs(ns)

    if ns < _NS_PER_US:
        return f"{sign}{ns}ns"
    if ns < _NS_PER_MS:
        return f"{sign}{_format_fraction(ns, 3)}µs"
    if ns < _NS_PER_S:
        return f"{sign}{_format_fraction(ns, 6)}ms"

    total_seconds, fraction = divmod(ns, _NS_PER_S)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    text = ""
    if hours:
        text += f"{hours}h"
    if hours or minutes:
        text += f"{minutes}m"
    text += _format_fraction(secs * _NS_PER_S + fraction, 9) + "s"
    return sign + text


@dataclass(frozen=True)
class ReportDocument:
    """Rapport d'exécution prêt à l'envoi.

    Attributes:
        subject: Sujet du message (texte brut).
        html: Corps HTML complet.
    """

    subject: str
    html: str


class ReportRenderer:
    """Construit le rapport HTML d'une exécution.

    Toutes les valeurs issues de la commande (nom, arguments, nom
    de signal, sujet) sont échappées ; la sortie capturée l'est
    déjà par le CaptureBuffer.
    """

    HEAD = (
        "<!doctype html>\n"
        "<html lang=en>\n"
        "<head>\n"
        "<meta charset=utf-8>\n"
        "<title>{title}</title>\n"
        "<style>\n"
        ".stderr{{color:#f00;}}\n"
        "</style>\n"
        "</head>\n"
        "<body>\n"
    )
    FOOT = "\n</body>\n</html>"

    @staticmethod
    def subject_for(
        outcome: TerminationOutcome, subject: Optional[str] = None
    ) -> str:
        """Retourne le sujet du message.

        Args:
            outcome: Issue de l'exécution.
            subject: Sujet configuré, prioritaire s'il est non vide.

        Returns:
            Le sujet configuré, sinon "Process <issue>".
        """
        if subject:
            return subject
        return f"Process {outcome.status}"

    def render(
        self,
        outcome: TerminationOutcome,
        stats: RunStatistics,
        capture: Optional[CaptureBuffer] = None,
        subject: Optional[str] = None,
    ) -> ReportDocument:
        """Construit le rapport d'une exécution.

        Args:
            outcome: Issue classifiée de l'exécution.
            stats: Ligne de commande et temps CPU.
            capture: Sortie capturée ; None si la capture était
                désactivée, auquel cas la section sortie est omise.
            subject: Sujet configuré (optionnel).

        Returns:
            ReportDocument avec le sujet et le corps HTML.
        """
        final_subject = self.subject_for(outcome, subject)
        program = stats.command[0] if stats.command else ""

        parts = [
            self.HEAD.format(title=html.escape(final_subject)),
            f"<h1>Process '{html.escape(program)}' "
            f"{html.escape(outcome.status)}</h1>\n",
            f"Command: {html.escape(' '.join(stats.command))}<br>\n",
            f"Execution took: {format_duration(stats.system_time)} "
            f"(system) {format_duration(stats.user_time)} (user)<br>\n",
            "<br>\n",
        ]
        if capture is not None:
            parts.append(
                "STDOUT (black) and STDERR (red) follows:<br>\n<hr><br>\n"
            )
            parts.append(capture.content().replace("\n", "<br>\n"))
            if capture.truncated:
                parts.append(TRUNCATION_NOTICE)
        parts.append(self.FOOT)

        return ReportDocument(subject=final_subject, html="".join(parts))
