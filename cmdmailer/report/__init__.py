"""Module de génération du rapport d'exécution."""

from cmdmailer.report.renderer import (
    TRUNCATION_NOTICE,
    ReportDocument,
    ReportRenderer,
    format_duration,
)

__all__ = [
    "TRUNCATION_NOTICE",
    "ReportDocument",
    "ReportRenderer",
    "format_duration",
]
