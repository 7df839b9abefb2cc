"""Module de capture de la sortie des commandes.

Classes disponibles :
    StreamTag : Origine d'un fragment (stdout/stderr).
    CaptureBuffer : Accumulateur HTML borné partagé.
    CaptureSink : Écriture d'un flux vers le buffer, sans échec.
"""

from cmdmailer.capture.buffer import (
    MAX_CAPTURE_BYTES,
    CaptureBuffer,
    CaptureSink,
    StreamTag,
)

__all__ = [
    "MAX_CAPTURE_BYTES",
    "CaptureBuffer",
    "CaptureSink",
    "StreamTag",
]
