"""Module de logging."""

from cmdmailer.logging.base import Logger
from cmdmailer.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
