"""Journal d'exécution dans un fichier."""

import logging
from pathlib import Path
from typing import Optional

from cmdmailer.logging.base import Logger

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class FileLogger(Logger):
    """
    Journal d'une exécution de cmdmailer, écrit dans un fichier.

    - un logger nommé par fichier : deux instances sur le même
      chemin partagent le même handler
    - UTF-8, une ligne par message, écrite sur disque aussitôt
    - aucune propagation vers le logger racine, stdout et stderr
      restent à la commande surveillée
    """

    def __init__(
        self,
        log_file: str,
        level: str = "INFO",
        log_format: Optional[str] = None
    ) -> None:
        """
        Ouvre (ou reprend) le journal.

        Args:
            log_file: Chemin du fichier, répertoires créés au besoin
            level: DEBUG, INFO, WARNING, ERROR ou CRITICAL
            log_format: Format des lignes (défaut: DEFAULT_FORMAT)
        """
        self.log_file = log_file
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            numeric_level = logging.INFO

        self.logger = logging.getLogger(f"cmdmailer:{log_file}")
        self.logger.setLevel(numeric_level)
        self.logger.propagate = False

        existing = [
            h for h in self.logger.handlers
            if isinstance(h, logging.FileHandler)
        ]
        if existing:
            self.handler = existing[0]
        else:
            self.handler = logging.FileHandler(log_file, encoding="utf-8")
            self.handler.setFormatter(
                logging.Formatter(log_format or DEFAULT_FORMAT)
            )
            self.logger.addHandler(self.handler)

    def _write(self, level: int, message: str) -> None:
        self.logger.log(level, message)
        self.handler.flush()

    def log_info(self, message: str) -> None:
        self._write(logging.INFO, message)

    def log_warning(self, message: str) -> None:
        self._write(logging.WARNING, message)

    def log_error(self, message: str) -> None:
        self._write(logging.ERROR, message)
