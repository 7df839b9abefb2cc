"""Contrats du fichier ~/.cmdmailer.conf.

IniSection décrit un bloc ``[nom]`` et IniConfig le fichier entier.
Les implémentations sont des dataclasses immuables : le fichier est
lu une fois au démarrage et n'est jamais réécrit par cmdmailer.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class IniSection(ABC):
    """Bloc ``[nom]`` du fichier, valeurs textuelles."""

    @staticmethod
    @abstractmethod
    def section_name() -> str:
        """Nom du bloc, sans crochets (ex: "host")."""
        pass

    @abstractmethod
    def to_dict(self) -> dict[str, str]:
        """Paires clé INI -> valeur, telles qu'écrites dans le fichier."""
        pass

    @classmethod
    @abstractmethod
    def from_dict(cls, data: dict[str, str]) -> "IniSection":
        """Construit la section depuis les paires lues par configparser.

        Args:
            data: Paires clé INI -> valeur du bloc.
        """
        pass


class IniConfig(ABC):
    """Fichier de configuration complet."""

    @abstractmethod
    def sections(self) -> list[IniSection]:
        """Sections dans l'ordre d'écriture du fichier."""
        pass

    @classmethod
    @abstractmethod
    def from_file(cls, path: Path) -> "IniConfig":
        """Lit le fichier path.

        Raises:
            FileNotFoundError: Fichier absent.
            FileConfigurationError: Fichier illisible ou mal formé.
        """
        pass
