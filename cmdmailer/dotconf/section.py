"""Sections du fichier ~/.cmdmailer.conf.

Chaque section est une dataclass immuable dont les champs sont des
chaînes ; une chaîne vide signifie "non renseigné". Les clés INI qui
ne sont pas des identifiants Python valides (``from``, ``to``) sont
associées à un nom de champ via ``_keys``.
"""

from dataclasses import dataclass, fields
from typing import ClassVar

from cmdmailer.dotconf.base import IniSection


@dataclass(frozen=True)
class KeyedSection(IniSection):
    """Classe de base des sections de cmdmailer.

    Attributes:
        _keys: Correspondance nom de champ -> clé INI, pour les
            champs dont la clé diffère du nom.
    """

    _keys: ClassVar[dict[str, str]] = {}

    @staticmethod
    def section_name() -> str:
        """Retourne le nom de la section.

        Doit être redéfini dans les classes dérivées.

        Raises:
            NotImplementedError: Si non redéfini.
        """
        raise NotImplementedError("section_name() doit être redéfini")

    @classmethod
    def _key(cls, field_name: str) -> str:
        return cls._keys.get(field_name, field_name)

    def to_dict(self) -> dict[str, str]:
        """Convertit la section en dictionnaire clé INI -> valeur.

        Returns:
            Dictionnaire des paires clé=valeur, clés INI incluses.
        """
        return {
            self._key(f.name): str(getattr(self, f.name))
            for f in fields(self)
        }

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> "KeyedSection":
        """Crée une instance depuis les paires lues dans le fichier.

        Les clés inconnues sont ignorées, les valeurs sont
        débarrassées des espaces de bord.

        Args:
            data: Dictionnaire des paires clé=valeur.

        Returns:
            Instance de la section.
        """
        values = {}
        for f in fields(cls):
            key = cls._key(f.name)
            if key in data:
                values[f.name] = data[key].strip()
        return cls(**values)

    @classmethod
    def unknown_keys(cls, data: dict[str, str]) -> list[str]:
        """Liste les clés de data qui n'appartiennent pas à la section."""
        known = {cls._key(f.name) for f in fields(cls)}
        return sorted(key for key in data if key not in known)


@dataclass(frozen=True)
class MessageSection(KeyedSection):
    """Section [message] : adressage du rapport."""

    sender: str = ""
    recipient: str = ""
    subject: str = ""

    _keys: ClassVar[dict[str, str]] = {"sender": "from", "recipient": "to"}

    @staticmethod
    def section_name() -> str:
        return "message"


@dataclass(frozen=True)
class HostSection(KeyedSection):
    """Section [host] : serveur SMTP et identifiants."""

    address: str = ""
    port: str = ""
    user: str = ""
    password: str = ""

    @staticmethod
    def section_name() -> str:
        return "host"


@dataclass(frozen=True)
class LoggingSection(KeyedSection):
    """Section [logging] : journal d'exécution optionnel."""

    file: str = ""
    level: str = ""

    @staticmethod
    def section_name() -> str:
        return "logging"
