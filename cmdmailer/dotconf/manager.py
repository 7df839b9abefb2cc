"""Lecture du fichier de configuration INI de cmdmailer.

Ce module fournit :
    - MailerIniConfig : contenu du fichier ~/.cmdmailer.conf, une
      dataclass immuable par section.
    - LinuxIniConfigManager : lecture du fichier et génération du
      contenu INI (utilisé pour l'exemple affiché par -help).
"""

import configparser
from dataclasses import dataclass, field
from io import StringIO
from pathlib import Path
from typing import Optional

from cmdmailer.dotconf.base import IniConfig, IniSection
from cmdmailer.dotconf.section import (
    HostSection,
    KeyedSection,
    LoggingSection,
    MessageSection,
)
from cmdmailer.errors.exceptions import FileConfigurationError
from cmdmailer.logging.base import Logger


def _new_parser() -> configparser.ConfigParser:
    # Pas d'interpolation : un mot de passe peut contenir "%".
    return configparser.ConfigParser(interpolation=None)


@dataclass(frozen=True)
class MailerIniConfig(IniConfig):
    """Contenu du fichier de configuration de cmdmailer.

    Attributes:
        message: Section [message].
        host: Section [host].
        logging: Section [logging].
    """

    message: MessageSection = field(default_factory=MessageSection)
    host: HostSection = field(default_factory=HostSection)
    logging: LoggingSection = field(default_factory=LoggingSection)

    def sections(self) -> list[IniSection]:
        return [self.message, self.host, self.logging]

    @classmethod
    def from_dict(
        cls, data: dict[str, dict[str, str]]
    ) -> "MailerIniConfig":
        """Construit la configuration depuis {section: {clé: valeur}}.

        Args:
            data: Contenu brut du fichier.

        Returns:
            Instance de MailerIniConfig (sections absentes vides).
        """
        return cls(
            message=MessageSection.from_dict(
                data.get(MessageSection.section_name(), {})
            ),
            host=HostSection.from_dict(
                data.get(HostSection.section_name(), {})
            ),
            logging=LoggingSection.from_dict(
                data.get(LoggingSection.section_name(), {})
            ),
        )

    @classmethod
    def from_file(cls, path: Path) -> "MailerIniConfig":
        return cls.from_dict(LinuxIniConfigManager().read(path))


SECTION_TYPES: tuple[type[KeyedSection], ...] = (
    MessageSection,
    HostSection,
    LoggingSection,
)


class LinuxIniConfigManager:
    """Gestionnaire du fichier de configuration INI.

    Utilise configparser pour la lecture avec logging optionnel
    des avertissements (sections ou clés inconnues).

    Attributes:
        logger: Logger optionnel pour tracer les opérations.

    Example:
        >>> manager = LinuxIniConfigManager()
        >>> config = manager.load(Path.home() / ".cmdmailer.conf")
        >>> print(config.host.address)
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        """Initialise le gestionnaire.

        Args:
            logger: Logger optionnel pour les messages.
        """
        self.logger = logger

    def _warn(self, message: str) -> None:
        if self.logger:
            self.logger.log_warning(message)

    def read(self, path: Path) -> dict[str, dict[str, str]]:
        """Lit un fichier INI et retourne son contenu.

        Args:
            path: Chemin du fichier INI.

        Returns:
            Dictionnaire imbriqué {section: {clé: valeur}}.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            FileConfigurationError: Si le fichier est illisible ou
                mal formé.
        """
        if not path.exists():
            raise FileNotFoundError(f"Fichier non trouvé : {path}")

        parser = _new_parser()
        try:
            with open(path, encoding="utf-8") as f:
                parser.read_file(f)
        except (configparser.Error, OSError, UnicodeDecodeError) as e:
            raise FileConfigurationError(
                f"Cannot parse configuration file {path}: {e}"
            ) from e

        return {
            section: dict(parser[section])
            for section in parser.sections()
        }

    def load(self, path: Path) -> MailerIniConfig:
        """Lit le fichier et construit la configuration typée.

        Les sections et clés inconnues sont signalées au logger
        puis ignorées.

        Args:
            path: Chemin du fichier INI.

        Returns:
            Instance de MailerIniConfig.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            FileConfigurationError: Si le fichier est mal formé.
        """
        data = self.read(path)
        known = {section.section_name(): section for section in SECTION_TYPES}
        for name, values in data.items():
            section = known.get(name)
            if section is None:
                self._warn(f"Section [{name}] inconnue ignorée dans {path}.")
                continue
            for key in section.unknown_keys(values):
                self._warn(f"Clé {name}.{key} inconnue ignorée dans {path}.")

        config = MailerIniConfig.from_dict(data)
        if self.logger:
            self.logger.log_info(f"Fichier {path} lu avec succès.")
        return config

    def config_to_ini(self, config: IniConfig) -> str:
        """Génère le contenu INI d'une configuration complète.

        Les clés vides sont omises.

        Args:
            config: Configuration à convertir.

        Returns:
            Contenu INI formaté complet.
        """
        parser = _new_parser()

        for section in config.sections():
            values = {k: v for k, v in section.to_dict().items() if v}
            if values:
                parser[section.section_name()] = values

        output = StringIO()
        parser.write(output)
        return output.getvalue()
