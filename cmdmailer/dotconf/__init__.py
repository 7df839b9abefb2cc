"""Module DotConf pour le fichier de configuration INI de cmdmailer.

Le fichier ~/.cmdmailer.conf contient trois sections :
    [message] from, to, subject
    [host]    address, port, user, password
    [logging] file, level

Classes principales:
    - IniSection, IniConfig: Interfaces abstraites
    - MessageSection, HostSection, LoggingSection: Sections immuables
    - MailerIniConfig: Contenu complet du fichier
    - LinuxIniConfigManager: Lecture et génération INI
"""

from cmdmailer.dotconf.base import (
    IniConfig,
    IniSection,
)
from cmdmailer.dotconf.manager import (
    LinuxIniConfigManager,
    MailerIniConfig,
)
from cmdmailer.dotconf.section import (
    HostSection,
    KeyedSection,
    LoggingSection,
    MessageSection,
)

__all__ = [
    # Interfaces abstraites
    "IniSection",
    "IniConfig",
    # Sections
    "KeyedSection",
    "MessageSection",
    "HostSection",
    "LoggingSection",
    # Implémentations
    "MailerIniConfig",
    "LinuxIniConfigManager",
]
