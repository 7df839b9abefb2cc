"""
cmdmailer - Exécute une commande et envoie son résultat par courriel.

Modules disponibles:
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions et chaîne de handlers (ErrorHandlerChain)
- capture: Capture bornée de stdout/stderr (CaptureBuffer, CaptureSink)
- commands: Exécution et classification (LinuxCommandExecutor, classify)
- report: Rapport HTML (ReportRenderer, format_duration)
- dotconf: Fichier ~/.cmdmailer.conf (LinuxIniConfigManager)
- credentials: Mot de passe SMTP (CredentialChain)
- config: Fusion et validation de la configuration (ConfigResolver)
- delivery: Envoi SMTP (SmtpMailTransport, DeliveryAdapter)
- pipeline: Enchaînement complet (CommandMailer)
"""

__version__ = "1.0.0"

from cmdmailer.logging import Logger, FileLogger
from cmdmailer.errors import (
    ApplicationError,
    ConfigurationError,
    ConfigurationMissingError,
    FileConfigurationError,
    CommandNotFoundError,
    DeliveryError,
    TransportError,
    ErrorHandler,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from cmdmailer.capture import (
    MAX_CAPTURE_BYTES,
    CaptureBuffer,
    CaptureSink,
    StreamTag,
)
from cmdmailer.commands import (
    RunStatistics,
    CommandRun,
    TerminationOutcome,
    CleanExit,
    ExitCodeFailure,
    SignalFailure,
    UnknownFailure,
    classify,
    CommandExecutor,
    LinuxCommandExecutor,
)
from cmdmailer.report import ReportDocument, ReportRenderer, format_duration
from cmdmailer.dotconf import (
    MessageSection,
    HostSection,
    LoggingSection,
    MailerIniConfig,
    LinuxIniConfigManager,
)
from cmdmailer.credentials import (
    CredentialProvider,
    EnvCredentialProvider,
    DotEnvCredentialProvider,
    KeyringCredentialProvider,
    CredentialChain,
)
from cmdmailer.config import (
    ConfigOverrides,
    ConfigResolver,
    DeliveryConfig,
    LoggingSettings,
)
from cmdmailer.delivery import (
    MailMessage,
    TransportConfig,
    MailTransport,
    SmtpMailTransport,
    DeliveryAdapter,
)
from cmdmailer.pipeline import CommandMailer

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Erreurs
    "ApplicationError",
    "ConfigurationError",
    "ConfigurationMissingError",
    "FileConfigurationError",
    "CommandNotFoundError",
    "DeliveryError",
    "TransportError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # Capture
    "MAX_CAPTURE_BYTES",
    "CaptureBuffer",
    "CaptureSink",
    "StreamTag",
    # Commandes
    "RunStatistics",
    "CommandRun",
    "TerminationOutcome",
    "CleanExit",
    "ExitCodeFailure",
    "SignalFailure",
    "UnknownFailure",
    "classify",
    "CommandExecutor",
    "LinuxCommandExecutor",
    # Rapport
    "ReportDocument",
    "ReportRenderer",
    "format_duration",
    # Configuration INI
    "MessageSection",
    "HostSection",
    "LoggingSection",
    "MailerIniConfig",
    "LinuxIniConfigManager",
    # Credentials
    "CredentialProvider",
    "EnvCredentialProvider",
    "DotEnvCredentialProvider",
    "KeyringCredentialProvider",
    "CredentialChain",
    # Configuration
    "ConfigOverrides",
    "ConfigResolver",
    "DeliveryConfig",
    "LoggingSettings",
    # Envoi
    "MailMessage",
    "TransportConfig",
    "MailTransport",
    "SmtpMailTransport",
    "DeliveryAdapter",
    # Pipeline
    "CommandMailer",
]
