"""Module de configuration."""

from cmdmailer.config.resolver import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_DOTENV_PATH,
    REQUIRED_FIELDS,
    ConfigOverrides,
    ConfigResolver,
)
from cmdmailer.config.settings import (
    DEFAULT_SMTP_PORT,
    DeliveryConfig,
    LoggingSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_DOTENV_PATH",
    "DEFAULT_SMTP_PORT",
    "REQUIRED_FIELDS",
    "ConfigOverrides",
    "ConfigResolver",
    "DeliveryConfig",
    "LoggingSettings",
]
