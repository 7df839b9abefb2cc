"""Module de gestion des erreurs."""

from cmdmailer.errors.base import ErrorHandler, ErrorHandlerChain
from cmdmailer.errors.exceptions import (ApplicationError,
                                         ConfigurationError,
                                         ConfigurationMissingError,
                                         FileConfigurationError,
                                         CommandNotFoundError,
                                         DeliveryError,
                                         TransportError,
                                         GENERIC_FAILURE_EXIT_CODE,
                                         CONFIGURATION_EXIT_CODE,
                                         COMMAND_NOT_FOUND_EXIT_CODE,
                                         DELIVERY_EXIT_CODE)
from cmdmailer.errors.console_handler import ConsoleErrorHandler
from cmdmailer.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "ConfigurationMissingError",
    "FileConfigurationError",
    "CommandNotFoundError",
    "DeliveryError",
    "TransportError",
    "GENERIC_FAILURE_EXIT_CODE",
    "CONFIGURATION_EXIT_CODE",
    "COMMAND_NOT_FOUND_EXIT_CODE",
    "DELIVERY_EXIT_CODE",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
