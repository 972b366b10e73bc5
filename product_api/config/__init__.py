"""Configuration module."""

from product_api.config.configuration import (
    AppConfig,
    ConfigurationError,
    DatabaseConfig,
    LoggingConfig,
    ServerConfig,
    get_config,
    get_environment,
    load_config,
    reset_config,
)
from product_api.config.logging_setup import configure_logging

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "LoggingConfig",
    "ServerConfig",
    "configure_logging",
    "get_config",
    "get_environment",
    "load_config",
    "reset_config",
]
