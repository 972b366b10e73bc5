"""Configuration module for the Product API.

Loads settings from environment-specific config files:
- APP_ENV=dev  → config_dev.yaml
- APP_ENV=test → config_test.yaml
- Default      → config.yaml

Optional overrides (PRODUCTS_DB_PATH, LOG_LEVEL) are read from the
environment after loading the .env file.
Fails fast with clear error messages if configuration is missing or invalid.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def _get_project_root() -> Path:
    """Get the project root directory (where config.yaml lives)."""
    # Navigate from product_api/config/ up to project root
    return Path(__file__).parent.parent.parent


def _get_config_filename() -> str:
    """Get config filename based on APP_ENV environment variable.

    Returns:
        Config filename:
        - APP_ENV=dev  → config_dev.yaml
        - APP_ENV=test → config_test.yaml
        - Default      → config.yaml
    """
    app_env = os.environ.get("APP_ENV", "").lower()

    if app_env == "dev":
        return "config_dev.yaml"
    elif app_env == "test":
        return "config_test.yaml"
    else:
        return "config.yaml"


def _load_yaml_config() -> dict:
    """Load configuration from environment-specific config file."""
    config_filename = _get_config_filename()
    config_path = _get_project_root() / config_filename

    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}. "
            f"Set APP_ENV to 'dev' or 'test', or create {config_filename}."
        )

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def _get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get optional environment variable with default."""
    return os.environ.get(key, default)


def _as_float(section: str, key: str, value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"'{section}.{key}' must be a number, got {value!r}")


def _as_int(section: str, key: str, value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"'{section}.{key}' must be an integer, got {value!r}")


@dataclass(frozen=True)
class DatabaseConfig:
    """SQLite store configuration."""
    path: str
    timeout_seconds: float


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    level: str
    format: str


@dataclass(frozen=True)
class ServerConfig:
    """HTTP server configuration."""
    host: str
    port: int
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration container."""
    database: DatabaseConfig
    logging: LoggingConfig
    server: ServerConfig


DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def load_config() -> AppConfig:
    """
    Load and validate all application configuration.

    Loads from the APP_ENV-specific YAML file and applies environment
    overrides from .env / the process environment.

    Returns:
        AppConfig: Validated application configuration.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    # Load environment variables from .env file
    load_dotenv()

    yaml_config = _load_yaml_config()

    # Build Database config
    db_section = yaml_config.get("database", {})

    database_config = DatabaseConfig(
        path=_get_optional_env("PRODUCTS_DB_PATH", db_section.get("path", "products.db")),
        timeout_seconds=_as_float("database", "timeout_seconds", db_section.get("timeout_seconds", 5.0)),
    )

    # Build Logging config
    logging_section = yaml_config.get("logging", {})
    level = str(_get_optional_env("LOG_LEVEL", logging_section.get("level", "INFO"))).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"Unknown log level: {level}")

    logging_config = LoggingConfig(
        level=level,
        format=logging_section.get("format", DEFAULT_LOG_FORMAT),
    )

    # Build Server config
    server_section = yaml_config.get("server", {})

    server_config = ServerConfig(
        host=server_section.get("host", "127.0.0.1"),
        port=_as_int("server", "port", server_section.get("port", 8000)),
        cors_origins=list(server_section.get("cors_origins", ["*"])),
    )

    return AppConfig(
        database=database_config,
        logging=logging_config,
        server=server_config,
    )


# Module-level singleton for convenience
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the application configuration singleton.

    Lazy-loads configuration on first access.
    Config file is selected based on APP_ENV environment variable.

    Returns:
        AppConfig: Application configuration.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_environment() -> str:
    """Get current environment name.

    Returns:
        'dev', 'test', or 'default' based on APP_ENV.
    """
    app_env = os.environ.get("APP_ENV", "").lower()
    return app_env if app_env in ("dev", "test") else "default"


def reset_config() -> None:
    """Reset the config singleton. Useful for testing."""
    global _config
    _config = None
