"""Logging setup driven by LoggingConfig."""

import logging

from product_api.config.configuration import LoggingConfig


def configure_logging(logging_config: LoggingConfig) -> None:
    """Configure the root logger from the application config."""
    logging.basicConfig(
        level=logging_config.level,
        format=logging_config.format,
        force=True,
    )
    logging.getLogger(__name__).debug(f"Logging configured at level {logging_config.level}")
