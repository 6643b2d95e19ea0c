"""Logging setup driven by application settings."""

from __future__ import annotations

import logging
import sys

from userbase_config.settings import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure application logging.

    Sets up console output with timestamps and module names and applies
    the configured log level to the userbase loggers. DEBUG is forced
    when ``settings.debug`` is enabled.
    """
    settings = settings or get_settings()
    log_level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)

    logging.basicConfig(
        level=log_level,
        format=settings.log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("userbase").setLevel(log_level)
