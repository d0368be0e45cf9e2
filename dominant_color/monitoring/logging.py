"""Logging configuration module."""

from __future__ import annotations

import logging

from dominant_color.config.settings import get_settings

PACKAGE_LOGGER = "dominant_color"


def configure_logging() -> None:
    """Configure root logging and the package logger from settings.

    The package logger gets the configured level even when the host
    application has already set up the root logger.
    """

    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
