"""Tests for logging configuration."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest
import pytest_mock

from dominant_color.monitoring.logging import PACKAGE_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def _restore_package_level() -> Iterator[None]:
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield
    logger.setLevel(level)


def test_configure_logging_uses_settings_level(
    monkeypatch: pytest.MonkeyPatch,
    mocker: pytest_mock.MockerFixture,
) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    basic_config = mocker.patch("dominant_color.monitoring.logging.logging.basicConfig")

    configure_logging()

    assert basic_config.call_args.kwargs["level"] == logging.DEBUG
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG


def test_package_logger_level_applies_to_modules(
    monkeypatch: pytest.MonkeyPatch,
    mocker: pytest_mock.MockerFixture,
) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    mocker.patch("dominant_color.monitoring.logging.logging.basicConfig")

    configure_logging()

    module_logger = logging.getLogger("dominant_color.imgproc.histogram")
    assert not module_logger.isEnabledFor(logging.DEBUG)
    assert module_logger.isEnabledFor(logging.WARNING)


def test_unknown_level_defaults_to_info(
    monkeypatch: pytest.MonkeyPatch,
    mocker: pytest_mock.MockerFixture,
) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    mocker.patch("dominant_color.monitoring.logging.logging.basicConfig")

    configure_logging()

    assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO
