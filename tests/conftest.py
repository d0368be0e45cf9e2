"""Shared fixtures."""

from __future__ import annotations

from typing import Iterator

import pytest

from dominant_color.config.settings import get_settings
from dominant_color.imgproc.pixels import PixelBuffer, RGBColor

RED = RGBColor(1.0, 0.0, 0.0)
NEAR_BLACK = RGBColor(0.05, 0.02, 0.02)
GRAY = RGBColor(0.5, 0.5, 0.5)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def red_image() -> PixelBuffer:
    """2x2 image with three red pixels and one near-black pixel."""

    return PixelBuffer.from_rows([[RED, RED], [RED, NEAR_BLACK]])


@pytest.fixture
def gray_image() -> PixelBuffer:
    return PixelBuffer.uniform(3, 3, GRAY)
