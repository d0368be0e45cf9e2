"""Tests for the pixel buffer value type."""

from __future__ import annotations

import pytest

from dominant_color.errors import InvalidArgumentError
from dominant_color.imgproc.pixels import PixelBuffer, RGBColor


def test_from_rows_is_row_major() -> None:
    pixels = PixelBuffer.from_rows([[(1, 0, 0), (0, 1, 0)], [(0, 0, 1), (1, 1, 1)]])

    assert (pixels.width, pixels.height) == (2, 2)
    assert pixels.get_pixel(1, 0) == RGBColor(0.0, 1.0, 0.0)
    assert pixels.get_pixel(0, 1) == RGBColor(0.0, 0.0, 1.0)
    assert [len(row) for row in pixels.rows()] == [2, 2]


def test_pixel_count_must_match_dimensions() -> None:
    with pytest.raises(InvalidArgumentError):
        PixelBuffer.from_flat(2, 2, [(0.0, 0.0, 0.0)] * 3)


def test_ragged_rows_are_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        PixelBuffer.from_rows([[(0, 0, 0), (0, 0, 0)], [(0, 0, 0)]])


def test_negative_dimensions_are_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        PixelBuffer(width=-1, height=0, pixels=())


def test_get_pixel_outside_image() -> None:
    with pytest.raises(IndexError):
        PixelBuffer.uniform(2, 2, RGBColor(0.0, 0.0, 0.0)).get_pixel(2, 0)


def test_zero_area_buffer_is_allowed() -> None:
    pixels = PixelBuffer.from_rows([])

    assert pixels.size == 0
    assert list(pixels.rows()) == []
