"""Tests for the Pillow image adapter."""

from __future__ import annotations

import pytest
from PIL import Image

from dominant_color.imgproc.color_extract import CalculationConfig, DominantColorCalculator
from dominant_color.imgproc.pil_adapter import pixel_buffer_from_image
from dominant_color.imgproc.pixels import RGBColor


def test_rgb_image_is_normalised() -> None:
    image = Image.new("RGB", (3, 2), (255, 0, 0))
    image.putpixel((2, 1), (0, 0, 255))

    pixels = pixel_buffer_from_image(image)

    assert (pixels.width, pixels.height) == (3, 2)
    assert pixels.get_pixel(0, 0) == RGBColor(1.0, 0.0, 0.0)
    assert pixels.get_pixel(2, 1) == RGBColor(0.0, 0.0, 1.0)


def test_alpha_channel_is_dropped() -> None:
    image = Image.new("RGBA", (1, 1), (0, 255, 0, 10))

    assert pixel_buffer_from_image(image).get_pixel(0, 0) == RGBColor(0.0, 1.0, 0.0)


def test_dominant_colour_of_pillow_image() -> None:
    image = Image.new("RGB", (4, 4), (0, 200, 0))

    color = DominantColorCalculator().calculate(pixel_buffer_from_image(image), CalculationConfig(smooth_factor=0))

    assert color.as_tuple() == pytest.approx((0.0, 1.0, 0.0))


def test_rejects_non_images() -> None:
    with pytest.raises(TypeError):
        pixel_buffer_from_image([[0, 0, 0]])


def test_adapter_is_exported_with_the_engine() -> None:
    from dominant_color import imgproc

    assert imgproc.pixel_buffer_from_image is pixel_buffer_from_image
    assert "pixel_buffer_from_image" in imgproc.__all__
