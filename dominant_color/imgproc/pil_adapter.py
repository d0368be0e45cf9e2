"""Conversion of Pillow images into pixel buffers."""

from __future__ import annotations

from PIL import Image

from dominant_color.imgproc.pixels import PixelBuffer, RGBColor


def pixel_buffer_from_image(image: Image.Image) -> PixelBuffer:
    """Return the pixels of an already opened Pillow image as a buffer.

    Alpha and palette information is discarded by converting to RGB first.
    """

    if not isinstance(image, Image.Image):
        raise TypeError("Expected PIL.Image.Image instance")

    rgb = image if image.mode == "RGB" else image.convert("RGB")
    width, height = rgb.size
    access = rgb.load()
    pixels = []
    for y in range(height):
        for x in range(width):
            r, g, b = access[x, y]
            pixels.append(RGBColor(r / 255, g / 255, b / 255))
    return PixelBuffer(width=width, height=height, pixels=tuple(pixels))
