"""Histogram analysis and the average colour fallback."""

from __future__ import annotations

import math

from dominant_color.errors import EmptyImageError
from dominant_color.imgproc.color_space import hsv_to_rgb
from dominant_color.imgproc.histogram import HueHistogram
from dominant_color.imgproc.pixels import PixelBuffer, RGBColor


def find_dominant_hue(histogram: HueHistogram) -> int:
    """Return the bucket with the highest count, preferring the lowest hue on ties.

    An empty histogram yields bucket 0, so callers that need a meaningful
    answer should check ``histogram.is_empty`` first.
    """

    dominant = 0
    for hue, count in enumerate(histogram.counts):
        if count > histogram.counts[dominant]:
            dominant = hue
    return dominant


def to_rgb(dominant_hue: int, saturation: float = 1.0, value: float = 1.0, *, quantize: bool = False) -> RGBColor:
    return hsv_to_rgb(dominant_hue, saturation, value, quantize=quantize)


def average_rgb(pixels: PixelBuffer) -> RGBColor:
    """Return the per-channel mean over every pixel of the image."""

    if not pixels.size:
        raise EmptyImageError(
            f"Cannot average the colour of a {pixels.width}x{pixels.height} image without pixels."
        )

    count = pixels.size
    total_red = math.fsum(pixel.r for pixel in pixels)
    total_green = math.fsum(pixel.g for pixel in pixels)
    total_blue = math.fsum(pixel.b for pixel in pixels)
    return RGBColor(total_red / count, total_green / count, total_blue / count)
