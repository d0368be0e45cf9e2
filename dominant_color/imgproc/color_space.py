"""RGB and HSV colour space conversions."""

from __future__ import annotations

import colorsys
import math

from dominant_color.imgproc.pixels import HSVColor, RGBColor


def rgb_to_hsv(color: RGBColor) -> HSVColor:
    """Convert a normalised RGB colour to HSV with hue in degrees.

    Achromatic colours get a hue and saturation of zero.
    """

    h, s, v = colorsys.rgb_to_hsv(color.r, color.g, color.b)
    return HSVColor(hue=(h * 360.0) % 360.0, saturation=s, value=v)


def hsv_to_rgb(hue: float, saturation: float, value: float, *, quantize: bool = False) -> RGBColor:
    """Convert HSV back to RGB using the six-sector algorithm.

    With ``quantize`` the channels are snapped to the nearest 8-bit level,
    which reproduces the output of legacy 8-bit colour pipelines.
    """

    sector = math.floor(hue / 60)
    hi = int(sector) % 6
    f = hue / 60 - sector

    v = value
    p = value * (1 - saturation)
    q = value * (1 - f * saturation)
    t = value * (1 - (1 - f) * saturation)

    if quantize:
        v, p, q, t = (_quantize(channel) for channel in (v, p, q, t))

    if hi == 0:
        return RGBColor(v, t, p)
    if hi == 1:
        return RGBColor(q, v, p)
    if hi == 2:
        return RGBColor(p, v, t)
    if hi == 3:
        return RGBColor(p, q, v)
    if hi == 4:
        return RGBColor(t, p, v)
    return RGBColor(v, p, q)


def _quantize(channel: float) -> float:
    return round(channel * 255) / 255
