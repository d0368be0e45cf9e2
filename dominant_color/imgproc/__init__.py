"""Colour statistics engine."""

from dominant_color.errors import EmptyImageError, InvalidArgumentError

from .analyzer import average_rgb, find_dominant_hue, to_rgb
from .color_extract import (
    CalculationConfig,
    DominantColorCalculator,
    DominantColorResult,
    Strategy,
    calculate_dominant_color,
)
from .color_space import hsv_to_rgb, rgb_to_hsv
from .histogram import HueHistogram, build_histogram, smooth_histogram
from .pil_adapter import pixel_buffer_from_image
from .pixels import HSVColor, PixelBuffer, RGBColor

__all__ = [
    "CalculationConfig",
    "DominantColorCalculator",
    "DominantColorResult",
    "EmptyImageError",
    "HSVColor",
    "HueHistogram",
    "InvalidArgumentError",
    "PixelBuffer",
    "RGBColor",
    "Strategy",
    "average_rgb",
    "build_histogram",
    "calculate_dominant_color",
    "find_dominant_hue",
    "hsv_to_rgb",
    "pixel_buffer_from_image",
    "rgb_to_hsv",
    "smooth_histogram",
    "to_rgb",
]
