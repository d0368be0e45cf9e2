"""Dominant colour extraction utilities."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from dominant_color.config.settings import Settings, get_settings
from dominant_color.errors import EmptyImageError, InvalidArgumentError
from dominant_color.imgproc.analyzer import average_rgb, find_dominant_hue, to_rgb
from dominant_color.imgproc.histogram import (
    MAX_SMOOTH_FACTOR,
    HueHistogram,
    build_histogram,
    smooth_histogram,
)
from dominant_color.imgproc.pixels import PixelBuffer, RGBColor
from dominant_color.metrics.prometheus_exporter import (
    dominant_color_calculations_total,
    dominant_color_fallback_total,
)

logger = logging.getLogger(__name__)


class Strategy(str, Enum):
    """How the representative colour of an image is derived."""

    HUE_HISTOGRAM = "hue_histogram"
    AVERAGE_RGB = "average_rgb"


@dataclass(frozen=True, slots=True)
class CalculationConfig:
    """Parameters of a single dominant colour calculation."""

    saturation_threshold: float = 0.1
    brightness_threshold: float = 0.1
    smooth_factor: int = 5
    strategy: Strategy = Strategy.HUE_HISTOGRAM
    saturation: float = 1.0
    value: float = 1.0
    workers: int = 1
    fallback_to_average: bool = True

    def __post_init__(self) -> None:
        if not 0 <= self.smooth_factor <= MAX_SMOOTH_FACTOR:
            raise InvalidArgumentError(
                f"smooth_factor must be between 0 and {MAX_SMOOTH_FACTOR}, got {self.smooth_factor}."
            )
        if self.workers < 1:
            raise InvalidArgumentError(f"workers must be a positive integer, got {self.workers}.")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> CalculationConfig:
        """Build the configuration from environment-driven settings."""

        settings = settings or get_settings()
        try:
            strategy = Strategy(settings.strategy.strip().lower())
        except ValueError as exc:
            raise InvalidArgumentError(f"Unknown dominant colour strategy: {settings.strategy!r}.") from exc

        return cls(
            saturation_threshold=settings.saturation_threshold,
            brightness_threshold=settings.brightness_threshold,
            smooth_factor=settings.smooth_factor,
            strategy=strategy,
            workers=settings.workers,
            fallback_to_average=settings.fallback_to_average,
        )


@dataclass(frozen=True, slots=True)
class DominantColorResult:
    """Colour picked for an image together with the statistics behind it."""

    color: RGBColor
    strategy: Strategy
    dominant_hue: int | None = None
    histogram: HueHistogram | None = None
    smoothed_histogram: HueHistogram | None = None
    fallback: bool = False
    smoothing_collapsed: bool = False


class DominantColorCalculator:
    """Stateless pipeline turning a pixel buffer into one representative colour."""

    def calculate(self, pixels: PixelBuffer, config: CalculationConfig | None = None) -> RGBColor:
        """Return the dominant colour of ``pixels``."""

        return self.analyze(pixels, config).color

    def analyze(self, pixels: PixelBuffer, config: CalculationConfig | None = None) -> DominantColorResult:
        """Run the configured strategy and keep the intermediate statistics."""

        config = config or CalculationConfig()
        if not pixels.size:
            raise EmptyImageError(f"Cannot pick a colour for an empty {pixels.width}x{pixels.height} image.")
        dominant_color_calculations_total.labels(strategy=config.strategy.value).inc()

        if config.strategy is Strategy.AVERAGE_RGB:
            return DominantColorResult(color=average_rgb(pixels), strategy=Strategy.AVERAGE_RGB)

        histogram = build_histogram(
            pixels,
            config.saturation_threshold,
            config.brightness_threshold,
            workers=config.workers,
        )
        if histogram.is_empty and config.fallback_to_average:
            logger.warning(
                "No pixel of the %dx%d image passed the saturation/brightness filters; "
                "using the average colour instead",
                pixels.width,
                pixels.height,
            )
            dominant_color_fallback_total.inc()
            return DominantColorResult(
                color=average_rgb(pixels),
                strategy=Strategy.AVERAGE_RGB,
                histogram=histogram,
                fallback=True,
            )

        smoothed = smooth_histogram(histogram, config.smooth_factor)
        smoothing_collapsed = smoothed.is_empty and not histogram.is_empty
        if smoothing_collapsed:
            logger.debug(
                "Smoothing window of %d buckets truncated every count to zero; picking the raw peak",
                2 * config.smooth_factor + 1,
            )
        dominant_hue = find_dominant_hue(histogram if smoothing_collapsed else smoothed)
        logger.debug("Dominant hue of %dx%d image is %d", pixels.width, pixels.height, dominant_hue)
        return DominantColorResult(
            color=to_rgb(dominant_hue, config.saturation, config.value),
            strategy=Strategy.HUE_HISTOGRAM,
            dominant_hue=dominant_hue,
            histogram=histogram,
            smoothed_histogram=smoothed,
            smoothing_collapsed=smoothing_collapsed,
        )


def calculate_dominant_color(pixels: PixelBuffer) -> RGBColor:
    """Return the dominant colour using the configuration from the environment."""

    return DominantColorCalculator().calculate(pixels, CalculationConfig.from_settings())
