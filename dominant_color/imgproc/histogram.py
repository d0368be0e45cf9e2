"""Circular hue histogram built from pixel samples."""

from __future__ import annotations

import logging
import math
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from itertools import repeat
from typing import Iterable, Iterator, Sequence

from dominant_color.errors import InvalidArgumentError
from dominant_color.imgproc.color_space import rgb_to_hsv
from dominant_color.imgproc.pixels import PixelBuffer, RGBColor

logger = logging.getLogger(__name__)

MAX_HUE = 360
BUCKET_COUNT = MAX_HUE + 1
MAX_SMOOTH_FACTOR = 360


@dataclass(frozen=True, slots=True)
class HueHistogram:
    """Occurrence counts for every integer hue degree from 0 to 360 inclusive.

    Bucket 360 duplicates the angle of bucket 0 but is counted separately.
    Neighbours are taken modulo the bucket count, so the histogram is circular.
    """

    counts: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.counts) != BUCKET_COUNT:
            raise InvalidArgumentError(
                f"A hue histogram needs {BUCKET_COUNT} buckets, got {len(self.counts)}."
            )
        if any(count < 0 for count in self.counts):
            raise InvalidArgumentError("Hue histogram counts must be non-negative.")

    @classmethod
    def empty(cls) -> HueHistogram:
        return cls(counts=(0,) * BUCKET_COUNT)

    @classmethod
    def from_mapping(cls, occurrences: dict[int, int]) -> HueHistogram:
        """Build a histogram from a sparse ``{hue: count}`` mapping."""

        counts = [0] * BUCKET_COUNT
        for hue, count in occurrences.items():
            if not 0 <= hue <= MAX_HUE:
                raise InvalidArgumentError(f"Hue bucket {hue} is outside 0..{MAX_HUE}.")
            counts[hue] = count
        return cls(counts=tuple(counts))

    @property
    def total(self) -> int:
        return sum(self.counts)

    @property
    def is_empty(self) -> bool:
        """``True`` when no pixel passed the filters."""

        return not any(self.counts)

    def __getitem__(self, hue: int) -> int:
        return self.counts[hue]

    def __iter__(self) -> Iterator[int]:
        return iter(self.counts)

    def __len__(self) -> int:
        return BUCKET_COUNT


def hue_bucket(hue: float) -> int:
    """Round a hue in degrees half-up to its bucket index."""

    return min(MAX_HUE, max(0, math.floor(hue + 0.5)))


def build_histogram(
    pixels: PixelBuffer,
    saturation_threshold: float,
    brightness_threshold: float,
    *,
    workers: int = 1,
) -> HueHistogram:
    """Count the hue of every pixel that is saturated and bright enough.

    Pixels whose saturation or brightness does not exceed the thresholds are
    left out entirely. With ``workers`` above one the pixels are split into
    contiguous chunks counted on a thread pool and the partial counts are
    summed, which gives the same histogram as a serial pass.
    """

    _require_finite("saturation_threshold", saturation_threshold)
    _require_finite("brightness_threshold", brightness_threshold)
    if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
        raise InvalidArgumentError(f"workers must be a positive integer, got {workers!r}.")

    samples = pixels.pixels
    if workers == 1 or len(samples) < workers:
        occurrences = _count_hues(samples, saturation_threshold, brightness_threshold)
    else:
        chunks = list(_split(samples, workers))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            partials = executor.map(
                _count_hues,
                chunks,
                repeat(saturation_threshold),
                repeat(brightness_threshold),
            )
            occurrences = sum(partials, Counter())

    histogram = HueHistogram.from_mapping(dict(occurrences))
    logger.debug(
        "Built hue histogram from %d pixels: %d counted, %d filtered out",
        len(samples),
        histogram.total,
        len(samples) - histogram.total,
    )
    return histogram


def smooth_histogram(histogram: HueHistogram, smooth_factor: int) -> HueHistogram:
    """Apply a circular box filter of radius ``smooth_factor``.

    Every output bucket holds the truncated mean of the ``2 * smooth_factor + 1``
    buckets centred on it, wrapping around the ends of the histogram. A factor
    of zero returns an unchanged copy.
    """

    if isinstance(smooth_factor, bool) or not isinstance(smooth_factor, int):
        raise InvalidArgumentError(f"smooth_factor must be an integer, got {smooth_factor!r}.")
    if smooth_factor < 0 or smooth_factor > MAX_SMOOTH_FACTOR:
        raise InvalidArgumentError(
            f"smooth_factor must be between 0 and {MAX_SMOOTH_FACTOR}, got {smooth_factor}."
        )
    if smooth_factor == 0:
        return HueHistogram(counts=histogram.counts)

    counts = histogram.counts
    window = 2 * smooth_factor + 1
    window_sum = sum(counts[x % BUCKET_COUNT] for x in range(-smooth_factor, smooth_factor + 1))

    smoothed: list[int] = []
    for i in range(BUCKET_COUNT):
        smoothed.append(window_sum // window)
        window_sum += counts[(i + smooth_factor + 1) % BUCKET_COUNT]
        window_sum -= counts[(i - smooth_factor) % BUCKET_COUNT]

    logger.debug("Smoothed hue histogram with a window of %d buckets", window)
    return HueHistogram(counts=tuple(smoothed))


def _count_hues(
    samples: Iterable[RGBColor],
    saturation_threshold: float,
    brightness_threshold: float,
) -> Counter[int]:
    occurrences: Counter[int] = Counter()
    for pixel in samples:
        hsv = rgb_to_hsv(pixel)
        if hsv.saturation > saturation_threshold and hsv.value > brightness_threshold:
            occurrences[hue_bucket(hsv.hue)] += 1
    return occurrences


def _split(samples: Sequence[RGBColor], parts: int) -> Iterator[Sequence[RGBColor]]:
    chunk_size = math.ceil(len(samples) / parts)
    for start in range(0, len(samples), chunk_size):
        yield samples[start:start + chunk_size]


def _require_finite(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be a finite number, got {value!r}.")
