"""Value types shared by the colour statistics engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from dominant_color.errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class RGBColor:
    """RGB triple with every channel normalised to ``[0, 1]``."""

    r: float
    g: float
    b: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Return the colour as a ``#rrggbb`` string."""

        channels = (round(min(1.0, max(0.0, c)) * 255) for c in self.as_tuple())
        return "#" + "".join(f"{channel:02x}" for channel in channels)


@dataclass(frozen=True, slots=True)
class HSVColor:
    """Hue in degrees ``[0, 360)``, saturation and value in ``[0, 1]``."""

    hue: float
    saturation: float
    value: float


@dataclass(frozen=True, slots=True)
class PixelBuffer:
    """Immutable row-major grid of RGB pixels owned by the caller."""

    width: int
    height: int
    pixels: tuple[RGBColor, ...]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise InvalidArgumentError(
                f"Image dimensions must be non-negative, got {self.width}x{self.height}."
            )
        if len(self.pixels) != self.width * self.height:
            raise InvalidArgumentError(
                f"Expected {self.width * self.height} pixels for a {self.width}x{self.height} image, "
                f"got {len(self.pixels)}."
            )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[RGBColor | tuple[float, float, float]]]) -> PixelBuffer:
        """Build a buffer from a list of equally sized rows."""

        height = len(rows)
        width = len(rows[0]) if height else 0
        pixels: list[RGBColor] = []
        for index, row in enumerate(rows):
            if len(row) != width:
                raise InvalidArgumentError(f"Row {index} has {len(row)} pixels, expected {width}.")
            pixels.extend(_as_rgb(pixel) for pixel in row)
        return cls(width=width, height=height, pixels=tuple(pixels))

    @classmethod
    def from_flat(
        cls,
        width: int,
        height: int,
        pixels: Iterable[RGBColor | tuple[float, float, float]],
    ) -> PixelBuffer:
        """Build a buffer from a flat row-major pixel sequence."""

        return cls(width=width, height=height, pixels=tuple(_as_rgb(pixel) for pixel in pixels))

    @classmethod
    def uniform(cls, width: int, height: int, color: RGBColor) -> PixelBuffer:
        return cls(width=width, height=height, pixels=(color,) * (width * height))

    @property
    def size(self) -> int:
        return len(self.pixels)

    def get_pixel(self, x: int, y: int) -> RGBColor:
        """Return the pixel at column ``x`` and row ``y``."""

        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} image.")
        return self.pixels[y * self.width + x]

    def rows(self) -> Iterator[tuple[RGBColor, ...]]:
        for y in range(self.height):
            start = y * self.width
            yield self.pixels[start:start + self.width]

    def __iter__(self) -> Iterator[RGBColor]:
        return iter(self.pixels)

    def __len__(self) -> int:
        return len(self.pixels)


def _as_rgb(pixel: RGBColor | tuple[float, float, float]) -> RGBColor:
    if isinstance(pixel, RGBColor):
        return pixel
    r, g, b = pixel
    return RGBColor(float(r), float(g), float(b))
