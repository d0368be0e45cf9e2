"""Request and response models of the HTTP adapter."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

from dominant_color.imgproc.color_extract import Strategy

Channel = Annotated[float, Field(ge=0.0, le=1.0)]


class DominantColorRequest(BaseModel):
    """Decoded image sent by a client, pixels in row-major order."""

    width: int = Field(ge=0)
    height: int = Field(ge=0)
    pixels: list[tuple[Channel, Channel, Channel]]

    strategy: Strategy | None = None
    saturation_threshold: float | None = None
    brightness_threshold: float | None = None
    smooth_factor: int | None = Field(default=None, ge=0, le=360)
    saturation: Channel | None = None
    value: Channel | None = None


class DominantColorResponse(BaseModel):
    """Colour picked for the submitted image."""

    color: tuple[float, float, float]
    hex: str
    strategy: Strategy
    dominant_hue: int | None
    fallback: bool
