"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dominant_color.errors import InvalidArgumentError


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


def _env_number(name: str, default: str, cast: type[int] | type[float]) -> int | float:
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as exc:
        raise InvalidArgumentError(f"{name} must be {cast.__name__}, got {raw!r}.") from exc


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Centralised project settings based on OS environment variables."""

    environment: str = "dev"
    log_level: str = "INFO"

    strategy: str = "hue_histogram"
    saturation_threshold: float = 0.1
    brightness_threshold: float = 0.1
    smooth_factor: int = 5
    workers: int = 1
    fallback_to_average: bool = True


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        strategy=os.getenv("DOMINANT_COLOR_STRATEGY", "hue_histogram"),
        saturation_threshold=_env_number("DOMINANT_COLOR_SATURATION_THRESHOLD", "0.1", float),
        brightness_threshold=_env_number("DOMINANT_COLOR_BRIGHTNESS_THRESHOLD", "0.1", float),
        smooth_factor=_env_number("DOMINANT_COLOR_SMOOTH_FACTOR", "5", int),
        workers=_env_number("DOMINANT_COLOR_WORKERS", "1", int),
        fallback_to_average=_env_bool("DOMINANT_COLOR_FALLBACK_TO_AVERAGE", True),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
