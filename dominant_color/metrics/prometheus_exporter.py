"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter


dominant_color_calculations_total = Counter(
    "dominant_color_calculations_total",
    "Total number of dominant colour calculations.",
    ["strategy"],
)

dominant_color_fallback_total = Counter(
    "dominant_color_fallback_total",
    "Hue histogram calculations that fell back to the average colour.",
)
