"""Dominant colour extraction from decoded pixel buffers."""

__version__ = "0.1.0"
