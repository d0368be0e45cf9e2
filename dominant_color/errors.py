"""Exceptions raised by the dominant colour package."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument outside its valid domain."""


class EmptyImageError(InvalidArgumentError):
    """Raised when a statistic is requested for an image without pixels."""
