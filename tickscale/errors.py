from __future__ import annotations


class TickScaleError(ValueError):
    """Base error for axis tick-scale computation."""


class InvalidInputError(TickScaleError):
    """Raised when values, dimension or axis options cannot produce a scale."""
