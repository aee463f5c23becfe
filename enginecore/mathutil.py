"""Scalar math helpers shared by the vector and rotation types."""

from __future__ import annotations

import math

PI = 3.1415926535897932
SMALL_NUMBER = 1.0e-8
KINDA_SMALL_NUMBER = 1.0e-4

__all__ = [
    "PI",
    "SMALL_NUMBER",
    "KINDA_SMALL_NUMBER",
    "clamp",
    "lerp",
    "radians_to_degrees",
    "degrees_to_radians",
    "inv_sqrt",
    "square",
]


def clamp(x, min_value, max_value):
    """Clamp ``x`` into the range ``[min_value, max_value]``."""
    return max(min(x, max_value), min_value)


def lerp(a, b, alpha):
    """Linearly interpolate between ``a`` and ``b`` by ``alpha``."""
    return a * (1.0 - alpha) + b * alpha


def radians_to_degrees(rad: float) -> float:
    """Convert an angle from radians to degrees."""
    return rad * (180.0 / PI)


def degrees_to_radians(deg: float) -> float:
    """Convert an angle from degrees to radians."""
    return deg * (PI / 180.0)


def inv_sqrt(a: float) -> float:
    """Return the reciprocal square root of ``a``."""
    return 1.0 / math.sqrt(a)


def square(value):
    """Return ``value`` multiplied by itself."""
    return value * value