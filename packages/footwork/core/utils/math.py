"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

Number = TypeVar("Number", int, float)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def clamp01(value: float) -> float:
    """Clamp a normalized court coordinate to [0, 1]."""
    return clamp(float(value), 0.0, 1.0)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b.

    Written as a weighted sum so that ``t == 0`` returns ``a`` and ``t == 1``
    returns ``b`` exactly (no float drift at the endpoints).

    Args:
        a: Start value
        b: End value
        t: Interpolation factor [0, 1]

    Returns:
        Interpolated value
    """
    return float(a) * (1.0 - t) + float(b) * t


def smoothstep(t: float) -> float:
    """Ease-in-out curve ``t²(3 - 2t)`` with input clamped to [0, 1].

    Example:
        >>> smoothstep(0.5)
        0.5
        >>> smoothstep(2.0)
        1.0
    """
    t = clamp(float(t), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding up.

    ``round()`` uses banker's rounding (``round(522.5) == 522``); durations
    are rounded the way a stopwatch would (``523``).
    """
    return int(math.floor(value + 0.5))
