"""Small floating-point helpers."""

from __future__ import annotations

import math

EPSILON = 1e-9
LP_EPSILON = 1e-6


def is_valid(value: float) -> bool:
    """Whether ``value`` is a finite number."""
    return math.isfinite(value)


def float_equal(a: float, b: float, tolerance: float = LP_EPSILON) -> bool:
    """Compare two numbers within ``tolerance``.

    Two NaNs compare equal, as do any two non-finite values.
    """
    if is_valid(a) and is_valid(b):
        return abs(a - b) < tolerance
    if math.isnan(a) and math.isnan(b):
        return True
    return not math.isfinite(a) and not math.isfinite(b)


def round_up(value: float, decimal_places: int) -> float:
    """Round upwards at ``decimal_places``: ``round_up(1.3456, 2) == 1.35``."""
    multiplier = 10.0 ** decimal_places
    scaled = value * multiplier + 0.5
    rounded = math.copysign(math.floor(abs(scaled) + 0.5), scaled)
    return rounded / multiplier


def is_zero(value: float) -> bool:
    """Whether ``value`` is within 1e-6 of zero."""
    return abs(value) < LP_EPSILON


def sign(value: float) -> int:
    """Return 1, -1 or 0 according to the sign of ``value``."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0