"""Numeric helpers: tolerant comparison and decimal rounding."""

from __future__ import annotations

import math

DEFAULT_TOLERANCE = 0.000001


def close_equal(a: float, b: float, tolerance: float | None = None) -> bool:
    """Return True if a and b differ by less than the tolerance (default 1e-6)."""
    if tolerance is None:
        tolerance = DEFAULT_TOLERANCE
    return abs(a - b) < tolerance


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero, keeping the sign of zero."""
    if not math.isfinite(value):
        return value
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return math.copysign(float(whole), value)


def round_to_n_decimals(x: float, n: int) -> float:
    """Round x to n decimal places, ties away from zero."""
    if n < 0:
        raise ValueError(f"number of decimals must not be negative, got {n}")
    if not math.isfinite(x):
        return x
    factor = 10.0**n
    return _round_half_away(x * factor) / factor


def round6(x: float) -> float:
    """Round x to 6 decimal places."""
    return round_to_n_decimals(x, 6)