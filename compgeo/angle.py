"""Angle sign normalisation."""

import math

from compgeo.utils import close_equal


def no_negative_zero(x: float) -> float:
    """Replace negative zero with positive zero."""
    return 0.0 if x == 0.0 else x


def correct_angle_signs(x: float) -> float:
    """Remove a negative pi or a negative zero from an angle."""
    if close_equal(x, -math.pi):
        return x + math.pi
    return no_negative_zero(x)