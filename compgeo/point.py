"""Operations on 2D points."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable

from compgeo.angle import correct_angle_signs
from compgeo.types import XY, BoundingBox
from compgeo.utils import close_equal


def create_point(x: float, y: float) -> XY:
    """Create a point."""
    return XY(x, y)


def p2p_dist(p1: XY, p2: XY) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2)


def p2p_angle(p1: XY, p2: XY) -> float:
    """Angle of the direction from p1 to p2, in (-pi, pi]."""
    return correct_angle_signs(math.atan2(p2.y - p1.y, p2.x - p1.x))


def angle_to_point(p2: XY) -> Callable[[XY], float]:
    """Return a function giving the angle from its argument to p2."""
    return lambda p1: p2p_angle(p1, p2)


def angle_from_point(p1: XY) -> Callable[[XY], float]:
    """Return a function giving the angle from p1 to its argument."""
    return lambda p2: p2p_angle(p1, p2)


def translate_point(translation: XY) -> Callable[[XY], XY]:
    """Return a function that moves a point by the given offset."""
    return lambda p: XY(translation.x + p.x, translation.y + p.y)


def points_equal(p1: XY, p2: XY, tolerance: float | None = None) -> bool:
    """Return True if both coordinates are equal within the tolerance."""
    return close_equal(p1.x, p2.x, tolerance) and close_equal(p1.y, p2.y, tolerance)


def point_equals(p1: XY) -> Callable[[XY], bool]:
    """Return a predicate testing equality with p1 at the default tolerance."""
    return lambda p2: points_equal(p1, p2)


def bounding_box_from_points(points: Iterable[XY]) -> BoundingBox:
    """Smallest box holding all points; infinite bounds inverted when empty."""
    x_min = y_min = math.inf
    x_max = y_max = -math.inf
    for p in points:
        x_min = min(x_min, p.x)
        y_min = min(y_min, p.y)
        x_max = max(x_max, p.x)
        y_max = max(y_max, p.y)
    return BoundingBox(x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)