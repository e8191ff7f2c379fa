"""Points and circles that can be stored in a quadtree."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any

from compgeo.quadtree_types import QuadTreeObject
from compgeo.types import XY, BoundingBox, Circle


def point_in_node(point: XY, node: BoundingBox) -> bool:
    """Return True if the point lies inside the node, edges included."""
    return node.x_min <= point.x <= node.x_max and node.y_min <= point.y <= node.y_max


def circle_in_node(circle: Circle, node: BoundingBox) -> bool:
    """Return True if the circle intersects the node rectangle."""
    clamped_x = max(node.x_min, min(circle.center.x, node.x_max))
    clamped_y = max(node.y_min, min(circle.center.y, node.y_max))
    delta_x = circle.center.x - clamped_x
    delta_y = circle.center.y - clamped_y
    return delta_x**2 + delta_y**2 <= circle.radius**2


@dataclass(frozen=True)
class QuadtreePoint(QuadTreeObject):
    """A point with attached data."""

    point: XY
    data: Any

    def in_node(self, node: BoundingBox) -> bool:
        return point_in_node(self.point, node)


def _bits(value: float) -> bytes:
    return struct.pack("<d", value)


@dataclass(frozen=True, eq=False)
class QuadtreeCircle(QuadTreeObject):
    """A circle with attached data; the radius compares by its exact float bits."""

    center: XY
    radius: float
    data: Any

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuadtreeCircle):
            return NotImplemented
        return (
            self.center == other.center
            and self.data == other.data
            and _bits(self.radius) == _bits(other.radius)
        )

    def __hash__(self) -> int:
        return hash((self.center, self.data, _bits(self.radius)))

    def in_node(self, node: BoundingBox) -> bool:
        return circle_in_node(Circle(self.center, self.radius), node)