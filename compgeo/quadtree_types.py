"""Shared quadtree interface, quadrant numbering and node helpers."""

from __future__ import annotations

import abc
import enum
from collections.abc import Sequence
from itertools import pairwise

from compgeo.strokes import Segment
from compgeo.types import XY, BoundingBox


class QuadTreeObject(abc.ABC):
    """An object that can be stored in a quadtree; it carries a ``data`` value."""

    data: object

    @abc.abstractmethod
    def in_node(self, node: BoundingBox) -> bool:
        """Return True if the object touches the given node bounds."""


class Quadrant(enum.IntEnum):
    """Index of a quadtree child node, from the bottom left going clockwise."""

    BOTTOM_LEFT = 0
    TOP_LEFT = 1
    TOP_RIGHT = 2
    BOTTOM_RIGHT = 3


def offset_node_bounds(node: BoundingBox, distance: float) -> BoundingBox:
    """Grow the node bounds by distance on every side."""
    return BoundingBox(
        x_min=node.x_min - distance,
        x_max=node.x_max + distance,
        y_min=node.y_min - distance,
        y_max=node.y_max + distance,
    )


def get_node_points(node: BoundingBox) -> list[XY]:
    """Return the four corners of a node, from the bottom left going clockwise."""
    return [
        XY(node.x_min, node.y_min),
        XY(node.x_min, node.y_max),
        XY(node.x_max, node.y_max),
        XY(node.x_max, node.y_min),
    ]


def get_node_edges(points: Sequence[XY]) -> list[Segment]:
    """Return the closed loop of segments joining consecutive points."""
    if not points:
        return []
    closed = [*points, points[0]]
    return [Segment(p1, p2) for p1, p2 in pairwise(closed)]