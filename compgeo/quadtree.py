"""A region quadtree holding objects that know which nodes they touch."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from compgeo.quadtree_types import QuadTreeObject, offset_node_bounds
from compgeo.types import BoundingBox

T = TypeVar("T", bound=QuadTreeObject)


@dataclass(frozen=True)
class QuadtreeProps:
    """Settings for a quadtree node."""

    bounds: BoundingBox = field(default_factory=BoundingBox)
    max_objects: int = 10
    max_levels: int = 4


class Quadtree(Generic[T]):
    """A quadtree node; objects are stored in every leaf they touch."""

    def __init__(self, props: QuadtreeProps | None = None, level: int = 0) -> None:
        props = props if props is not None else QuadtreeProps()
        self.bounds = props.bounds
        self.max_objects = props.max_objects
        self.max_levels = props.max_levels
        self.level = level
        self.objects: list[T] = []
        self.nodes: list[Quadtree[T]] = []

    def split(self) -> None:
        """Create the four child nodes, indexed by Quadrant."""
        b = self.bounds
        x_mid = (b.x_min + b.x_max) / 2.0
        y_mid = (b.y_min + b.y_max) / 2.0
        # Children share their mid lines exactly, so no gaps open between them.
        quadrants = [
            BoundingBox(x_min=b.x_min, x_max=x_mid, y_min=b.y_min, y_max=y_mid),
            BoundingBox(x_min=b.x_min, x_max=x_mid, y_min=y_mid, y_max=b.y_max),
            BoundingBox(x_min=x_mid, x_max=b.x_max, y_min=y_mid, y_max=b.y_max),
            BoundingBox(x_min=x_mid, x_max=b.x_max, y_min=b.y_min, y_max=y_mid),
        ]
        self.nodes = [
            Quadtree(
                QuadtreeProps(
                    bounds=bounds,
                    max_objects=self.max_objects,
                    max_levels=self.max_levels,
                ),
                self.level + 1,
            )
            for bounds in quadrants
        ]

    def _insert_into_children(self, obj: T) -> None:
        for node in self.nodes:
            if obj.in_node(node.bounds):
                node.insert(obj)

    def insert(self, obj: T) -> Quadtree[T]:
        """Add an object, splitting this node when it holds too many."""
        if self.nodes:
            self._insert_into_children(obj)
            return self

        self.objects.append(obj)

        if len(self.objects) > self.max_objects and self.level < self.max_levels:
            self.split()
            for stored in self.objects:
                self._insert_into_children(stored)
            self.objects.clear()

        return self

    def search(self, obj: QuadTreeObject, distance: float) -> list[T]:
        """Return objects in nodes within distance of obj, without duplicates at the root."""
        result: list[T] = list(self.objects)
        for node in self.nodes:
            if obj.in_node(offset_node_bounds(node.bounds, distance)):
                result.extend(node.search(obj, distance))
        if self.level == 0:
            result = list(dict.fromkeys(result))
        return result

    def clear(self) -> Quadtree[T]:
        """Remove all objects and child nodes."""
        self.objects.clear()
        for node in self.nodes:
            node.clear()
        self.nodes.clear()
        return self