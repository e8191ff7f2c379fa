"""Basic geometric value types."""

from __future__ import annotations

import struct
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _bits(value: float) -> bytes:
    return struct.pack("<d", value)


def _number(data: Mapping[str, Any], key: str) -> float:
    try:
        value = data[key]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"missing field {key!r}") from exc
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number, got {value!r}")
    return float(value)


@dataclass(frozen=True, eq=False)
class XY:
    """A 2D point. Equality and hashing compare the exact float bits."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XY):
            return NotImplemented
        return _bits(self.x) == _bits(other.x) and _bits(self.y) == _bits(other.y)

    def __hash__(self) -> int:
        return hash((_bits(self.x), _bits(self.y)))

    def to_dict(self) -> dict[str, float]:
        """Return the point as a JSON-ready mapping."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> XY:
        """Build a point from a mapping with numeric "x" and "y"."""
        if not isinstance(data, Mapping):
            raise ValueError(f"expected a mapping for a point, got {data!r}")
        return cls(_number(data, "x"), _number(data, "y"))


@dataclass(frozen=True)
class XYZ:
    """A 3D point."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Vector2D:
    """A 2D vector."""

    i: float
    j: float


@dataclass(frozen=True)
class Vector3D:
    """A 3D vector."""

    i: float
    j: float
    k: float


@dataclass(frozen=True)
class Circle:
    """A circle given by its center and radius."""

    center: XY
    radius: float


@dataclass(frozen=True)
class BoundingBox:
    """An axis-aligned rectangle."""

    x_min: float = field(default=0.0)
    x_max: float = field(default=0.0)
    y_min: float = field(default=0.0)
    y_max: float = field(default=0.0)