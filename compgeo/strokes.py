"""Stroke types (segments and arcs) and their JSON form."""

from __future__ import annotations

import enum
import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from compgeo.types import XY

T = TypeVar("T")


class StrokeType(enum.Enum):
    """Kind of a stroke."""

    SEGMENT = "segment"
    ARC = "arc"


@dataclass(frozen=True)
class Segment:
    """A straight line from p1 to p2."""

    p1: XY
    p2: XY

    @property
    def kind(self) -> StrokeType:
        return StrokeType.SEGMENT

    @property
    def center(self) -> None:
        return None

    @property
    def major(self) -> None:
        return None

    def to_dict(self) -> dict[str, Any]:
        """Return the tagged JSON-ready mapping."""
        return {"type": "segment", "p1": self.p1.to_dict(), "p2": self.p2.to_dict()}


@dataclass(frozen=True)
class Arc:
    """A circular arc from p1 to p2 around center."""

    p1: XY
    p2: XY
    center: XY
    major: bool | None = None

    @property
    def kind(self) -> StrokeType:
        return StrokeType.ARC

    def to_dict(self) -> dict[str, Any]:
        """Return the tagged JSON-ready mapping; major is left out when unset."""
        result: dict[str, Any] = {
            "type": "arc",
            "p1": self.p1.to_dict(),
            "p2": self.p2.to_dict(),
            "center": self.center.to_dict(),
        }
        if self.major is not None:
            result["major"] = self.major
        return result


Stroke = Union[Segment, Arc]


@dataclass(frozen=True)
class AnnotatedStroke(Generic[T]):
    """A stroke carrying arbitrary data."""

    stroke: Stroke
    data: T

    @property
    def kind(self) -> StrokeType:
        return self.stroke.kind

    @property
    def p1(self) -> XY:
        return self.stroke.p1

    @property
    def p2(self) -> XY:
        return self.stroke.p2

    @property
    def center(self) -> XY | None:
        return self.stroke.center

    @property
    def major(self) -> bool | None:
        return self.stroke.major

    def to_dict(self) -> dict[str, Any]:
        """Return the stroke's mapping with the data under "data"."""
        result = self.stroke.to_dict()
        result["data"] = self.data
        return result


AnyStroke = Union[Segment, Arc, AnnotatedStroke]


def base_stroke(stroke: AnyStroke) -> Stroke:
    """Return the plain segment or arc behind a stroke."""
    if isinstance(stroke, AnnotatedStroke):
        return stroke.stroke
    return stroke


def _point(data: Mapping[str, Any], key: str) -> XY:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    return XY.from_dict(data[key])


def stroke_from_dict(data: Mapping[str, Any]) -> Stroke:
    """Build a segment or arc from its tagged mapping."""
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a mapping for a stroke, got {data!r}")
    tag = data.get("type")
    if tag == StrokeType.SEGMENT.value:
        return Segment(_point(data, "p1"), _point(data, "p2"))
    if tag == StrokeType.ARC.value:
        major = data.get("major")
        if major is not None and not isinstance(major, bool):
            raise ValueError(f"field 'major' must be a boolean, got {major!r}")
        return Arc(_point(data, "p1"), _point(data, "p2"), _point(data, "center"), major)
    raise ValueError(f"unknown stroke type {tag!r}")


def annotated_stroke_from_dict(data: Mapping[str, Any]) -> AnnotatedStroke:
    """Build an annotated stroke from a tagged mapping holding "data"."""
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a mapping for a stroke, got {data!r}")
    if "data" not in data:
        raise ValueError("missing field 'data'")
    return AnnotatedStroke(stroke_from_dict(data), data["data"])


def dump_stroke(stroke: AnyStroke) -> str:
    """Serialise a stroke to compact JSON."""
    return json.dumps(stroke.to_dict(), separators=(",", ":"))


def load_stroke(text: str) -> Stroke:
    """Parse a segment or arc from JSON."""
    return stroke_from_dict(json.loads(text))


def load_annotated_stroke(text: str) -> AnnotatedStroke:
    """Parse an annotated stroke from JSON."""
    return annotated_stroke_from_dict(json.loads(text))