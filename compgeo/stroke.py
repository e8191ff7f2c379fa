"""Reversal and re-annotation of strokes."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, TypeVar

from compgeo.strokes import AnnotatedStroke, StrokeType, base_stroke

S = TypeVar("S")


def _swap_ends(stroke: S) -> S:
    if isinstance(stroke, AnnotatedStroke):
        return replace(stroke, stroke=_swap_ends(stroke.stroke))
    return replace(stroke, p1=stroke.p2, p2=stroke.p1)


def reverse_segment(segment: S) -> S:
    """Return a copy with p1 and p2 swapped."""
    return _swap_ends(segment)


def reverse_arc(arc: S) -> S:
    """Return a copy with p1 and p2 swapped; center and major are kept."""
    return _swap_ends(arc)


def reverse_stroke(stroke: S) -> S:
    """Reverse the direction of a segment, arc or annotated stroke."""
    if stroke.kind is StrokeType.SEGMENT:
        return reverse_segment(stroke)
    return reverse_arc(stroke)


def stroke_with_new_data(stroke: Any, data: Any) -> AnnotatedStroke:
    """Wrap the plain stroke behind the given one with new data."""
    return AnnotatedStroke(base_stroke(stroke), data)