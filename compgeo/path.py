"""Reassembling loose strokes into contiguous paths."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from compgeo.point import bounding_box_from_points, points_equal
from compgeo.quadtree import Quadtree, QuadtreeProps
from compgeo.quadtree_objects import QuadtreePoint
from compgeo.stroke import reverse_stroke

S = TypeVar("S")

DEFAULT_TOLERANCE = 0.001


def unscramble_path(
    strokes: Sequence[S],
    tolerance: float | None = None,
    reverse: Callable[[S], S] | None = None,
) -> list[list[S]]:
    """Chain strokes whose ends meet into ordered paths.

    Strokes are reversed with ``reverse`` (by default ``reverse_stroke``)
    where needed so that every path runs in one direction. Ends meet when
    they are equal within ``tolerance`` (by default 0.001).
    """
    if tolerance is None:
        tolerance = DEFAULT_TOLERANCE
    if reverse is None:
        reverse = reverse_stroke

    strokes = list(strokes)
    extremes = [p for stroke in strokes for p in (stroke.p1, stroke.p2)]
    index: Quadtree[QuadtreePoint] = Quadtree(
        QuadtreeProps(
            bounds=bounding_box_from_points(extremes),
            max_objects=10,
            max_levels=4,
        ),
        0,
    )

    # Each end carries (stroke index, is_start) as its data.
    ends = [
        (QuadtreePoint(stroke.p1, (i, True)), QuadtreePoint(stroke.p2, (i, False)))
        for i, stroke in enumerate(strokes)
    ]
    for start, end in ends:
        index.insert(start)
        index.insert(end)

    used = [False] * len(strokes)

    def next_match(current: QuadtreePoint) -> QuadtreePoint | None:
        return next(
            (
                candidate
                for candidate in index.search(current, tolerance)
                if not used[candidate.data[0]]
                and points_equal(current.point, candidate.point, tolerance)
            ),
            None,
        )

    result: list[list[S]] = []
    for i, stroke in enumerate(strokes):
        if used[i]:
            continue
        used[i] = True

        forward: list[S] = [stroke]
        current = ends[i][1]
        while (match := next_match(current)) is not None:
            j, is_start = match.data
            used[j] = True
            if is_start:
                forward.append(strokes[j])
                current = ends[j][1]
            else:
                forward.append(reverse(strokes[j]))
                current = ends[j][0]

        backward: list[S] = []
        current = ends[i][0]
        while (match := next_match(current)) is not None:
            j, is_start = match.data
            used[j] = True
            if is_start:
                backward.append(reverse(strokes[j]))
                current = ends[j][1]
            else:
                backward.append(strokes[j])
                current = ends[j][0]

        result.append([*reversed(backward), *forward])

    return result