# compgeo

A small library for 2D computational geometry, with no dependencies outside
the standard library.

## Modules

- `compgeo.utils`: `close_equal(a, b, tolerance=None)` compares floats within a
  tolerance (default `1e-6`). `round_to_n_decimals(x, n)` rounds with ties away
  from zero and raises `ValueError` for a negative `n`. `round6(x)` rounds to
  6 decimals.
- `compgeo.types`: frozen value types `XY`, `XYZ`, `Vector2D`, `Vector3D`,
  `Circle` and `BoundingBox`. `XY` compares and hashes by the exact float bits,
  so `XY(0.0, 0.0) != XY(-0.0, 0.0)`. It has `to_dict()` and `XY.from_dict()`.
- `compgeo.angle`: `no_negative_zero` and `correct_angle_signs`, which turns
  `-pi` into `0` and `-0.0` into `0.0`.
- `compgeo.point`: `create_point`, `p2p_dist`, `p2p_angle`, the curried
  `angle_to_point`, `angle_from_point`, `translate_point` and `point_equals`,
  `points_equal(p1, p2, tolerance=None)`, and `bounding_box_from_points`.
  An empty point list gives a box with infinite, inverted bounds.
- `compgeo.strokes`: `Segment`, `Arc` (with optional `major`) and
  `AnnotatedStroke`, which wraps a segment or arc together with a `data` value.
  Every stroke has `p1`, `p2`, `center`, `major` and `kind` (a `StrokeType`).
  For JSON there are `to_dict()`, `stroke_from_dict`,
  `annotated_stroke_from_dict`, `dump_stroke`, `load_stroke` and
  `load_annotated_stroke`. `base_stroke` returns the plain segment or arc
  behind a stroke. Malformed input raises `ValueError`.
- `compgeo.stroke`: `reverse_segment`, `reverse_arc` and `reverse_stroke` swap
  `p1` and `p2` and keep everything else, including an arc's `center` and
  `major` and an annotated stroke's `data`. `stroke_with_new_data(stroke, data)`
  builds an `AnnotatedStroke` with new data.
- `compgeo.quadtree_types`: the abstract `QuadTreeObject` (with
  `in_node(node)`), the `Quadrant` index of child nodes (`BOTTOM_LEFT`,
  `TOP_LEFT`, `TOP_RIGHT`, `BOTTOM_RIGHT`), and the helpers
  `offset_node_bounds`, `get_node_points` and `get_node_edges`.
- `compgeo.quadtree_objects`: `QuadtreePoint(point, data)` and
  `QuadtreeCircle(center, radius, data)`, plus the tests `point_in_node` and
  `circle_in_node`.
- `compgeo.quadtree`: `QuadtreeProps(bounds, max_objects=10, max_levels=4)` and
  `Quadtree(props, level)` with `insert`, `split`, `search(obj, distance)` and
  `clear`. An object is stored in every leaf it touches. `search` returns the
  objects in all nodes whose bounds, grown by `distance`, the probe touches.
  These are candidates, not exact hits. The root removes duplicates, so stored
  objects must be hashable, which means their `data` must be hashable too.
- `compgeo.path`: `unscramble_path(strokes, tolerance=None, reverse=None)`
  chains strokes whose ends meet within `tolerance` (default `0.001`) into
  ordered paths. Where a stroke is needed the other way round, it is reversed
  with `reverse` (default `reverse_stroke`).

## Installation

```
pip install .
```

## Example

```python
from compgeo.types import XY
from compgeo.strokes import Segment, Arc
from compgeo.path import unscramble_path

strokes = [
    Segment(XY(7.0, 5.0), XY(0.0, 5.0)),
    Segment(XY(10.0, 0.0), XY(10.0, 2.0)),
    Segment(XY(0.0, 0.0), XY(10.0, 0.0)),
    Segment(XY(0.0, 5.0), XY(0.0, 1.0)),
    Arc(XY(10.0, 2.0), XY(7.0, 5.0), center=XY(7.0, 2.0)),
]

paths = unscramble_path(strokes)
for stroke in paths[0]:
    print(stroke.p1, "->", stroke.p2)
```

Annotated strokes can have their data changed as they are reversed:

```python
from compgeo.stroke import reverse_stroke, stroke_with_new_data

def flip_side(stroke):
    side = "right" if stroke.data == "left" else "left"
    return stroke_with_new_data(reverse_stroke(stroke), side)

paths = unscramble_path(annotated_strokes, reverse=flip_side)
```

Searching a quadtree:

```python
from compgeo.types import BoundingBox, XY
from compgeo.quadtree import Quadtree, QuadtreeProps
from compgeo.quadtree_objects import QuadtreePoint, QuadtreeCircle

tree = Quadtree(QuadtreeProps(bounds=BoundingBox(0, 100, 0, 100), max_objects=2), 0)
for x, y in [(25, 25), (25, 75), (75, 25), (75, 75)]:
    tree.insert(QuadtreePoint(XY(x, y), f"{x},{y}"))

near = tree.search(QuadtreeCircle(XY(45, 45), 1.0, "probe"), 0.0)
```

Strokes serialise to compact JSON with a `type` tag:

```python
from compgeo.types import XY
from compgeo.strokes import Segment, dump_stroke, load_stroke

text = dump_stroke(Segment(XY(0.0, 0.0), XY(1.0, 1.0)))
# {"type":"segment","p1":{"x":0.0,"y":0.0},"p2":{"x":1.0,"y":1.0}}
assert load_stroke(text) == Segment(XY(0.0, 0.0), XY(1.0, 1.0))
```

## Limitations

This is a library only. It has no command-line tool and does not read or
write files. JSON goes to and from strings. Reversing an arc only swaps its
end points. `major` is kept as it is and is not adjusted.

## Running the tests

```
pip install .[test]
pytest
```