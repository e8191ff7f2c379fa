import pytest

from compgeo.quadtree import Quadtree, QuadtreeProps
from compgeo.quadtree_objects import QuadtreeCircle, QuadtreePoint
from compgeo.quadtree_types import Quadrant
from compgeo.types import XY, BoundingBox


@pytest.fixture
def quadtree():
    props = QuadtreeProps(
        bounds=BoundingBox(x_min=0.0, x_max=100.0, y_min=0.0, y_max=100.0),
        max_objects=2,
        max_levels=4,
    )
    return Quadtree(props, 0)


def _four_objects():
    return (
        QuadtreePoint(XY(25.0, 25.0), "object1"),
        QuadtreePoint(XY(25.0, 75.0), "object2"),
        QuadtreePoint(XY(75.0, 25.0), "object3"),
        QuadtreePoint(XY(75.0, 75.0), "object4"),
    )


def test_default_props():
    props = QuadtreeProps()
    assert props.max_objects == 10
    assert props.max_levels == 4
    assert props.bounds == BoundingBox()


def test_insert_object_to_quadtree(quadtree):
    obj = QuadtreePoint(XY(50.0, 50.0), "test")
    quadtree.insert(obj)
    assert len(quadtree.objects) == 1
    assert quadtree.objects[0] == obj


def test_insert_returns_tree(quadtree):
    assert quadtree.insert(QuadtreePoint(XY(1.0, 1.0), "x")) is quadtree


def test_split_node_when_max_object(quadtree):
    object1, object2, object3, object4 = _four_objects()
    for obj in (object1, object2, object3, object4):
        quadtree.insert(obj)

    assert len(quadtree.nodes) == 4
    assert len(quadtree.objects) == 0
    assert object4 in quadtree.nodes[Quadrant.TOP_RIGHT].objects
    assert object2 in quadtree.nodes[Quadrant.TOP_LEFT].objects
    assert object1 in quadtree.nodes[Quadrant.BOTTOM_LEFT].objects
    assert object3 in quadtree.nodes[Quadrant.BOTTOM_RIGHT].objects


def test_split_children_cover_parent(quadtree):
    quadtree.split()
    assert all(node.level == 1 for node in quadtree.nodes)
    assert quadtree.nodes[Quadrant.BOTTOM_LEFT].bounds.x_min == 0.0
    assert quadtree.nodes[Quadrant.TOP_RIGHT].bounds.x_max == 100.0
    assert quadtree.nodes[Quadrant.TOP_RIGHT].bounds.y_max == 100.0
    assert quadtree.nodes[Quadrant.BOTTOM_LEFT].bounds.x_max == quadtree.nodes[
        Quadrant.BOTTOM_RIGHT
    ].bounds.x_min


def test_retrieve_objects_that_could_collide_with_geometry(quadtree):
    circle1 = QuadtreeCircle(XY(45.0, 45.0), 10.0, "circle1")
    circle2 = QuadtreeCircle(XY(45.0, 45.0), 1.0, "circle2")
    object1, object2, object3, object4 = _four_objects()
    for obj in (object1, object2, object3, object4):
        quadtree.insert(obj)

    result1 = quadtree.search(circle1, 0.0)
    assert len(result1) == 4
    for obj in (object1, object2, object3, object4):
        assert obj in result1

    result2 = quadtree.search(circle2, 0.0)
    assert len(result2) == 1
    assert object1 in result2


def test_retrieve_objects_with_nonzero_tolerance(quadtree):
    within_tolerance = QuadtreePoint(XY(51.0, 51.0), "within_tolerance")
    outside_tolerance = QuadtreePoint(XY(52.0, 52.0), "outside_tolerance")
    object1, object2, object3, _ = _four_objects()
    for obj in (object1, object2, object3):
        quadtree.insert(obj)

    result1 = quadtree.search(within_tolerance, 1.25)
    assert len(result1) == 3
    for obj in (object1, object2, object3):
        assert obj in result1

    assert quadtree.search(outside_tolerance, 1.25) == []


def test_search_removes_duplicates_at_root(quadtree):
    # A point on the centre lines lands in all four children.
    centre = QuadtreePoint(XY(50.0, 50.0), "centre")
    object1, object2, _, _ = _four_objects()
    for obj in (object1, object2, centre):
        quadtree.insert(obj)
    assert sum(centre in node.objects for node in quadtree.nodes) == 4

    result = quadtree.search(QuadtreeCircle(XY(50.0, 50.0), 60.0, "probe"), 0.0)
    assert result.count(centre) == 1
    assert len(result) == 3


def test_clear_quadtree(quadtree):
    quadtree.insert(QuadtreePoint(XY(50.0, 50.0), "data"))
    quadtree.clear()
    assert len(quadtree.objects) == 0
    assert len(quadtree.nodes) == 0


def test_clear_after_split(quadtree):
    for obj in _four_objects():
        quadtree.insert(obj)
    assert quadtree.clear() is quadtree
    assert quadtree.nodes == []
    assert quadtree.search(QuadtreeCircle(XY(50.0, 50.0), 100.0, "probe"), 0.0) == []


def test_max_levels_stops_splitting():
    tree = Quadtree(
        QuadtreeProps(
            bounds=BoundingBox(x_min=0.0, x_max=100.0, y_min=0.0, y_max=100.0),
            max_objects=1,
            max_levels=0,
        ),
        0,
    )
    points = [QuadtreePoint(XY(10.0, 10.0), str(n)) for n in range(5)]
    for p in points:
        tree.insert(p)
    assert tree.nodes == []
    assert tree.objects == points