from compgeo.quadtree_objects import (
    QuadtreeCircle,
    QuadtreePoint,
    circle_in_node,
    point_in_node,
)
from compgeo.types import XY, BoundingBox, Circle

BOX = BoundingBox(x_min=0.0, x_max=50.0, y_min=0.0, y_max=50.0)


def test_point_inside_node():
    assert point_in_node(XY(25.0, 25.0), BOX) is True


def test_point_on_edge_is_inside():
    assert point_in_node(XY(50.0, 0.0), BOX) is True
    assert point_in_node(XY(0.0, 50.0), BOX) is True


def test_point_outside_node():
    assert point_in_node(XY(75.0, 25.0), BOX) is False
    assert point_in_node(XY(25.0, -1.0), BOX) is False


def test_circle_centered_inside():
    assert circle_in_node(Circle(XY(25.0, 25.0), 1.0), BOX) is True


def test_circle_overlapping_from_outside():
    assert circle_in_node(Circle(XY(55.0, 25.0), 10.0), BOX) is True


def test_circle_touching_edge_exactly():
    assert circle_in_node(Circle(XY(60.0, 25.0), 10.0), BOX) is True


def test_circle_far_away():
    assert circle_in_node(Circle(XY(100.0, 100.0), 10.0), BOX) is False


def test_circle_near_corner_but_outside():
    # Inside the square around the corner but not within the radius.
    assert circle_in_node(Circle(XY(58.0, 58.0), 10.0), BOX) is False


def test_quadtree_point_in_node_delegates():
    assert QuadtreePoint(XY(25.0, 25.0), "a").in_node(BOX) is True
    assert QuadtreePoint(XY(75.0, 75.0), "a").in_node(BOX) is False


def test_quadtree_circle_in_node_delegates():
    assert QuadtreeCircle(XY(55.0, 25.0), 10.0, "c").in_node(BOX) is True
    assert QuadtreeCircle(XY(100.0, 100.0), 10.0, "c").in_node(BOX) is False


def test_quadtree_point_equality_and_hash():
    a = QuadtreePoint(XY(1.0, 2.0), "data")
    b = QuadtreePoint(XY(1.0, 2.0), "data")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert QuadtreePoint(XY(1.0, 2.0), "other") != a


def test_quadtree_circle_equality_and_hash():
    a = QuadtreeCircle(XY(1.0, 2.0), 3.0, "data")
    b = QuadtreeCircle(XY(1.0, 2.0), 3.0, "data")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_quadtree_circle_radius_compares_bits():
    assert QuadtreeCircle(XY(1.0, 2.0), 0.0, "d") != QuadtreeCircle(XY(1.0, 2.0), -0.0, "d")


def test_quadtree_circle_differs_by_data():
    assert QuadtreeCircle(XY(1.0, 2.0), 3.0, "x") != QuadtreeCircle(XY(1.0, 2.0), 3.0, "y")