import math

import pytest

from algokit.geometry import (
    Intersection,
    Point,
    cross,
    dist,
    dot,
    in_triangle,
    is_between,
    is_collinear,
    is_convex,
    is_left,
    is_parallel,
    line_dist,
    line_intersection,
    normal,
    opposite_sides,
    perp,
    polygon_area,
    rotate,
    rotl,
    rotr,
    segment_distance,
    segment_intersect,
    to_degree,
    to_radian,
    unit,
)

SQUARE = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]


def test_point_arithmetic_round_trip():
    p, q = Point(1.5, -2), Point(3, 4)
    assert (p + q) - q == p
    assert (p * 4) / 4 == p
    assert 2 * p == p * 2


def test_angle_conversion():
    assert to_radian(180) == pytest.approx(math.pi)
    assert to_degree(to_radian(37.5)) == pytest.approx(37.5)


def test_perp_is_orthogonal_and_rotl_rotr_invert():
    p = Point(3, -7)
    assert dot(p, perp(p)) == 0
    assert rotr(rotl(p)) == p


def test_rotate_round_trip_keeps_length():
    p = Point(2, 5)
    r = rotate(p, 1.1)
    assert dist(r) == pytest.approx(dist(p))
    back = rotate(r, -1.1)
    assert back.x == pytest.approx(p.x)
    assert back.y == pytest.approx(p.y)


def test_rotate_quarter_turn_matches_perp():
    p = Point(4, 1)
    r = rotate(p, math.pi / 2)
    assert r.x == pytest.approx(perp(p).x)
    assert r.y == pytest.approx(perp(p).y)


def test_unit_and_normal_have_length_one():
    p = Point(3, 4)
    assert dist(unit(p)) == pytest.approx(1.0)
    assert dist(normal(p)) == pytest.approx(1.0)
    assert dot(normal(p), p) == pytest.approx(0.0)


def test_cross_is_antisymmetric():
    a, b = Point(1, 2), Point(-3, 5)
    assert cross(a, b) == -cross(b, a)


def test_parallel_and_collinear():
    a, b = Point(0, 0), Point(1, 1)
    assert is_parallel(a, b, Point(0, 1), Point(2, 3))
    assert not is_parallel(a, b, Point(0, 1), Point(1, 0))
    assert is_collinear(a, b, Point(5, 5))
    assert is_collinear(a, b, Point(2, 2), Point(-3, -3))
    assert not is_collinear(a, b, Point(2, 3))


def test_is_collinear_rejects_wrong_arity():
    with pytest.raises(TypeError):
        is_collinear(Point(), Point())


def test_is_left_and_opposite_sides():
    back, front = Point(0, 0), Point(1, 0)
    assert is_left(front, back, Point(0, 1))
    assert not is_left(front, back, Point(0, -1))
    assert opposite_sides(front, back, Point(0, 1), Point(0, -1))


def test_is_between():
    assert is_between(Point(0, 0), Point(4, 4), Point(2, 2))
    assert not is_between(Point(0, 0), Point(4, 4), Point(5, 5))
    assert not is_between(Point(0, 0), Point(4, 4), Point(2, 3))


def test_line_intersection_kinds():
    kind, point = line_intersection(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
    assert kind is Intersection.POINT
    assert point.x == pytest.approx(1.0)
    assert point.y == pytest.approx(1.0)
    assert line_intersection(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1)) == (
        Intersection.NONE,
        None,
    )
    assert line_intersection(Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 3)) == (
        Intersection.INFINITE,
        None,
    )


def test_line_dist():
    assert line_dist(Point(0, 0), Point(10, 0), Point(3, 7)) == pytest.approx(7.0)


def test_segment_intersect():
    assert segment_intersect(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
    assert segment_intersect(Point(0, 0), Point(2, 0), Point(2, 0), Point(3, 5))
    assert not segment_intersect(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1))


def test_segment_distance():
    v, w = Point(0, 0), Point(4, 0)
    assert segment_distance(v, w, Point(2, 3)) == pytest.approx(3.0)
    assert segment_distance(v, w, Point(7, 4)) == pytest.approx(5.0)
    assert segment_distance(v, v, Point(0, 6)) == pytest.approx(6.0)


def test_in_triangle():
    a, b, c = Point(0, 0), Point(4, 0), Point(0, 4)
    assert in_triangle(a, b, c, Point(1, 1))
    assert not in_triangle(a, b, c, Point(5, 5))
    assert not in_triangle(a, b, c, Point(2, 0))


def test_is_convex():
    assert is_convex(SQUARE)
    dart = [Point(0, 0), Point(4, 0), Point(1, 1), Point(0, 4)]
    assert not is_convex(dart)
    with pytest.raises(ValueError):
        is_convex(SQUARE[:2])


def test_polygon_area_is_orientation_independent():
    assert polygon_area(SQUARE) == pytest.approx(4.0)
    assert polygon_area(list(reversed(SQUARE))) == pytest.approx(polygon_area(SQUARE))