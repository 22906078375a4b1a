import math

import pytest

from urbangen.primitives import COORDINATES_EPSILON, PI, Point, Vector


def test_point_equality_is_approximate():
    assert Point(1, 2, 3) == Point(1 + COORDINATES_EPSILON / 2, 2, 3)
    assert not Point(1, 2, 3) == Point(1 + COORDINATES_EPSILON * 2, 2, 3)
    assert Point(1, 2) != Point(1, 2, 1)


def test_point_default_is_origin():
    assert Point() == Point(0, 0, 0)


def test_point_ordering():
    assert Point(1, 5) < Point(2, 0)
    assert Point(1, 1) < Point(1, 2)
    assert Point(3, 0) > Point(2, 9)
    assert not Point(1, 2) < Point(1, 2)
    ordered = sorted([Point(2, 1), Point(1, 3), Point(1, 2)])
    assert [(p.x, p.y) for p in ordered] == [(1, 2), (1, 3), (2, 1)]


def test_point_is_not_hashable():
    with pytest.raises(TypeError):
        hash(Point(1, 2))


def test_point_difference_round_trip():
    a = Point(1, 2, 3)
    b = Point(-4, 7.5, 0.25)
    assert a + (b - a) == b
    assert b - a == Vector.between(a, b)


def test_point_str_format():
    assert str(Point(1, 2.5, 0)) == "Point(1, 2.5, 0)"


def test_vector_str_format():
    assert str(Vector(1, -2, 0.5)) == "Vector(1, -2, 0.5)"


def test_squared_length_matches_length():
    v = Vector(3, 4, 12)
    assert math.isclose(v.squared_length(), v.length() ** 2)


def test_normalized_has_unit_length_and_same_direction():
    v = Vector(3, -7, 2)
    unit = v.normalized()
    assert math.isclose(unit.length(), 1.0)
    assert unit * v.length() == v


def test_zero_vector_normalizes_to_nan():
    unit = Vector().normalized()
    nan = pytest.approx(math.nan, nan_ok=True)
    assert unit.x == nan
    assert unit.y == nan
    assert unit.z == nan


def test_angle_to_zero_vector_is_nan():
    angle = Vector(1, 0).angle_to(Vector())
    assert angle == pytest.approx(math.nan, nan_ok=True)


def test_rotation_round_trip():
    v = Vector(1, 2, 3)
    assert v.rotated(30, 45, 60).rotated_around_z(-60).rotated_around_y(-45).rotated_around_x(-30) == v


def test_rotated_composes_single_axis_rotations():
    v = Vector(1, -2, 0.5)
    expected = v.rotated_around_x(10).rotated_around_y(20).rotated_around_z(30)
    assert v.rotated(10, 20, 30) == expected


def test_rotation_preserves_length():
    v = Vector(2, 5, -1)
    assert math.isclose(v.rotated(17, 33, 71).length(), v.length())


def test_quarter_turn_around_z():
    assert Vector(1, 0, 0).rotated_around_z(90) == Vector(0, 1, 0)


def test_cross_is_perpendicular_and_anticommutative():
    a = Vector(1, 2, 3)
    b = Vector(-2, 0.5, 4)
    c = a.cross(b)
    assert abs(c.dot(a)) < 1e-9
    assert abs(c.dot(b)) < 1e-9
    assert b.cross(a) == -c


def test_cross_of_parallel_vectors_raises():
    with pytest.raises(ValueError):
        Vector(1, 1, 0).cross(Vector(2, 2, 0))


def test_parallel_detection():
    v = Vector(1, 3, 0)
    assert v.is_parallel_with(v * 4)
    assert v.is_parallel_with(-v)
    assert not v.is_parallel_with(Vector(3, -1, 0))


def test_angles_between_vectors():
    v = Vector(2, 1, 0)
    assert v.angle_to(v * 3) == pytest.approx(0.0, abs=1e-6)
    assert v.angle_to(-v) == pytest.approx(PI, abs=1e-6)
    perpendicular = Vector(-1, 2, 0)
    assert v.dot(perpendicular) == 0
    assert v.angle_to(perpendicular) == pytest.approx(PI / 2, abs=1e-6)


def test_angle_to_x_axis_range_and_opposites():
    for v in (Vector(1, 1), Vector(-1, 2), Vector(0.5, -3), Vector(-2, -2)):
        angle = v.angle_to_x_axis()
        assert 0 <= angle < 2 * PI
        assert abs(angle - (-v).angle_to_x_axis()) == pytest.approx(PI, abs=1e-6)


def test_perp_dot_is_antisymmetric():
    a = Vector(1, 4)
    b = Vector(-3, 2)
    assert a.perp_dot(b) == -b.perp_dot(a)
    assert a.perp_dot(a) == 0


def test_arithmetic_round_trips():
    v = Vector(1.5, -2, 7)
    assert (v * 2) / 2 == v
    assert 2 * v == v * 2
    assert v + (-v) == Vector()


def test_to_point_round_trip():
    v = Vector(1, 2, 3)
    assert Point() + v == v.to_point()
    assert v.to_point() - Point() == v