import pytest

from urbangen.line import Intersection, Line
from urbangen.linesegment import LineSegment
from urbangen.primitives import Point, Vector
from urbangen.ray import Ray


def test_default_ray_str():
    assert str(Ray()) == "Ray(Point(0, 0, 0), Vector(1, 0, 0))"


def test_from_points_direction():
    ray = Ray.from_points(Point(1, 2), Point(4, 8))
    assert ray.origin == Point(1, 2)
    assert ray.direction == Vector.between(Point(1, 2), Point(4, 8))


def test_ray_crosses_segment():
    ray = Ray(Point(0, 0), Vector(1, 0))
    segment = LineSegment(Point(3, -1), Point(3, 1))
    result, point = ray.intersection_2d(segment)
    assert result is Intersection.INTERSECTING
    assert segment.has_point_2d(point)
    assert Line.from_vector(ray.origin, ray.direction).has_point_2d(point)


def test_ray_pointing_away_from_segment():
    ray = Ray(Point(0, 0), Vector(-1, 0))
    segment = LineSegment(Point(3, -1), Point(3, 1))
    assert ray.intersection_2d(segment) == (Intersection.NONINTERSECTING, None)


def test_ray_misses_short_segment():
    ray = Ray(Point(0, 0), Vector(1, 0))
    segment = LineSegment(Point(3, 1), Point(3, 2))
    assert ray.intersection_2d(segment)[0] is Intersection.NONINTERSECTING


def test_ray_parallel_to_segment():
    ray = Ray(Point(0, 0), Vector(1, 1))
    segment = LineSegment(Point(0, 1), Point(2, 3))
    assert ray.intersection_2d(segment) == (Intersection.PARALLEL, None)


def test_two_rays_meet():
    first = Ray(Point(0, 0), Vector(1, 1))
    second = Ray(Point(4, 0), Vector(-1, 1))
    result, point = first.intersection_2d(second)
    assert result is Intersection.INTERSECTING
    assert Line.from_vector(first.origin, first.direction).has_point_2d(point)
    assert Line.from_vector(second.origin, second.direction).has_point_2d(point)
    assert (point - first.origin).dot(first.direction) > 0
    assert (point - second.origin).dot(second.direction) > 0


def test_two_rays_diverging():
    first = Ray(Point(0, 0), Vector(-1, 1))
    second = Ray(Point(4, 0), Vector(1, 1))
    assert first.intersection_2d(second)[0] is Intersection.NONINTERSECTING


def test_parallel_rays():
    first = Ray(Point(0, 0), Vector(1, 2))
    second = Ray(Point(5, 0), Vector(2, 4))
    assert first.intersection_2d(second) == (Intersection.PARALLEL, None)


def test_ray_and_line_intersect():
    ray = Ray(Point(0, 0), Vector(0, 1))
    line = Line(Point(-1, 2), Point(1, 3))
    result, point = ray.intersection_2d(line)
    assert result is Intersection.INTERSECTING
    assert line.has_point_2d(point)
    assert point.x == pytest.approx(ray.origin.x)


def test_ray_and_line_behind():
    ray = Ray(Point(0, 0), Vector(0, -1))
    line = Line(Point(-1, 2), Point(1, 3))
    assert ray.intersection_2d(line) == (Intersection.NONINTERSECTING, None)


def test_vertical_ray_and_vertical_line_parallel():
    ray = Ray(Point(0, 0), Vector(0, 1))
    line = Line(Point(3, 0), Point(3, 5))
    assert ray.intersection_2d(line) == (Intersection.PARALLEL, None)


def test_unsupported_type():
    with pytest.raises(TypeError):
        Ray().intersection_2d(Point(1, 1))