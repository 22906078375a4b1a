"""Line segments bounded by two end points."""

from __future__ import annotations

import math
import struct

from urbangen.line import Intersection, Line
from urbangen.primitives import COORDINATES_EPSILON, EPSILON, Point, Vector


def _divide(numerator: float, denominator: float) -> float:
    """Floating point division that yields infinities or NaN instead of raising."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _single(value: float) -> float:
    """Round a value to single precision."""
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class LineSegment(Line):
    """The part of a line lying between ``begining`` and ``end``."""

    def length(self) -> float:
        return Vector.between(self.begining, self.end).length()

    def normal(self) -> Vector:
        """A vector perpendicular to the segment in the XY plane."""
        direction = self.end - self.begining
        return Vector(-direction.y, direction.x)

    def has_point_2d(self, point: Point) -> bool:
        first, second = self.begining, self.end
        test = (point.x - first.x) * (second.y - first.y) - (point.y - first.y) * (
            second.x - first.x
        )
        if abs(test) >= COORDINATES_EPSILON:
            return False
        if abs(first.x - second.x) > COORDINATES_EPSILON:
            t = (point.x - first.x) / (second.x - first.x)
            return 0 <= t <= 1
        if abs(first.y - second.y) > COORDINATES_EPSILON:
            t = (point.y - first.y) / (second.y - first.y)
            return 0 <= t <= 1
        return first == point

    def intersection_2d(self, other: Line) -> tuple[Intersection, Point | None]:
        """Intersect with a segment or a line in the XY plane.

        The point is returned only when the result is INTERSECTING.
        """
        if isinstance(other, LineSegment):
            return self._intersect_segment(other)
        return self._intersect_line(other)

    def _intersect_segment(
        self, other: LineSegment
    ) -> tuple[Intersection, Point | None]:
        a1, a2 = self.begining, self.end
        b1, b2 = other.begining, other.end
        denominator = (b2.y - b1.y) * (a2.x - a1.x) - (b2.x - b1.x) * (a2.y - a1.y)
        first_numerator = (b2.x - b1.x) * (a1.y - b1.y) - (b2.y - b1.y) * (a1.x - b1.x)
        second_numerator = (a2.x - a1.x) * (a1.y - b1.y) - (a2.y - a1.y) * (a1.x - b1.x)

        if abs(denominator) < COORDINATES_EPSILON:
            if (
                abs(first_numerator) < COORDINATES_EPSILON
                and abs(second_numerator) < COORDINATES_EPSILON
            ):
                return self._coincident(other)
            return Intersection.NONINTERSECTING, None

        ua = first_numerator / denominator
        ub = second_numerator / denominator
        if 0 <= ua <= 1 and 0 <= ub <= 1:
            point = Point(a1.x + ua * (a2.x - a1.x), a1.y + ua * (a2.y - a1.y))
            return Intersection.INTERSECTING, point
        return Intersection.NONINTERSECTING, None

    def _coincident(self, other: LineSegment) -> tuple[Intersection, Point | None]:
        # The order of these checks matters.
        if self == other:
            return Intersection.IDENTICAL, None
        if self.has_point_2d(other.begining) and self.has_point_2d(other.end):
            return Intersection.CONTAINING, None
        if other.has_point_2d(self.begining) and other.has_point_2d(self.end):
            return Intersection.CONTAINED, None
        if not self.has_point_2d(other.begining) and not self.has_point_2d(other.end):
            return Intersection.NONINTERSECTING, None
        if self.begining in (other.begining, other.end):
            return Intersection.INTERSECTING, Point(self.begining.x, self.begining.y)
        if self.end in (other.end, other.begining):
            return Intersection.INTERSECTING, Point(self.end.x, self.end.y)
        return Intersection.OVERLAPPING, None

    def _intersect_line(self, other: Line) -> tuple[Intersection, Point | None]:
        x1, y1 = self.begining.x, self.begining.y
        x2, y2 = self.end.x, self.end.y
        x3, y3 = other.begining.x, other.begining.y
        x4, y4 = other.end.x, other.end.y

        slope_difference = _divide(y2 - y1, x2 - x1) - _divide(y4 - y3, x4 - x3)
        if abs(slope_difference) > EPSILON:
            d = _single((x2 - x1) * (y4 - y3) - (y2 - y1) * (x4 - x3))
            if d != 0:
                r = _single(((y1 - y3) * (x4 - x3) - (x1 - x3) * (y4 - y3)) / d)
                if -EPSILON <= r <= 1 + EPSILON:
                    point = Point(x1 + r * (x2 - x1), y1 + r * (y2 - y1))
                    return Intersection.INTERSECTING, point
        return Intersection.NONINTERSECTING, None

    def nearest_point(self, point: Point) -> Point:
        """Point of the segment closest to ``point``."""
        first, second = self.begining, self.end
        squared = self.length() ** 2
        parameter = math.nan
        if squared != 0:
            parameter = (
                (second.x - first.x) * (point.x - first.x)
                + (second.y - first.y) * (point.y - first.y)
                + (second.z - first.z) * (point.z - first.z)
            ) / squared

        if 0 <= parameter <= 1:
            return Point(
                (1 - parameter) * first.x + second.x * parameter,
                (1 - parameter) * first.y + second.y * parameter,
                (1 - parameter) * first.z + second.z * parameter,
            )

        to_first = Vector.between(point, first).length()
        to_second = Vector.between(point, second).length()
        return first if to_first < to_second else second

    def distance(self, point: Point) -> float:
        return Vector.between(self.nearest_point(point), point).length()

    def __str__(self) -> str:
        return f"LineSegment({self.begining}, {self.end})"