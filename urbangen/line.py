"""Infinite lines defined by two points."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from urbangen.primitives import EPSILON, Point, Vector


class Intersection(Enum):
    """Outcome of intersecting two linear objects."""

    INTERSECTING = 0
    NONINTERSECTING = 1
    PARALLEL = 2
    IDENTICAL = 3
    CONTAINING = 4
    CONTAINED = 5
    OVERLAPPING = 6


_PARALLEL_TOLERANCE = 0.001


@dataclass(eq=False)
class Line:
    """An infinite line passing through ``begining`` and ``end``."""

    begining: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)

    @classmethod
    def from_vector(cls, point: Point, vector: Vector) -> Line:
        return cls(point, point + vector)

    def has_point_2d(self, point: Point) -> bool:
        first, second = self.begining, self.end
        test = (point.x - first.x) * (second.y - first.y) - (point.y - first.y) * (
            second.x - first.x
        )
        return abs(test) < EPSILON

    def intersection_2d(self, other: Line) -> tuple[Intersection, Point | None]:
        """Intersect two lines in the XY plane; the point is None unless they intersect."""
        a1, a2 = self.begining, self.end
        b1, b2 = other.begining, other.end
        denominator = (b2.y - b1.y) * (a2.x - a1.x) - (b2.x - b1.x) * (a2.y - a1.y)
        numerator = (b2.x - b1.x) * (a1.y - b1.y) - (b2.y - b1.y) * (a1.x - b1.x)

        if abs(denominator) <= _PARALLEL_TOLERANCE:
            return Intersection.PARALLEL, None

        ua = numerator / denominator
        point = Point(a1.x + ua * (a2.x - a1.x), a1.y + ua * (a2.y - a1.y))
        return Intersection.INTERSECTING, point

    def nearest_point(self, point: Point) -> Point:
        """Orthogonal projection of ``point`` onto the line."""
        first, second = self.begining, self.end
        squared = Vector.between(first, second).length() ** 2
        if squared == 0:
            raise ValueError("line is defined by two identical points")
        parameter = (
            (second.x - first.x) * (point.x - first.x)
            + (second.y - first.y) * (point.y - first.y)
            + (second.z - first.z) * (point.z - first.z)
        ) / squared
        return Point(
            (1 - parameter) * first.x + second.x * parameter,
            (1 - parameter) * first.y + second.y * parameter,
            (1 - parameter) * first.z + second.z * parameter,
        )

    def distance(self, point: Point) -> float:
        return Vector.between(self.nearest_point(point), point).length()

    def point_position_test(self, point: Point) -> float:
        """Positive on the left of the line, negative on the right, zero on it."""
        first, second = self.begining, self.end
        return (second.x - first.x) * (point.y - first.y) - (second.y - first.y) * (
            point.x - first.x
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return (self.begining == other.begining and self.end == other.end) or (
            self.begining == other.end and self.end == other.begining
        )

    __hash__ = None

    def __str__(self) -> str:
        return f"Line({self.begining}, {self.end})"