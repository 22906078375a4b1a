"""Half-lines starting at an origin and going in one direction."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from urbangen.line import Intersection, Line
from urbangen.linesegment import LineSegment
from urbangen.primitives import COORDINATES_EPSILON, EPSILON, Point, Vector


def _divide(numerator: float, denominator: float) -> float:
    """Floating point division that yields infinities or NaN instead of raising."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass(eq=False)
class Ray:
    """A ray starting at ``origin`` and heading along ``direction``."""

    origin: Point = field(default_factory=Point)
    direction: Vector = field(default_factory=lambda: Vector(1, 0, 0))

    @classmethod
    def from_points(cls, first: Point, second: Point) -> Ray:
        """Ray starting at ``first`` and passing through ``second``."""
        return cls(first, Vector.between(first, second))

    def intersection_2d(
        self, other: Ray | Line
    ) -> tuple[Intersection, Point | None]:
        """Intersect with a ray, a line or a line segment in the XY plane.

        The point is returned only when the result is INTERSECTING.
        """
        if isinstance(other, Ray):
            return self._intersect_ray(other)
        if isinstance(other, LineSegment):
            return self._intersect_segment(other)
        if isinstance(other, Line):
            return self._intersect_line(other)
        raise TypeError(f"cannot intersect a ray with {type(other).__name__}")

    def _coordinates(self) -> tuple[float, float, float, float]:
        x1, y1 = self.origin.x, self.origin.y
        return x1, y1, x1 + self.direction.x, y1 + self.direction.y

    @staticmethod
    def _parameters(
        x1: float, y1: float, x2: float, y2: float,
        x3: float, y3: float, x4: float, y4: float,
    ) -> tuple[float, float] | None:
        d = (x2 - x1) * (y4 - y3) - (y2 - y1) * (x4 - x3)
        if d == 0:
            return None
        r = ((y1 - y3) * (x4 - x3) - (x1 - x3) * (y4 - y3)) / d
        s = ((y1 - y3) * (x2 - x1) - (x1 - x3) * (y2 - y1)) / d
        return r, s

    def _intersect_ray(self, other: Ray) -> tuple[Intersection, Point | None]:
        x1, y1, x2, y2 = self._coordinates()
        x3, y3, x4, y4 = other._coordinates()

        difference = _divide(y2 - y1, x2 - x1) - _divide(y4 - y3, x4 - x3)
        if not abs(difference) > EPSILON:
            return Intersection.PARALLEL, None
        parameters = self._parameters(x1, y1, x2, y2, x3, y3, x4, y4)
        if parameters is not None:
            r, s = parameters
            if r >= -EPSILON and s >= -EPSILON:
                return Intersection.INTERSECTING, Point(
                    x1 + r * (x2 - x1), y1 + r * (y2 - y1)
                )
        return Intersection.NONINTERSECTING, None

    def _intersect_line(self, other: Line) -> tuple[Intersection, Point | None]:
        x1, y1, x2, y2 = self._coordinates()
        x3, y3 = other.begining.x, other.begining.y
        x4, y4 = other.end.x, other.end.y

        if x2 - x1 == 0 and x2 - x1 == x4 - x3:
            return Intersection.PARALLEL, None
        difference = _divide(y2 - y1, x2 - x1) - _divide(y4 - y3, x4 - x3)
        if not abs(difference) > EPSILON:
            return Intersection.PARALLEL, None
        parameters = self._parameters(x1, y1, x2, y2, x3, y3, x4, y4)
        if parameters is not None:
            r, _ = parameters
            if r >= -EPSILON:
                return Intersection.INTERSECTING, Point(
                    x1 + r * (x2 - x1), y1 + r * (y2 - y1)
                )
        return Intersection.NONINTERSECTING, None

    def _intersect_segment(
        self, other: LineSegment
    ) -> tuple[Intersection, Point | None]:
        x1, y1, x2, y2 = self._coordinates()
        x3, y3 = other.begining.x, other.begining.y
        x4, y4 = other.end.x, other.end.y

        difference = _divide(y2 - y1, x2 - x1) - _divide(y4 - y3, x4 - x3)
        if not abs(difference) > COORDINATES_EPSILON:
            return Intersection.PARALLEL, None
        parameters = self._parameters(x1, y1, x2, y2, x3, y3, x4, y4)
        if parameters is not None:
            r, s = parameters
            within = s >= -COORDINATES_EPSILON and (
                s <= 1 or abs(s - 1) <= COORDINATES_EPSILON
            )
            if r >= -COORDINATES_EPSILON and within:
                return Intersection.INTERSECTING, Point(
                    x1 + r * (x2 - x1), y1 + r * (y2 - y1)
                )
        return Intersection.NONINTERSECTING, None

    def __str__(self) -> str:
        return f"Ray({self.origin}, {self.direction})"