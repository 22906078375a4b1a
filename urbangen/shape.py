"""Solids made of a polygonal base extruded upwards to a given height."""

from __future__ import annotations

from urbangen.polygon import Polygon
from urbangen.primitives import Point, Vector

_UP = Vector(0, 0, 1)


class Shape:
    """A prism: a polygonal base raised along the Z axis by ``height``."""

    def __init__(self, base: Polygon | None = None, height: float = 0.0) -> None:
        self.base = base if base is not None else Polygon()
        self.height = height

    @property
    def base(self) -> Polygon:
        return self._base

    @base.setter
    def base(self, polygon: Polygon) -> None:
        self._base = polygon.copy()

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        self._height = float(value)

    def top(self) -> Polygon:
        """The base lifted by the shape's height."""
        return Polygon(*(vertex + _UP * self._height for vertex in self._base))

    def encloses(self, item: Point | Polygon | Shape) -> bool:
        """Whether a point, every vertex of a polygon, or a whole shape lies inside."""
        if isinstance(item, Point):
            return self._encloses_point(item)
        if isinstance(item, Shape):
            lift = _UP * item.height
            return all(
                self._encloses_point(vertex) and self._encloses_point(vertex + lift)
                for vertex in item.base
            )
        if isinstance(item, Polygon):
            return all(self._encloses_point(vertex) for vertex in item)
        raise TypeError(f"cannot test enclosure of {type(item).__name__}")

    def _encloses_point(self, point: Point) -> bool:
        if len(self._base) == 0:
            raise ValueError("a shape with an empty base encloses nothing")
        lower = self._base[0].z
        upper = lower + self._height
        return self._base.encloses_2d(point) and lower <= point.z <= upper

    def __str__(self) -> str:
        return f"Shape({self._base}, height = {self._height:g})"