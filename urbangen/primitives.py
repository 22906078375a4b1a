"""Points and vectors in 3D space, together with the library's unit constants."""

from __future__ import annotations

import math
from dataclasses import dataclass

METER = 100
"""Basic length unit of the library, in pixels."""
METERS = METER

PI = 3.14159265

COORDINATES_EPSILON = 0.0001
"""Tolerance used when comparing coordinates."""

EPSILON = 0.0000001
"""Tolerance used in numeric tests."""

SNAP_DISTANCE = 25.0


def _fmt(value: float) -> str:
    return f"{value:g}"


def _to_radians(degrees: float) -> float:
    return degrees * (PI / 180.0)


@dataclass(frozen=True, eq=False)
class Point:
    """A point in 3D space; a 2D point has ``z`` equal to zero."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, float(getattr(self, name)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (
            abs(self.x - other.x) < COORDINATES_EPSILON
            and abs(self.y - other.y) < COORDINATES_EPSILON
            and abs(self.z - other.z) < COORDINATES_EPSILON
        )

    __hash__ = None  # equality is approximate, so points are not hashable

    def __lt__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        if self.x < other.x:
            return True
        if self.x == other.x:
            return self.y < other.y
        return False

    def __gt__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        if self.x > other.x:
            return True
        if self.x == other.x:
            return self.y > other.y
        return False

    def __add__(self, vector: Vector) -> Point:
        if not isinstance(vector, Vector):
            return NotImplemented
        return Point(self.x + vector.x, self.y + vector.y, self.z + vector.z)

    def __sub__(self, other: Point) -> Vector:
        if not isinstance(other, Point):
            return NotImplemented
        return Vector.between(other, self)

    def __str__(self) -> str:
        return f"Point({_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)})"


@dataclass(frozen=True, eq=False)
class Vector:
    """A direction in 3D space; a 2D vector has ``z`` equal to zero."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def between(cls, start: Point, end: Point) -> Vector:
        """Vector leading from ``start`` to ``end``."""
        return cls(end.x - start.x, end.y - start.y, end.z - start.z)

    def length(self) -> float:
        return math.sqrt(self.squared_length())

    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vector:
        """Unit vector of the same direction; a zero vector yields NaN coordinates."""
        size = self.length()
        if size == 0:
            return Vector(math.nan, math.nan, math.nan)
        return Vector(self.x / size, self.y / size, self.z / size)

    def rotated_around_x(self, degrees: float) -> Vector:
        radians = _to_radians(degrees)
        cos, sin = math.cos(radians), math.sin(radians)
        return Vector(self.x, self.y * cos - self.z * sin, self.y * sin + self.z * cos)

    def rotated_around_y(self, degrees: float) -> Vector:
        radians = _to_radians(degrees)
        cos, sin = math.cos(radians), math.sin(radians)
        return Vector(self.z * sin + self.x * cos, self.y, self.z * cos - self.x * sin)

    def rotated_around_z(self, degrees: float) -> Vector:
        radians = _to_radians(degrees)
        cos, sin = math.cos(radians), math.sin(radians)
        return Vector(self.x * cos - self.y * sin, self.x * sin + self.y * cos, self.z)

    def rotated(self, x_degrees: float, y_degrees: float, z_degrees: float) -> Vector:
        """Rotate around X, then Y, then Z; positive angles are counter-clockwise."""
        return (
            self.rotated_around_x(x_degrees)
            .rotated_around_y(y_degrees)
            .rotated_around_z(z_degrees)
        )

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def perp_dot(self, other: Vector) -> float:
        """The 2D 'perp dot' product."""
        return self.x * other.y - other.x * self.y

    def cross(self, other: Vector) -> Vector:
        if self.is_parallel_with(other):
            raise ValueError("cross product of parallel vectors is undefined")
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def angle_to(self, other: Vector) -> float:
        """Angle in radians within [0, PI]; NaN when either vector has zero length."""
        product = self.normalized().dot(other.normalized())
        if abs(product - 1) <= EPSILON:
            product = 1.0
        if abs(product + 1) <= EPSILON:
            product = -1.0
        if not -1.0 <= product <= 1.0:
            return math.nan
        return math.acos(product)

    def is_parallel_with(self, other: Vector) -> bool:
        angle = self.angle_to(other)
        return abs(angle) <= EPSILON or abs(angle - PI) <= EPSILON

    def angle_to_x_axis(self) -> float:
        """Angle in radians to the X axis, within [0, 2*PI); 2D only."""
        angle = math.atan2(self.y, self.x)
        if angle < 0:
            angle += 2 * PI
        return angle

    def to_point(self) -> Point:
        return Point(self.x, self.y, self.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return (
            abs(self.x - other.x) < COORDINATES_EPSILON
            and abs(self.y - other.y) < COORDINATES_EPSILON
            and abs(self.z - other.z) < COORDINATES_EPSILON
        )

    __hash__ = None  # equality is approximate, so vectors are not hashable

    def __mul__(self, constant: float) -> Vector:
        if not isinstance(constant, (int, float)):
            return NotImplemented
        return Vector(constant * self.x, constant * self.y, constant * self.z)

    def __rmul__(self, constant: float) -> Vector:
        return self.__mul__(constant)

    def __truediv__(self, constant: float) -> Vector:
        if not isinstance(constant, (int, float)):
            return NotImplemented
        return Vector(self.x / constant, self.y / constant, self.z / constant)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"Vector({_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)})"