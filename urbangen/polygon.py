"""Planar polygons and the operations the city generator needs on them."""

from __future__ import annotations

from collections.abc import Iterator

from urbangen.line import Intersection, Line
from urbangen.linesegment import LineSegment
from urbangen.primitives import COORDINATES_EPSILON, EPSILON, Point, Vector
from urbangen.ray import Ray


def _is_inside_triangle(a: Point, b: Point, c: Point, p: Point) -> bool:
    """Whether ``p`` lies inside the counter-clockwise triangle ``a``, ``b``, ``c``."""
    ax, ay = c.x - b.x, c.y - b.y
    bx, by = a.x - c.x, a.y - c.y
    cx, cy = b.x - a.x, b.y - a.y
    apx, apy = p.x - a.x, p.y - a.y
    bpx, bpy = p.x - b.x, p.y - b.y
    cpx, cpy = p.x - c.x, p.y - c.y

    a_cross_bp = ax * bpy - ay * bpx
    c_cross_ap = cx * apy - cy * apx
    b_cross_cp = bx * cpy - by * cpx
    return a_cross_bp >= 0.0 and b_cross_cp >= 0.0 and c_cross_ap >= 0.0


class Polygon:
    """A polygon given by its vertices; most operations work in the XY plane."""

    def __init__(self, *args: Point) -> None:
        self._vertices: list[Point] = []
        for vertex in args:
            self.add_vertex(vertex)

    def __len__(self) -> int:
        return len(self._vertices)

    def __getitem__(self, index: int) -> Point:
        return self._vertices[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._vertices)

    def add_vertex(self, vertex: Point) -> None:
        """Append a vertex, ignoring it when it would create a zero-length edge."""
        if self._vertices:
            if Vector.between(vertex, self._vertices[-1]).length() <= COORDINATES_EPSILON:
                return
        self._vertices.append(vertex)

    def update_vertex(self, index: int, vertex: Point) -> None:
        self._vertices[index] = vertex

    def remove_vertex(self, index: int) -> None:
        del self._vertices[index]

    def clear(self) -> None:
        self._vertices.clear()

    def edge(self, index: int) -> LineSegment:
        """Edge leading from vertex ``index`` to the next one."""
        count = len(self._vertices)
        if count < 2:
            raise ValueError("a polygon needs at least two vertices to have edges")
        if not 0 <= index < count:
            raise IndexError("edge index out of range")
        return LineSegment(self._vertices[index], self._vertices[(index + 1) % count])

    def _pairs(self) -> Iterator[tuple[Point, Point]]:
        count = len(self._vertices)
        for index, current in enumerate(self._vertices):
            yield current, self._vertices[(index + 1) % count]

    def area(self) -> float:
        return abs(self.signed_area())

    def signed_area(self) -> float:
        """Area that is positive for counter-clockwise vertex order (2D only)."""
        return sum(a.x * b.y - a.y * b.x for a, b in self._pairs()) / 2

    def centroid(self) -> Point:
        """Centre of mass of the polygon's area (2D only)."""
        area = x = y = 0.0
        for a, b in self._pairs():
            step = a.x * b.y - b.x * a.y
            area += step
            x += (a.x + b.x) * step
            y += (a.y + b.y) * step
        if area == 0:
            raise ValueError("centroid of a polygon with zero area is undefined")
        return Point(x / (6 * (area / 2)), y / (6 * (area / 2)))

    def normal(self) -> Vector:
        """Unit normal of the plane the polygon lies in."""
        count = len(self._vertices)
        if count < 3:
            raise ValueError("a polygon needs at least three vertices to have a normal")
        first = Vector.between(self._vertices[1], self._vertices[0]).normalized()
        for index in range(1, count):
            second = Vector.between(
                self._vertices[index], self._vertices[(index + 1) % count]
            ).normalized()
            if first != second and first != -second:
                return first.cross(second).normalized()
        raise ValueError("all edges of the polygon are parallel")

    def edge_normal(self, edge_number: int) -> Vector:
        """Unit normal of an edge, always pointing into the polygon."""
        count = len(self._vertices)
        if not 0 <= edge_number < count:
            raise IndexError("edge index out of range")
        start = self._vertices[edge_number]
        end = self._vertices[(edge_number + 1) % count]

        normal_vector = Vector.between(start, end).cross(self.normal()).normalized()
        edge_center = Point(
            (start.x + end.x) / 2, (start.y + end.y) / 2, (start.z + end.z) / 2
        )
        test_ray = Ray(edge_center, normal_vector)

        intersections = 0
        vertex_hits = 0
        for index in range(count):
            if index == edge_number:
                continue
            current = self.edge(index)
            result, point = test_ray.intersection_2d(current)
            if result is Intersection.INTERSECTING:
                if point == current.begining or point == current.end:
                    vertex_hits += 1
                intersections += 1
        intersections -= vertex_hits // 2

        return normal_vector if intersections % 2 else -normal_vector

    def rotate(self, x_degrees: float, y_degrees: float, z_degrees: float) -> None:
        """Rotate the polygon around its centroid."""
        center = self.centroid()
        self._vertices = [
            center + (vertex - center).rotated(x_degrees, y_degrees, z_degrees)
            for vertex in self._vertices
        ]

    def scale(self, factor: float) -> None:
        """Scale the polygon from its centroid."""
        if factor <= 0:
            raise ValueError("scale factor must be positive")
        center = self.centroid()
        self._vertices = [
            center + (vertex - center) * factor for vertex in self._vertices
        ]

    def subtract(self, distance: float) -> None:
        """Move every edge inwards by ``distance``."""
        old = self.copy()
        count = len(old)
        for current in range(count):
            previous = current - 1 if current > 0 else count - 1
            following = (current + 1) % count

            first_normal = old.edge_normal(previous).normalized()
            first = Line(
                old[previous] + first_normal * distance,
                old[current] + first_normal * distance,
            )
            second_normal = old.edge_normal(current).normalized()
            second = Line(
                old[current] + second_normal * distance,
                old[following] + second_normal * distance,
            )

            result, new_vertex = first.intersection_2d(second)
            if result is Intersection.PARALLEL:
                new_vertex = old[current] + first_normal * distance
            self.update_vertex(current, new_vertex)

    def subtract_edge(self, edge_number: int, distance: float) -> None:
        """Move a single edge inwards by ``distance``."""
        count = len(self._vertices)
        if count < 3:
            raise ValueError("a polygon needs at least three vertices")
        previous = edge_number - 1 if edge_number - 1 >= 0 else count - 1
        current1 = edge_number
        current2 = (edge_number + 1) % count
        following = (edge_number + 2) % count

        normal = self.edge_normal(edge_number).normalized()
        shifted1 = self[current1] + normal * distance
        shifted2 = self[current2] + normal * distance
        first = Line(self[previous], self[current1])
        second = Line(self[following], self[current2])
        center = Line(shifted1, shifted2)

        result, new_vertex1 = first.intersection_2d(center)
        if result is Intersection.PARALLEL:
            new_vertex1 = shifted1
        result, new_vertex2 = second.intersection_2d(center)
        if result is Intersection.PARALLEL:
            new_vertex2 = shifted2

        self.update_vertex(current1, new_vertex1)
        self.update_vertex(current2, new_vertex2)

    def split(self, split_line: Line) -> list[Polygon]:
        """Cut the polygon along a line into closed pieces."""
        line = Line(split_line.begining, split_line.end)
        vertex_list: list[Point] = []
        found: list[Point] = []

        for index, vertex in enumerate(self._vertices):
            current_edge = self.edge(index)
            vertex_list.append(vertex)
            result, point = current_edge.intersection_2d(line)
            if result is Intersection.INTERSECTING:
                if point != current_edge.begining and point != current_edge.end:
                    vertex_list.append(point)
                found.append(point)

        found.sort()
        intersections: list[Point] = []
        for point in found:
            if not intersections or intersections[-1] != point:
                intersections.append(point)

        if len(intersections) <= 1:
            return [self.copy()]

        stack = [Polygon()]
        output: list[Polygon] = []
        for vertex in vertex_list:
            top = stack[-1]
            top.add_vertex(vertex)
            if not any(point == vertex for point in intersections):
                continue
            if len(top) > 0 and self._are_in_pair(vertex, top[0], intersections):
                if top.is_closed():
                    output.append(top)
                stack.pop()
                if not stack:
                    stack.append(Polygon())
                stack[-1].add_vertex(vertex)
            else:
                fresh = Polygon()
                fresh.add_vertex(vertex)
                stack.append(fresh)

        if stack and stack[-1].is_closed():
            output.append(stack[-1])
        return output

    @staticmethod
    def _are_in_pair(first: Point, second: Point, intersections: list[Point]) -> bool:
        for index, point in enumerate(intersections):
            if point == first:
                partner = index - 1 if index % 2 else index + 1
                if 0 <= partner < len(intersections):
                    return intersections[partner] == second
                return False
        return False

    def encloses_2d(self, point: Point) -> bool:
        """Whether ``point`` lies inside the polygon or on its border (XY plane)."""
        inside = False
        for current, following in self._pairs():
            if LineSegment(current, following).has_point_2d(point):
                return True
            if (current.y > point.y) != (following.y > point.y) and point.x < (
                following.x - current.x
            ) / (following.y - current.y) * (point.y - current.y) + current.x:
                inside = not inside
        return inside

    def is_non_self_intersecting(self) -> bool:
        ok, _, _ = self._triangulation()
        return ok

    def is_closed(self) -> bool:
        return len(self._vertices) >= 3

    def triangulate(self) -> list[Point]:
        """Vertices of triangles covering the polygon, three per triangle."""
        _, points, _ = self._triangulation()
        return points

    def surface_indexes(self) -> list[int]:
        """Vertex indexes of triangles covering the polygon, three per triangle."""
        _, _, sequence = self._triangulation()
        return sequence

    def _snip(self, u: int, v: int, w: int, n: int, order: list[int]) -> bool:
        a = self._vertices[order[u]]
        b = self._vertices[order[v]]
        c = self._vertices[order[w]]
        if EPSILON > (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x):
            return False
        for p in range(n):
            if p in (u, v, w):
                continue
            if _is_inside_triangle(a, b, c, self._vertices[order[p]]):
                return False
        return True

    def _triangulation(self) -> tuple[bool, list[Point], list[int]]:
        """Ear-clipping triangulation; the flag is False for a non-simple polygon."""
        n = len(self._vertices)
        if n < 3:
            raise ValueError("a polygon needs at least three vertices to triangulate")

        order = list(range(n)) if self.signed_area() > 0 else list(range(n - 1, -1, -1))
        points: list[Point] = []
        sequence: list[int] = []

        nv = n
        count = 2 * nv
        v = nv - 1
        while nv > 2:
            if count <= 0:
                return False, points, sequence
            count -= 1

            u = v if v < nv else 0
            v = u + 1 if u + 1 < nv else 0
            w = v + 1 if v + 1 < nv else 0

            if self._snip(u, v, w, nv, order):
                triangle = (order[u], order[v], order[w])
                points.extend(self._vertices[index] for index in triangle)
                sequence.extend(triangle)
                del order[v]
                nv -= 1
                count = 2 * nv

        return True, points, sequence

    def is_sub_area_of(self, bigger: Polygon) -> bool:
        return all(bigger.encloses_2d(vertex) for vertex in self._vertices)

    def copy(self) -> Polygon:
        return Polygon(*self._vertices)

    def __str__(self) -> str:
        return "Polygon(" + "".join(f"{vertex}, " for vertex in self._vertices) + ")."