"""Regions kept as a cyclic graph of edges, used to subdivide blocks into lots."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from urbangen.polygon import Polygon
from urbangen.primitives import Point


@dataclass(eq=False)
class Edge:
    """An edge starting at ``begining`` and leading to the next edge's start."""

    begining: Point
    s: float = 0.0
    has_road_access: bool = False
    previous: Edge | None = field(default=None, repr=False)
    next: Edge | None = field(default=None, repr=False)

    def __lt__(self, other: Edge) -> bool:
        return self.begining < other.begining


def _cycle(start: Edge) -> Iterator[Edge]:
    edge = start
    while True:
        yield edge
        edge = edge.next
        if edge is start:
            break


def _link(edges: list[Edge]) -> Edge:
    for current, following in zip(edges, edges[1:] + edges[:1]):
        current.next = following
        following.previous = current
    return edges[0]


def _edge_length(edge: Edge) -> float:
    return (edge.next.begining - edge.begining).length()


class SubRegion:
    """A polygon stored as a doubly linked cycle of edges."""

    def __init__(self, polygon: Polygon | None = None) -> None:
        self._first: Edge | None = None
        if polygon is not None:
            if len(polygon) < 3:
                raise ValueError("a region needs at least three vertices")
            self._first = _link([Edge(vertex) for vertex in polygon])

    @classmethod
    def from_edge(cls, edge: Edge) -> SubRegion:
        """Copy of the cycle that ``edge`` belongs to, starting at ``edge``."""
        region = cls()
        region._first = _link(
            [Edge(e.begining, e.s, e.has_road_access) for e in _cycle(edge)]
        )
        return region

    def edges(self) -> Iterator[Edge]:
        """Edges of the cycle, starting at the first one."""
        if self._first is not None:
            yield from _cycle(self._first)

    def insert(self, after: Edge | None, begining: Point) -> Edge:
        """Insert a new edge starting at ``begining`` right after ``after``."""
        if self._first is None:
            edge = Edge(begining)
            edge.previous = edge.next = edge
            self._first = edge
            return edge
        if after is None:
            raise ValueError("an edge to insert after is required")
        edge = Edge(begining)
        following = after.next
        after.next = edge
        edge.previous = after
        edge.next = following
        following.previous = edge
        return edge

    def bridge(self, first: Edge, second: Edge) -> None:
        """Join two edges by a pair of new edges, splitting the cycle in two."""
        other_first = self.insert(first, first.begining)
        other_first.has_road_access = first.has_road_access
        other_second = self.insert(second, second.begining)
        other_second.has_road_access = second.has_road_access

        first.next = other_second
        other_second.previous = first
        second.next = other_first
        other_first.previous = second

        first.has_road_access = False
        second.has_road_access = False

    def has_road_access(self) -> bool:
        return any(edge.has_road_access for edge in self.edges())

    def _longest(self, road_access: bool) -> Edge | None:
        if self._first is None:
            raise ValueError("the region has no edges")
        longest = None
        for edge in self.edges():
            if edge.has_road_access != road_access:
                continue
            if longest is None or _edge_length(edge) > _edge_length(longest):
                longest = edge
        return longest

    def longest_edge_with_road_access(self) -> Edge | None:
        return self._longest(True)

    def longest_edge_without_road_access(self) -> Edge | None:
        return self._longest(False)

    def to_polygon(self) -> Polygon:
        return Polygon(*(edge.begining for edge in self.edges()))

    def __str__(self) -> str:
        parts = ["SubRegion( \n"]
        for edge in self.edges():
            parts.append(
                "  Edge(\n"
                f"    point      = {edge.begining}\n"
                f"    roadAccess = {int(edge.has_road_access)}\n"
                f"    s          = {edge.s:g}),\n"
            )
        parts.append(")\n")
        return "".join(parts)