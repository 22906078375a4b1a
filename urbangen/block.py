"""Building blocks and their subdivision into lots."""

from __future__ import annotations

import math
import random

from urbangen.area import Area, Lot
from urbangen.line import Intersection, Line
from urbangen.linesegment import LineSegment
from urbangen.polygon import Polygon
from urbangen.primitives import Point, Vector
from urbangen.subregion import Edge, SubRegion


def _cycle(start: Edge) -> list[Edge]:
    edges = []
    edge = start
    while True:
        edges.append(edge)
        edge = edge.next
        if edge is start:
            return edges


class Block(Area):
    """An area enclosed by a loop of roads, to be subdivided into lots."""

    def __init__(self, parent: Area | None = None, border: Polygon | None = None) -> None:
        super().__init__(border, parent)
        self.lots: list[Lot] = []

    def create_lots(
        self,
        lot_width: float,
        lot_height: float,
        deviance: float,
        rng: random.Random | None = None,
    ) -> None:
        """Subdivide the block into lots of roughly the given width and depth.

        ``deviance`` in [0, 1] shifts every split point randomly by up to that
        fraction of a lot; ``rng`` supplies the random numbers.
        """
        if not 0 <= deviance <= 1:
            raise ValueError("deviance must lie between 0 and 1")
        if len(self.constraints) < 3:
            raise ValueError("a block needs at least three vertices")
        generator = rng if rng is not None else random.Random()

        region = SubRegion(self.constraints)
        for edge in region.edges():
            edge.has_road_access = True

        queue: list[SubRegion] = [region]
        finished: list[SubRegion] = []

        while queue:
            region = queue[-1]

            longest = region.longest_edge_with_road_access()
            if longest is None:
                finished.append(queue.pop())
                continue
            edge_line = LineSegment(longest.begining, longest.next.begining)
            if edge_line.length() <= lot_width:
                longest = region.longest_edge_without_road_access()
                if longest is None:
                    finished.append(queue.pop())
                    continue
                edge_line = LineSegment(longest.begining, longest.next.begining)
                if edge_line.length() <= lot_height:
                    finished.append(queue.pop())
                    continue
                split_size = lot_height
            else:
                split_size = lot_width

            first = self._split_point(edge_line, split_size, deviance, generator)
            second = first + edge_line.normal()
            pieces = self._split_region(region, first, second)
            queue.pop()
            queue.extend(piece for piece in pieces if piece.has_road_access())

        for region in finished:
            polygon = region.to_polygon()
            if len(polygon) >= 3 and polygon.is_non_self_intersecting():
                self.lots.append(Lot(self, polygon))

    @staticmethod
    def _split_point(
        edge: LineSegment, split_size: float, deviance: float, rng: random.Random
    ) -> Point:
        factor = math.floor(edge.length() / split_size + 0.5)
        fraction = 1 / factor
        middle = (factor / 2) * fraction
        direction = Vector.between(edge.begining, edge.end)
        offset = deviance * (rng.uniform(0, 1) - 0.5) * fraction
        return edge.begining + direction * (middle + offset)

    @staticmethod
    def _split_region(region: SubRegion, a: Point, b: Point) -> list[SubRegion]:
        first_edge = next(region.edges())
        ab = b - a
        split_line = Line(a, b)
        created: list[Edge] = []

        edge = first_edge
        while True:
            current = LineSegment(edge.begining, edge.next.begining)
            result, point = current.intersection_2d(split_line)
            if result is Intersection.INTERSECTING:
                if point == current.begining:
                    created.append(edge)
                elif point != current.end:
                    inserted = region.insert(edge, point)
                    inserted.has_road_access = edge.has_road_access
                    created.append(inserted)
                    edge = edge.next
            edge = edge.next
            if edge is first_edge:
                break

        created.sort(key=lambda e: (e.begining - a).dot(ab))

        for edge in region.edges():
            edge.s = 0.0

        if len(created) % 2:
            return []

        for left, right in zip(created[::2], created[1::2]):
            region.bridge(left, right)

        pieces: list[SubRegion] = []
        for start in created:
            cycle = _cycle(start)
            if any(edge.s > 0 for edge in cycle):
                continue
            for edge in cycle:
                edge.s = 1.0
            pieces.append(SubRegion.from_edge(start))
        return pieces