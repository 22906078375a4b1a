"""City areas (zones, districts, blocks, lots) bounded by a polygon."""

from __future__ import annotations

from urbangen.polygon import Polygon


class Area:
    """A region of the city, bounded by a polygon and possibly part of a larger area."""

    def __init__(
        self, constraints: Polygon | None = None, parent: Area | None = None
    ) -> None:
        self.constraints = constraints if constraints is not None else Polygon()
        self.parent = parent

    @property
    def constraints(self) -> Polygon:
        """The polygon bounding the area."""
        return self._constraints

    @constraints.setter
    def constraints(self, polygon: Polygon) -> None:
        self._constraints = polygon.copy()


class Lot(Area):
    """A parcel of a block on which a building may later be constructed."""

    def __init__(
        self, parent: Area | None = None, constraints: Polygon | None = None
    ) -> None:
        super().__init__(constraints, parent)