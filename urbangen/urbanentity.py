"""Entities placed in the city, such as buildings, woods or squares."""

from __future__ import annotations

from typing import ClassVar

from urbangen.area import Lot

_TYPE_LIMIT = 1 << 16


class UrbanEntity:
    """An object standing on a lot, tagged with a numeric entity type."""

    BUILDING: ClassVar[int] = 0
    """Built-in entity type of buildings."""

    _defined_types: ClassVar[int] = 1000

    def __init__(self, lot: Lot | None = None, entity_type: int = BUILDING) -> None:
        self.lot = lot
        self.entity_type = entity_type

    @classmethod
    def define_new_entity_type(cls) -> int:
        """Reserve and return a new unique entity type identifier."""
        UrbanEntity._defined_types = (UrbanEntity._defined_types + 1) % _TYPE_LIMIT
        return UrbanEntity._defined_types