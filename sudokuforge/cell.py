"""Cells of a puzzle grid."""

from __future__ import annotations

from collections.abc import Iterable

from .digits import check_digit
from .zone import Zone


class Cell:
    """A position in the grid and the zones it belongs to.

    Cells compare equal only to themselves, since a cell at the same
    coordinate of another table is a different cell; they are ordered by
    their row-major index.
    """

    __slots__ = ("x", "y", "size", "index", "zones", "zone_set")

    def __init__(self, x: int, y: int, zones: Iterable[Zone], size: int) -> None:
        self.x = check_digit(x, size)
        self.y = check_digit(y, size)
        self.size = size
        self.zones: tuple[Zone, ...] = tuple(zones)
        self.zone_set: frozenset[Zone] = frozenset(self.zones)
        self.index = x + y * size
        if len(self.zone_set) != len(self.zones):
            raise ValueError(f"cell has a duplicated zone. x:{x}, y:{y}")

    def coordinate(self) -> tuple[int, int]:
        """The ``(x, y)`` position of the cell."""
        return (self.x, self.y)

    def rep_zone(self) -> Zone | None:
        """The first zone of the cell, used to draw region borders."""
        return self.zones[0] if self.zones else None

    def in_zone(self, zone: Zone) -> bool:
        """True when the cell belongs to ``zone``."""
        return zone in self.zone_set

    def __lt__(self, other: Cell) -> bool:
        return self.index < other.index

    def __le__(self, other: Cell) -> bool:
        return self.index <= other.index

    def __gt__(self, other: Cell) -> bool:
        return self.index > other.index

    def __ge__(self, other: Cell) -> bool:
        return self.index >= other.index

    def __repr__(self) -> str:
        return f"Cell(x={self.x}, y={self.y}, zones={list(self.zones)!r})"