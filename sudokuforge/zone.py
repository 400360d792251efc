"""Zones: groups of cells that share a constraint."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

_MAX_ZONE_NUMBER = 0xFFFF


class ZoneKind(IntEnum):
    """The constraint a zone imposes on its cells."""

    UNIQUE = 0
    SUM = 1


@dataclass(frozen=True, order=True)
class Zone:
    """A zone identified by its number and kind.

    Two zones are equal when their number and kind match; the required total
    of a sum zone does not take part in comparisons.
    """

    number: int
    kind: ZoneKind = ZoneKind.UNIQUE
    total: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not 0 <= self.number <= _MAX_ZONE_NUMBER:
            raise ValueError(f"zone number {self.number} does not fit in 16 bits")
        if self.kind is ZoneKind.SUM and self.total is None:
            raise ValueError("a sum zone needs a total")
        if self.kind is ZoneKind.UNIQUE and self.total is not None:
            raise ValueError("a unique zone has no total")

    @classmethod
    def unique(cls, number: int) -> Zone:
        """Zone whose cells must all hold different digits."""
        return cls(number, ZoneKind.UNIQUE)

    @classmethod
    def summed(cls, number: int, total: int) -> Zone:
        """Zone whose cells' values (counted from 1) must add up to ``total``."""
        return cls(number, ZoneKind.SUM, total)