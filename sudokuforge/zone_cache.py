"""Per-table lookup of zones, their cells and which checks they have passed."""

from __future__ import annotations

from collections.abc import Iterable

from .cell import Cell
from .history import Strategy
from .table import Table
from .zone import Zone, ZoneKind


class ZoneCache:
    """Zones of a table with their cells, the zones they touch and check flags.

    ``zones`` maps each zone, in zone order, to its cells in row-major order.
    ``connections`` maps each zone to every zone that shares a cell with it,
    itself included. A zone marked as checked for a strategy is skipped by
    that strategy until one of its cells changes.
    """

    def __init__(self, table: Table) -> None:
        members: dict[Zone, list[Cell]] = {}
        for cell in table:
            for zone in cell.zones:
                members.setdefault(zone, []).append(cell)

        self.zones: dict[Zone, list[Cell]] = {
            zone: sorted(members[zone]) for zone in sorted(members)
        }

        for zone, cells in self.zones.items():
            if zone.kind is ZoneKind.UNIQUE and len(cells) != table.size:
                raise ValueError(
                    f"a unique zone must hold as many cells as the puzzle size. "
                    f"zone: {zone.number}"
                )

        self.connections: dict[Zone, list[Zone]] = {
            first: [
                second
                for second, cells in self.zones.items()
                if any(cell.in_zone(first) for cell in cells)
            ]
            for first in self.zones
        }

        self._checked: dict[Zone, dict[Strategy, bool]] = {
            zone: {strategy: False for strategy in Strategy} for zone in self.zones
        }

    def is_checked(self, zone: Zone, strategy: Strategy) -> bool:
        """True when ``zone`` has passed ``strategy`` since its last change."""
        return self._checked[zone][strategy]

    def mark_checked(self, zone: Zone, strategy: Strategy) -> None:
        """Record that ``zone`` has passed ``strategy``."""
        self._checked[zone][strategy] = True

    def clear_checked(self, cells: Iterable[Cell]) -> None:
        """Forget every check of every zone the given cells belong to."""
        for cell in cells:
            for zone in cell.zones:
                flags = self._checked[zone]
                for strategy in flags:
                    flags[strategy] = False

    def clear_all(self) -> None:
        """Forget every check of every zone."""
        for flags in self._checked.values():
            for strategy in flags:
                flags[strategy] = False