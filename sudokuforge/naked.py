"""Naked pairs, triples and larger groups within a zone."""

from __future__ import annotations

from collections.abc import Sequence

from .cell import Cell
from .combinations import combinations
from .history import NakedFound, SolverResult, Strategy
from .table import Table
from .zone import ZoneKind
from .zone_cache import ZoneCache


def _union_mask(group: Sequence[Cell], table: Table, length: int) -> int | None:
    mask = 0
    for cell in group:
        mask |= table.note(cell).bit_flag()
        if mask.bit_count() > length:
            return None
    return mask if mask.bit_count() == length else None


def _naked_in_zone(cells: list[Cell], table: Table) -> SolverResult | None:
    size = table.size
    open_cells = [cell for cell in cells if table.note(cell).count() > 1]

    for length in range(2, size // 2):
        targets = [cell for cell in open_cells if table.note(cell).count() <= length]
        for group in combinations(targets, length):
            mask = _union_mask(group, table, length)
            if mask is None:
                continue

            effects = []
            for other in cells:
                if any(other is member for member in group):
                    continue
                shared = [n for n in table.note(other) if mask >> n & 1]
                if shared:
                    effects.append((other, shared))

            if effects:
                values = tuple(n for n in range(size) if mask >> n & 1)
                return SolverResult(NakedFound(values, tuple(group)), effects)
    return None


def find_naked(zone_cache: ZoneCache, table: Table) -> SolverResult | None:
    """Find ``k`` open cells of a zone that share exactly ``k`` digits.

    Group sizes from 2 up to, but not including, half the puzzle size are
    tried, smallest first. The effects remove those digits from the zone's
    other cells. Zones where nothing is found are marked as checked.
    """
    for zone, cells in zone_cache.zones.items():
        if zone.kind is not ZoneKind.UNIQUE:
            continue
        if zone_cache.is_checked(zone, Strategy.NAKED):
            continue
        result = _naked_in_zone(cells, table)
        if result is not None:
            return result
        zone_cache.mark_checked(zone, Strategy.NAKED)
    return None