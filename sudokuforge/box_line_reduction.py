"""Box/line reduction: a digit confined to the overlap of two zones."""

from __future__ import annotations

from .cell import Cell
from .history import BoxLineReductionFound, SolverResult, Strategy
from .num_check import NumCheck
from .table import Table
from .zone import Zone, ZoneKind
from .zone_cache import ZoneCache


def _open_union(cells: list[Cell], table: Table) -> NumCheck:
    union = NumCheck.all_false(table.size)
    for cell in cells:
        note = table.note(cell)
        if note.count() > 1:
            note.merge_into(union)
    return union


def _reduce_zone(
    zone: Zone, cells: list[Cell], zone_cache: ZoneCache, table: Table
) -> SolverResult | None:
    union = _open_union(cells, table)

    for other_zone in zone_cache.connections.get(zone, []):
        if other_zone.kind is not ZoneKind.UNIQUE:
            continue
        other_cells = zone_cache.zones[other_zone]

        for value in union:
            outside_overlap = any(
                not cell.in_zone(other_zone) and value in table.note(cell)
                for cell in cells
            )
            if outside_overlap:
                continue

            effects = [
                (cell, [value])
                for cell in other_cells
                if not cell.in_zone(zone) and value in table.note(cell)
            ]
            if effects:
                return SolverResult(BoxLineReductionFound(value), effects)
    return None


def find_box_line_reductions(zone_cache: ZoneCache, table: Table) -> SolverResult | None:
    """Find a digit that, within one zone, only appears where a second zone overlaps it.

    That digit is then removed from the rest of the second zone. Zones where
    nothing is found are marked as checked.
    """
    for zone, cells in zone_cache.zones.items():
        if zone.kind is not ZoneKind.UNIQUE:
            continue
        if zone not in zone_cache.connections:
            continue
        if zone_cache.is_checked(zone, Strategy.BOX_LINE_REDUCTION):
            continue
        result = _reduce_zone(zone, cells, zone_cache, table)
        if result is not None:
            return result
        zone_cache.mark_checked(zone, Strategy.BOX_LINE_REDUCTION)
    return None