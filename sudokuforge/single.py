"""Removal of a settled value from the other cells of its zones."""

from __future__ import annotations

from .cell import Cell
from .history import SingleFound, SolverResult, Strategy
from .table import Table
from .zone import Zone, ZoneKind
from .zone_cache import ZoneCache


def _single_in_zone(
    zone: Zone, cells: list[Cell], zone_cache: ZoneCache, table: Table
) -> SolverResult | None:
    for cell in cells:
        value = table.note(cell).solved_value()
        if value is None:
            continue

        effects = [
            (other, [value])
            for other in cells
            if other is not cell and value in table.note(other)
        ]
        if not effects:
            continue

        for other_zone in cell.zones:
            if other_zone == zone:
                continue
            effects.extend(
                (other, [value])
                for other in zone_cache.zones[other_zone]
                if other is not cell and value in table.note(other)
            )
        return SolverResult(SingleFound(value), effects)
    return None


def find_singles(zone_cache: ZoneCache, table: Table) -> SolverResult | None:
    """Find a settled cell whose value is still a candidate of a peer.

    The effects list the peers in the zone where the cell was found first,
    then the peers in the cell's other zones; a peer may appear more than
    once. Zones that hold nothing to remove are marked as checked.
    """
    for zone, cells in zone_cache.zones.items():
        if zone.kind is not ZoneKind.UNIQUE:
            continue
        if zone_cache.is_checked(zone, Strategy.SINGLE):
            continue
        result = _single_in_zone(zone, cells, zone_cache, table)
        if result is not None:
            return result
        zone_cache.mark_checked(zone, Strategy.SINGLE)
    return None