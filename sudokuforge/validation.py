"""Detection of contradictions in a table."""

from __future__ import annotations

from .cell import Cell
from .history import Strategy
from .table import Table
from .zone import ZoneKind
from .zone_cache import ZoneCache


def find_invalid_cell(zone_cache: ZoneCache, table: Table) -> Cell | None:
    """Return a cell that breaks a zone's rule, or None if the table is consistent.

    A unique zone fails on a repeated settled value or a cell with no
    candidates. A sum zone fails when its settled total differs from the
    required one, or when the smallest possible total already exceeds it.
    Zones that pass are marked as checked and skipped on later calls.
    """
    for zone, cells in zone_cache.zones.items():
        if zone_cache.is_checked(zone, Strategy.VALIDATE):
            continue

        if zone.kind is ZoneKind.UNIQUE:
            seen: set[int] = set()
            for cell in cells:
                note = table.note(cell)
                value = note.solved_value()
                if value is not None:
                    if value in seen:
                        return cell
                    seen.add(value)
                if note.count() == 0:
                    return cell
        else:
            required = zone.total if zone.total is not None else 0
            total = 0
            all_settled = True
            for cell in cells:
                note = table.note(cell)
                value = note.solved_value()
                if value is None:
                    all_settled = False
                    value = note.minimum()
                    if value is None:
                        return cell
                total += value + 1
            if all_settled:
                if total != required:
                    return cells[0]
            elif total > required:
                return cells[0]

        zone_cache.mark_checked(zone, Strategy.VALIDATE)

    return None