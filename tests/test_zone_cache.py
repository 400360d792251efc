import pytest

from sudokuforge.cell import Cell
from sudokuforge.history import Strategy
from sudokuforge.layouts import default_9, table_from_zone_map
from sudokuforge.table import Table
from sudokuforge.zone import Zone, ZoneKind
from sudokuforge.zone_cache import ZoneCache


def _table_with_sum(members=((0, 0), (1, 0)), total=3):
    size = 4
    rows = []
    for y in range(size):
        row = []
        for x in range(size):
            zones = [
                Zone.unique((y // 2) * 2 + x // 2 + 1),
                Zone.unique(x + size + 1),
                Zone.unique(y + 2 * size + 1),
            ]
            if (x, y) in members:
                zones.append(Zone.summed(20, total))
            row.append(Cell(x, y, zones, size))
        rows.append(row)
    return Table.from_rows(size, rows)


def test_unique_zones_hold_size_cells_in_order():
    table = default_9()
    cache = ZoneCache(table)
    for zone, cells in cache.zones.items():
        assert len(cells) == table.size
        assert [c.index for c in cells] == sorted(c.index for c in cells)
        assert all(c.in_zone(zone) for c in cells)


def test_zones_cover_every_cell_zone_in_order():
    table = default_9()
    cache = ZoneCache(table)
    assert set(cache.zones) == {z for cell in table for z in cell.zones}
    numbers = [z.number for z in cache.zones]
    assert numbers == sorted(numbers)


def test_connections_are_zones_sharing_a_cell():
    table = default_9()
    cache = ZoneCache(table)
    for first, linked in cache.connections.items():
        assert first in linked
        for second in cache.zones:
            shares = any(c.in_zone(first) for c in cache.zones[second])
            assert (second in linked) == shares


def test_two_rows_are_not_connected():
    table = default_9()
    cache = ZoneCache(table)
    row0 = table.cell_at(0, 0).zones[2]
    row1 = table.cell_at(0, 1).zones[2]
    assert row1 not in cache.connections[row0]
    box = table.cell_at(0, 0).zones[0]
    assert box in cache.connections[row0]


def test_flags_start_clear_and_can_be_marked():
    table = default_9()
    cache = ZoneCache(table)
    zone = table.cell_at(0, 0).zones[0]
    assert not any(cache.is_checked(z, s) for z in cache.zones for s in Strategy)
    cache.mark_checked(zone, Strategy.NAKED)
    assert cache.is_checked(zone, Strategy.NAKED)
    assert not cache.is_checked(zone, Strategy.SINGLE)


def test_clear_checked_resets_only_the_cells_zones():
    table = default_9()
    cache = ZoneCache(table)
    for zone in cache.zones:
        for strategy in Strategy:
            cache.mark_checked(zone, strategy)
    target = table.cell_at(0, 0)
    cache.clear_checked([target])
    for zone in cache.zones:
        for strategy in Strategy:
            assert cache.is_checked(zone, strategy) == (not target.in_zone(zone))


def test_clear_all_resets_everything():
    table = default_9()
    cache = ZoneCache(table)
    for zone in cache.zones:
        cache.mark_checked(zone, Strategy.VALIDATE)
    cache.clear_all()
    assert not any(cache.is_checked(z, Strategy.VALIDATE) for z in cache.zones)


def test_uneven_unique_zone_is_rejected():
    zone_map = [1, 1, 1, 2, 3, 3, 2, 2, 3, 3, 4, 4, 4, 4, 4, 4]
    table = table_from_zone_map(4, zone_map)
    with pytest.raises(ValueError):
        ZoneCache(table)


def test_sum_zone_size_is_not_restricted():
    table = _table_with_sum()
    cache = ZoneCache(table)
    sums = [z for z in cache.zones if z.kind is ZoneKind.SUM]
    assert len(sums) == 1
    assert cache.zones[sums[0]] == [table.cell_at(0, 0), table.cell_at(1, 0)]