"""Ready-made grid shapes."""

from __future__ import annotations

from collections.abc import Sequence

from .cell import Cell
from .table import Table
from .zone import Zone

_JIGSAW_9 = (
    1, 1, 1, 1, 1, 2, 2, 2, 2,
    4, 1, 1, 1, 3, 3, 2, 2, 2,
    4, 4, 1, 3, 3, 3, 3, 2, 2,
    4, 4, 4, 5, 5, 3, 3, 3, 6,
    4, 4, 5, 5, 5, 5, 5, 6, 6,
    4, 7, 7, 7, 5, 5, 6, 6, 6,
    8, 8, 7, 7, 7, 7, 9, 6, 6,
    8, 8, 8, 7, 7, 9, 9, 9, 6,
    8, 8, 8, 8, 9, 9, 9, 9, 9,
)


def table_from_zone_map(size: int, zone_map: Sequence[int]) -> Table:
    """Build a table whose regions are given row by row in ``zone_map``.

    Region numbers should lie in ``1..size``; columns and rows get the zone
    numbers that follow them.
    """
    if len(zone_map) != size * size:
        raise ValueError(f"zone map needs {size * size} entries, got {len(zone_map)}")
    rows = [
        [
            Cell(
                x,
                y,
                [
                    Zone.unique(zone_map[x + y * size]),
                    Zone.unique(x + size + 1),
                    Zone.unique(y + 2 * size + 1),
                ],
                size,
            )
            for x in range(size)
        ]
        for y in range(size)
    ]
    return Table.from_rows(size, rows)


def _boxed(size: int, box_width: int, box_height: int) -> Table:
    per_row = size // box_width
    zone_map = [
        (y // box_height) * per_row + x // box_width + 1
        for y in range(size)
        for x in range(size)
    ]
    return table_from_zone_map(size, zone_map)


def default_9() -> Table:
    """Classic 9x9 grid with 3x3 boxes."""
    return _boxed(9, 3, 3)


def default_16() -> Table:
    """16x16 grid with 4x4 boxes."""
    return _boxed(16, 4, 4)


def default_32() -> Table:
    """32x32 grid with boxes 8 wide and 4 tall."""
    return _boxed(32, 8, 4)


def jigsaw_9() -> Table:
    """9x9 grid with irregular regions."""
    return table_from_zone_map(9, _JIGSAW_9)