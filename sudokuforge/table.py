"""The puzzle grid: its cells and the candidate notes of each cell."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator

from .cell import Cell
from .digits import check_digit, digit_char
from .num_check import NumCheck
from .zone import Zone

# Border pieces drawn between four cells, keyed by which neighbouring pairs
# share a region: (top pair, left pair, right pair, bottom pair).
_JUNCTIONS: dict[tuple[bool, bool, bool, bool], str] = {
    (True, True, True, True): "╌╌",
    (False, False, False, False): "═╬",
    (True, False, False, True): "══",
    (False, True, True, False): "╌║",
    (True, True, False, False): "╌═",
    (False, False, False, True): "═╩",
    (True, False, True, False): "═╗",
    (False, False, True, True): "═╝",
    (False, True, False, True): "╌╚",
    (True, False, False, False): "═╦",
}


class Table:
    """A square grid of ``size`` by ``size`` cells with a note per cell.

    Cells are stored in row-major order; every note starts with all digits
    possible.
    """

    def __init__(self, size: int, cells: Iterable[Cell]) -> None:
        self.size = size
        self._cells: list[Cell] = []
        previous = -1
        for cell in cells:
            if cell.size != size:
                raise ValueError(f"cell of size {cell.size} in a table of size {size}")
            if cell.index <= previous:
                raise ValueError("cells must be given in row-major order")
            previous = cell.index
            self._cells.append(cell)
        if len(self._cells) != size * size:
            raise ValueError(
                f"a table of size {size} needs {size * size} cells, got {len(self._cells)}"
            )
        if any(position != cell.index for position, cell in enumerate(self._cells)):
            raise ValueError("cells must cover every coordinate exactly once")
        self._notes: list[NumCheck] = [NumCheck.all_true(size) for _ in self._cells]

    @classmethod
    def from_rows(cls, size: int, rows: Iterable[Iterable[Cell]]) -> Table:
        """Build a table from rows of cells, top row first."""
        return cls(size, (cell for row in rows for cell in row))

    def _position(self, cell: Cell) -> int:
        index = cell.index
        if not 0 <= index < len(self._cells) or self._cells[index] is not cell:
            raise ValueError("cell does not belong to this table")
        return index

    def cell_at(self, x: int, y: int) -> Cell:
        """The cell at column ``x`` and row ``y``."""
        check_digit(x, self.size)
        check_digit(y, self.size)
        return self._cells[x + y * self.size]

    def note(self, cell: Cell) -> NumCheck:
        """The notes of ``cell``, which must belong to this table."""
        return self._notes[self._position(cell)]

    def note_at(self, x: int, y: int) -> NumCheck:
        """The notes of the cell at ``(x, y)``."""
        return self._notes[self.cell_at(x, y).index]

    def set_note(self, cell: Cell, note: NumCheck) -> None:
        """Replace the notes of ``cell``."""
        if note.size != self.size:
            raise ValueError(f"note of size {note.size} in a table of size {self.size}")
        self._notes[self._position(cell)] = note

    def items(self) -> Iterator[tuple[Cell, NumCheck]]:
        """Pairs of cell and notes, in row-major order."""
        return zip(list(self._cells), list(self._notes))

    def validate_notes(self) -> None:
        """Check the bookkeeping of every note; raise ValueError on a fault."""
        for note in self._notes:
            note.validate()

    def note_format(self) -> str:
        """Draw every cell's candidates as a small block of characters."""
        n = self.size
        block = math.isqrt(n)
        if block * block < n:
            block += 1

        lines: list[str] = []
        for y in range(n):
            rows = [[] for _ in range(block)]
            for x in range(n):
                note = self.note_at(x, y)
                for digit in range(n):
                    char = digit_char(digit) if digit in note else " "
                    rows[digit // block].append(char)
                for row in rows:
                    row.append("|")
            lines.extend("".join(row) for row in rows)
            lines.append("-" * (n * block + n))
        return "".join(line + "\n" for line in lines)

    def _rep(self, x: int, y: int) -> Zone | None:
        return self.cell_at(x, y).rep_zone()

    def _render(self, value_of: Callable[[NumCheck], int | None]) -> str:
        n = self.size
        last = n - 1
        shown = 0
        blank = 0
        parts: list[str] = ["╔═"]

        for x in range(n):
            if x == last:
                parts.append("╗")
            else:
                parts.append("═" if self._rep(x + 1, 0) == self._rep(x, 0) else "╦")
                parts.append("═")

        for y in range(n):
            if y != 0:
                for x in range(n):
                    above = self._rep(x, y - 1)
                    here = self._rep(x, y)
                    if x == 0:
                        parts.append("║╌╌" if above == here else "╠══")
                        continue
                    if x == last:
                        parts.append("╌║" if above == here else "═╣")
                        continue
                    next_above = self._rep(x + 1, y - 1)
                    next_here = self._rep(x + 1, y)
                    key = (
                        above == next_above,
                        above == here,
                        next_above == next_here,
                        here == next_here,
                    )
                    parts.append(_JUNCTIONS.get(key, "  "))
            parts.append("\n║")

            for x in range(n):
                value = value_of(self.note_at(x, y))
                if value is None:
                    parts.append(" ")
                    blank += 1
                else:
                    parts.append(digit_char(value))
                    shown += 1

                if x == last or self._rep(x, y) != self._rep(x + 1, y):
                    parts.append("║")
                else:
                    parts.append("┆")
            parts.append("\n")

        parts.append("╚═")
        for x in range(n):
            if x == last:
                parts.append("╝")
            else:
                parts.append("═" if self._rep(x + 1, last) == self._rep(x, last) else "╩")
                parts.append("═")
        parts.append("\n")
        parts.append(f"some: {shown}\tnone: {blank}")
        return "".join(parts)

    def render(self) -> str:
        """Draw the grid with the settled value of each cell."""
        return self._render(NumCheck.solved_value)

    def render_punched(self) -> str:
        """Draw the grid with the remembered answer of each cell."""
        return self._render(NumCheck.fixed_value)

    def __iter__(self) -> Iterator[Cell]:
        return iter(list(self._cells))

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        if self.size != other.size:
            return False
        return all(a.same_notes(b) for a, b in zip(self._notes, other._notes))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return self.note_format()