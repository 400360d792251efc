"""Filling a table by logic, with guesses and backtracking when logic runs out."""

from __future__ import annotations

import random
import secrets
import time

from .box_line_reduction import find_box_line_reductions
from .cell import Cell
from .history import (
    BacktraceStep,
    GuessStep,
    HistoryEntry,
    SolverResult,
    SolveStep,
    Strategy,
    strategy_of,
)
from .naked import find_naked
from .single import find_singles
from .table import Table
from .validation import find_invalid_cell
from .zone_cache import ZoneCache


class Solver:
    """Solves, or fills from scratch, the puzzle held by a table.

    Every change is recorded in ``history`` so that a contradiction can be
    undone back to the most recent guess. The same seed on the same table
    shape always produces the same puzzle.
    """

    def __init__(
        self,
        table: Table,
        seed: int | None = None,
        zone_cache: ZoneCache | None = None,
    ) -> None:
        self.table = table
        self.zone_cache = zone_cache if zone_cache is not None else ZoneCache(table)
        self.history: list[HistoryEntry] = []
        self.seed = secrets.randbits(64) if seed is None else seed
        self.rng = random.Random(self.seed)
        self._solve_counts: dict[Strategy, int] = {strategy: 0 for strategy in Strategy}
        self.guess_count = 0
        self.guess_rollback_count = 0
        self.guess_backtrace_rollback_count = 0

    def fill_puzzle(self, timeout: float | None = None) -> int:
        """Try to settle every cell within ``timeout`` seconds (no limit when None).

        Returns how many cells are left unsettled: zero on success.
        """
        start = time.monotonic()
        while True:
            unsolved = self.unsolved_cell_count()
            if unsolved == 0:
                return 0
            timed_out = timeout is not None and time.monotonic() - start >= timeout
            if timed_out or not self.fill_once():
                return unsolved

    def fill_once(self) -> bool:
        """Apply one logical step, or guess when logic finds nothing."""
        if self.solve():
            return True
        if self.guess_random():
            self.guess_count += 1
            return True
        return False

    def solve(self) -> bool:
        """Apply one logical step; roll back to the last guess on a contradiction.

        Returns False when nothing could be done.
        """
        self.table.validate_notes()

        if find_invalid_cell(self.zone_cache, self.table) is not None:
            return self._rollback_last_guess()

        result = (
            find_singles(self.zone_cache, self.table)
            or find_naked(self.zone_cache, self.table)
            or find_box_line_reductions(self.zone_cache, self.table)
        )
        if result is None:
            return False
        self._commit(result)
        return True

    def _commit(self, result: SolverResult) -> None:
        backup: list[tuple[Cell, list[int]]] = []
        for cell, values in result.effects:
            note = self.table.note(cell)
            remaining = [value for value in values if value in note]
            if not remaining:
                continue
            backup.append((cell, note.candidates()))
            note.discard_all(remaining)
            self.zone_cache.clear_checked([cell])

        if not backup:
            return
        self._solve_counts[strategy_of(result.detail)] += 1
        self.history.append(HistoryEntry(SolveStep(result), backup))

    def _rollback_last_guess(self) -> bool:
        if not any(isinstance(entry.step, GuessStep) for entry in self.history):
            return False

        self.guess_rollback_count += 1
        while self.history:
            entry = self.history.pop()
            for cell, candidates in entry.backup:
                self.table.note(cell).restrict_to(candidates)
            self.zone_cache.clear_checked(cell for cell, _ in entry.backup)

            step = entry.step
            if isinstance(step, BacktraceStep):
                self.guess_backtrace_rollback_count += 1
            if isinstance(step, GuessStep):
                note = self.table.note(step.cell)
                saved = note.candidates()
                note.discard(step.value)
                self.history.append(
                    HistoryEntry(
                        BacktraceStep(step.cell, step.value), [(step.cell, saved)]
                    )
                )
                break
        return True

    def unsolved_cell_count(self) -> int:
        """Number of cells not yet settled on a single digit."""
        return sum(1 for _, note in self.table.items() if not note.is_solved())

    def reseed(self, seed: int) -> None:
        """Restart the random choices from ``seed``."""
        self.seed = seed
        self.rng = random.Random(seed)

    def solve_count(self, strategy: Strategy) -> int:
        """How many changes ``strategy`` has made."""
        return self._solve_counts[strategy]

    def validate(self) -> Cell | None:
        """A cell that breaks a rule, or None when the table is consistent."""
        return find_invalid_cell(self.zone_cache, self.table)

    def guess_random(self) -> bool:
        """Settle a random open cell, among those with fewest candidates, on a random digit.

        Returns False when every cell is already settled.
        """
        fewest: int | None = None
        choices: list[Cell] = []
        for cell, note in self.table.items():
            count = note.count()
            if count <= 1 or (fewest is not None and count > fewest):
                continue
            if fewest is None or count < fewest:
                choices = []
                fewest = count
            choices.append(cell)

        if not choices:
            return False

        cell = self.rng.choice(choices)
        value = self.rng.choice(sorted(self.table.note(cell).candidates()))
        self.guess(cell, value)
        return True

    def guess(self, cell: Cell, value: int) -> None:
        """Settle ``cell`` on ``value`` and record the guess.

        Raises ValueError when ``value`` is not a candidate of the cell; does
        nothing when the cell is already settled.
        """
        note = self.table.note(cell)
        if value not in note:
            raise ValueError(f"guess of impossible value {value} at {cell.coordinate()}")
        if note.is_solved():
            return
        saved = note.candidates()
        note.fix(value)
        self.zone_cache.clear_checked([cell])
        self.history.append(HistoryEntry(GuessStep(cell, value), [(cell, saved)]))

    def to_puncher(self):
        """A puncher that turns this solver's completed grid into a puzzle."""
        from .punch import Puncher

        return Puncher(self.table, self.rng, self.zone_cache)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Solver):
            return NotImplemented
        return self.table == other.table

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Solver(seed={self.seed}, unsolved={self.unsolved_cell_count()})"