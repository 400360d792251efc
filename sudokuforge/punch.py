"""Turning a completed grid into a puzzle by punching out cells."""

from __future__ import annotations

import random

from .cell import Cell
from .num_check import NumCheck
from .solver import Solver
from .table import Table
from .zone_cache import ZoneCache


class Puncher:
    """Removes givens from a completed table while it stays solvable by logic.

    On creation every cell remembers its settled value as its answer. A
    cell is only punched while one of its zones has every other cell still
    showing its answer. Punching it resets the notes of the cell and of all
    its peers, and clears their remembered answers.
    """

    def __init__(self, table: Table, rng: random.Random, zone_cache: ZoneCache) -> None:
        self.table = table
        self.rng = rng
        self.zone_cache = zone_cache
        self.zone_cache.clear_all()
        for _, note in self.table.items():
            note.remember_fixed()

    def naked_single_candidates(self) -> list[Cell]:
        """Cells still showing their answer that sit in a zone whose other cells all do too."""
        found: list[Cell] = []
        for cell, note in self.table.items():
            if note.fixed_value() is None:
                continue
            if any(self._zone_fully_shown(cell, zone) for zone in cell.zones):
                found.append(cell)
        return found

    def _zone_fully_shown(self, cell: Cell, zone) -> bool:
        return all(
            self.table.note(other).fixed_value() is not None
            for other in self.zone_cache.zones[zone]
            if other is not cell
        )

    def punch_all(self) -> None:
        """Punch cells one at a time until no cell can be punched."""
        while True:
            candidates = self.naked_single_candidates()
            if not candidates:
                return
            self._punch(candidates)

    def _peers(self, cell: Cell) -> list[Cell]:
        return [
            other
            for zone in cell.zones
            for other in self.zone_cache.zones[zone]
            if other is not cell
        ]

    def _punch(self, candidates: list[Cell]) -> None:
        pick = self.rng.choice(candidates)
        affected = [pick, *self._peers(pick)]

        changes: list[tuple[Cell, NumCheck]] = []
        for cell in affected:
            note = NumCheck.all_true(self.table.size)
            for other in self._peers(cell):
                value = self.table.note(other).solved_value()
                if value is not None:
                    note.discard(value)
            changes.append((cell, note))

        self.table.note(pick).clear_fixed()
        for cell, note in changes:
            self.table.set_note(cell, note)

    def to_solver(self) -> Solver:
        """A solver for the punched puzzle, sharing this table and zone cache."""
        self.zone_cache.clear_all()
        return Solver(self.table, zone_cache=self.zone_cache)