import pytest

from sudokuforge.history import BacktraceStep, GuessStep, Strategy
from sudokuforge.layouts import default_9, jigsaw_9
from sudokuforge.solver import Solver
from sudokuforge.zone import ZoneKind


def _assert_complete(solver):
    table = solver.table
    for zone, cells in solver.zone_cache.zones.items():
        if zone.kind is ZoneKind.UNIQUE:
            values = {table.note(cell).solved_value() for cell in cells}
            assert values == set(range(table.size))


def test_fill_default_9_completes_valid_grid():
    solver = Solver(default_9(), seed=0)
    assert solver.fill_puzzle() == 0
    assert solver.unsolved_cell_count() == 0
    assert solver.validate() is None
    _assert_complete(solver)


def test_fill_jigsaw_completes_valid_grid():
    solver = Solver(jigsaw_9(), seed=0)
    assert solver.fill_puzzle() == 0
    _assert_complete(solver)


def test_same_seed_gives_same_puzzle():
    first = Solver(default_9())
    first.fill_puzzle()

    second = Solver(default_9())
    second.reseed(first.seed)
    second.fill_puzzle()
    assert first.table == second.table

    third = Solver(default_9())
    third.reseed(first.seed + 1)
    third.fill_puzzle()
    assert first.table != third.table


def test_fresh_table_counts_every_cell_unsolved():
    solver = Solver(default_9(), seed=1)
    assert solver.unsolved_cell_count() == len(solver.table)


def test_zero_timeout_returns_unsolved_count():
    solver = Solver(default_9(), seed=1)
    assert solver.fill_puzzle(timeout=0) == len(solver.table)
    assert solver.history == []


def test_solve_on_fresh_table_finds_nothing():
    solver = Solver(default_9(), seed=1)
    assert solver.solve() is False


def test_fill_once_on_fresh_table_guesses():
    solver = Solver(default_9(), seed=1)
    assert solver.fill_once() is True
    assert solver.guess_count == 1
    assert isinstance(solver.history[-1].step, GuessStep)


def test_solve_counts_after_fill():
    solver = Solver(default_9(), seed=3)
    solver.fill_puzzle()
    assert solver.solve_count(Strategy.VALIDATE) == 0
    assert solver.solve_count(Strategy.SINGLE) > 0


def test_guess_impossible_value_raises():
    solver = Solver(default_9(), seed=1)
    cell = solver.table.cell_at(0, 0)
    solver.table.note(cell).discard(4)
    with pytest.raises(ValueError):
        solver.guess(cell, 4)


def test_guess_records_history_with_backup():
    solver = Solver(default_9(), seed=1)
    cell = solver.table.cell_at(2, 3)
    solver.guess(cell, 5)
    assert solver.table.note(cell).solved_value() == 5
    entry = solver.history[-1]
    assert entry.step == GuessStep(cell, 5)
    assert entry.backup[0][0] is cell
    assert sorted(entry.backup[0][1]) == list(range(9))


def test_guess_on_settled_cell_is_ignored():
    solver = Solver(default_9(), seed=1)
    cell = solver.table.cell_at(0, 0)
    solver.table.note(cell).fix(2)
    solver.guess(cell, 2)
    assert solver.history == []


def test_contradiction_rolls_back_last_guess():
    solver = Solver(default_9(), seed=1)
    first = solver.table.cell_at(0, 0)
    second = solver.table.cell_at(1, 0)
    solver.guess(first, 0)
    solver.guess(second, 0)
    assert solver.validate() is not None

    assert solver.solve() is True
    assert solver.guess_rollback_count == 1
    assert solver.history[-1].step == BacktraceStep(second, 0)
    note = solver.table.note(second)
    assert 0 not in note
    assert note.count() == 8
    assert solver.table.note(first).solved_value() == 0


def test_contradiction_without_guess_cannot_roll_back():
    solver = Solver(default_9(), seed=1)
    solver.table.note_at(0, 0).fix(0)
    solver.table.note_at(1, 0).fix(0)
    assert solver.solve() is False
    assert solver.guess_rollback_count == 0


def test_reseed_replaces_seed():
    solver = Solver(default_9(), seed=1)
    solver.reseed(42)
    assert solver.seed == 42


def test_to_puncher_remembers_answers():
    solver = Solver(default_9(), seed=0)
    solver.fill_puzzle()
    puncher = solver.to_puncher()
    assert puncher is not None
    for _, note in solver.table.items():
        assert note.fixed_value() == note.solved_value()
        assert note.fixed_value() is not None