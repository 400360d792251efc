import dataclasses

import pytest

from sudokuforge.cell import Cell
from sudokuforge.history import (
    BacktraceStep,
    BoxLineReductionFound,
    GuessStep,
    HistoryEntry,
    NakedFound,
    SingleFound,
    SolverResult,
    SolveStep,
    Strategy,
    strategy_of,
)
from sudokuforge.zone import Zone


def _cell(x=0, y=0):
    return Cell(x, y, [Zone.unique(1)], 9)


@pytest.mark.parametrize(
    "detail, strategy",
    [
        (SingleFound(3), Strategy.SINGLE),
        (NakedFound((1, 2), ()), Strategy.NAKED),
        (BoxLineReductionFound(5), Strategy.BOX_LINE_REDUCTION),
    ],
)
def test_strategy_of_each_finding(detail, strategy):
    assert strategy_of(detail) is strategy


def test_strategy_of_rejects_other_objects():
    with pytest.raises(TypeError):
        strategy_of("single")


def test_findings_are_frozen():
    found = SingleFound(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        found.value = 4
    assert found.value == 3
    assert found == SingleFound(3)


def test_naked_found_compares_cells_by_identity():
    a, b = _cell(0), _cell(1)
    assert NakedFound((0, 1), (a, b)) == NakedFound((0, 1), (a, b))
    assert NakedFound((0, 1), (a, b)) != NakedFound((0, 1), (a, _cell(1)))


def test_history_entry_keeps_step_and_backup():
    cell = _cell()
    entry = HistoryEntry(GuessStep(cell, 2), [(cell, [1, 2])])
    match entry.step:
        case GuessStep(cell=c, value=v):
            assert c is cell
            assert v == 2
        case _:
            pytest.fail("unexpected step")
    assert entry.backup == [(cell, [1, 2])]


def test_solve_step_wraps_result():
    cell = _cell()
    result = SolverResult(SingleFound(4), [(cell, [4])])
    entry = HistoryEntry(SolveStep(result))
    assert entry.step.result is result
    assert entry.backup == []
    assert strategy_of(entry.step.result.detail) is Strategy.SINGLE


def test_backtrace_step_records_excluded_value():
    cell = _cell()
    step = BacktraceStep(cell, 7)
    assert step.excluded == 7
    assert step == BacktraceStep(cell, 7)