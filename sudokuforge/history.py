"""Solving strategies, their findings and the history of changes to a table."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union

from .cell import Cell


class Strategy(IntEnum):
    """The kinds of checks the solver runs over each zone."""

    VALIDATE = 0
    SINGLE = 1
    NAKED = 2
    BOX_LINE_REDUCTION = 3


@dataclass(frozen=True)
class SingleFound:
    """A settled cell whose value can be removed from its peers."""

    value: int


@dataclass(frozen=True)
class NakedFound:
    """A group of cells that together hold exactly as many digits as cells."""

    values: tuple[int, ...]
    cells: tuple[Cell, ...]


@dataclass(frozen=True)
class BoxLineReductionFound:
    """A digit confined to the overlap of two zones."""

    value: int


Detail = Union[SingleFound, NakedFound, BoxLineReductionFound]

Effects = list[tuple[Cell, list[int]]]


@dataclass
class SolverResult:
    """What a strategy found, and the digits to remove from which cells."""

    detail: Detail
    effects: Effects = field(default_factory=list)


@dataclass
class SolveStep:
    """A change made by a solving strategy."""

    result: SolverResult


@dataclass(frozen=True)
class GuessStep:
    """A cell settled on a guessed value."""

    cell: Cell
    value: int


@dataclass(frozen=True)
class BacktraceStep:
    """A failed guess whose value was removed from the cell."""

    cell: Cell
    excluded: int


Step = Union[SolveStep, GuessStep, BacktraceStep]


@dataclass
class HistoryEntry:
    """One step and the candidates of the cells it changed, as they were before."""

    step: Step
    backup: Effects = field(default_factory=list)


def strategy_of(detail: Detail) -> Strategy:
    """The strategy that produces findings of the kind of ``detail``."""
    if isinstance(detail, SingleFound):
        return Strategy.SINGLE
    if isinstance(detail, NakedFound):
        return Strategy.NAKED
    if isinstance(detail, BoxLineReductionFound):
        return Strategy.BOX_LINE_REDUCTION
    raise TypeError(f"not a solver finding: {detail!r}")