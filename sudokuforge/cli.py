"""Command line: generate a sudoku grid, punch it into a puzzle and re-solve it."""

from __future__ import annotations

import argparse
import time

from .history import Strategy
from .layouts import default_9, default_16, default_32
from .solver import Solver

_LAYOUTS = {9: default_9, 16: default_16, 32: default_32}
_SEPARATOR = "=" * 78


def _strategy_name(strategy: Strategy) -> str:
    return strategy.name.title().replace("_", "")


def _seed(text: str) -> int:
    value = int(text)
    if not 0 <= value < 1 << 64:
        raise argparse.ArgumentTypeError(f"seed {value} is not a 64-bit unsigned integer")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudokuforge",
        description="Generate a random sudoku, punch it into a puzzle and solve it again.",
    )
    parser.add_argument("seed", nargs="?", type=_seed, help="random seed of the puzzle")
    parser.add_argument(
        "--size", type=int, choices=sorted(_LAYOUTS), default=16, help="grid size"
    )
    return parser


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


def main(argv: list[str] | None = None) -> int:
    """Run the generator; returns the exit status."""
    args = _parser().parse_args(argv)

    solver = Solver(_LAYOUTS[args.size](), seed=args.seed)
    start = time.monotonic()
    solver.fill_puzzle()
    solve_ms = _elapsed_ms(start)
    print(solver.table.render())

    print(f"puzzle seed: {solver.seed}")
    for strategy in Strategy:
        print(f"{_strategy_name(strategy)}: {solver.solve_count(strategy)}")
    print(
        f"guess: {solver.guess_count}, "
        f"guess_rollback_cnt: {solver.guess_rollback_count}, "
        f"guess_backtrace_rollback_cnt: {solver.guess_backtrace_rollback_count}"
    )
    print(f"solver time: {solve_ms}ms")

    start = time.monotonic()
    puncher = solver.to_puncher()
    puncher.punch_all()
    punch_ms = _elapsed_ms(start)

    print(puncher.table.render_punched())
    print(_SEPARATOR)
    print(puncher.table.render())
    print(_SEPARATOR)
    print(f"punch time: {punch_ms}ms")

    again = puncher.to_solver()
    print(again.table.render())
    again.fill_puzzle()
    if again.guess_count != 0:
        raise RuntimeError("the punched puzzle needed guessing to solve")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())