# sudokuforge

sudokuforge fills sudoku grids from scratch and then turns them into puzzles.
Ready-made layouts cover the classic 9×9 grid, a 16×16 grid, a 32×32 grid and a 9×9
jigsaw grid. You can also build your own square layout from a map of region numbers.

Cell notes work for puzzle sizes from 2 to 64. Digits are drawn with the characters
`1`–`9` and then `A`–`Z`, so a grid can only be drawn when its size is 35 or less.

## How it works

- `sudokuforge.solver.Solver` works in steps. It first checks the table for a
  contradiction. It then applies one deduction:
  - a settled value is removed from its peers (`find_singles`)
  - naked groups of 2 up to, but not including, half the grid size are found in a
    zone (`find_naked`)
  - box/line reduction is applied (`find_box_line_reductions`)

  When no deduction applies, the solver guesses. It takes a random cell among those
  with the fewest candidates and gives it a random candidate. On a contradiction it
  rolls back to the latest guess and removes the guessed value. Every change is kept
  in `Solver.history`. The same seed on the same layout always gives the same grid.
- `sudokuforge.punch.Puncher` takes a filled grid and removes values one at a time. A
  cell is punched only while one of its zones has every other cell still showing its
  answer. This keeps the puzzle solvable without guessing.

## Installation

```
pip install .
```

## Command line

```
sudokuforge                  # random 16x16 puzzle
sudokuforge 12345            # reproducible puzzle from a seed
sudokuforge --size 9 12345   # 9x9 grid (sizes: 9, 16, 32)
```

The command prints the following, in order:

- the filled grid
- the seed
- how many changes each strategy made (`Validate`, `Single`, `Naked`,
  `BoxLineReduction`)
- the guess and rollback counts
- the solving time
- the punched puzzle, which shows the answers still given
- the grid of notes after punching
- the punching time

Last, it solves the punched puzzle again. It raises an error if that needed a guess.

## Library use

```python
from sudokuforge.layouts import default_9, jigsaw_9
from sudokuforge.solver import Solver

table = default_9()
solver = Solver(table, seed=0)
remaining = solver.fill_puzzle()      # number of unsettled cells, 0 on success
print(table)                          # same as table.render()

puncher = solver.to_puncher()
puncher.punch_all()
print(table.render_punched())

again = puncher.to_solver()
again.fill_puzzle(timeout=5.0)        # seconds; None means no limit
assert again.guess_count == 0
```

Other useful members:

- `Solver.solve()` applies one deduction.
- `Solver.fill_once()` applies one deduction, or guesses when none applies.
- `Solver.guess(cell, value)` settles a cell on a value.
- `Solver.validate()` returns a cell that breaks a rule, or `None`.
- `Solver.unsolved_cell_count()` counts the cells not yet settled.
- `Solver.solve_count(Strategy.NAKED)` tells how many changes a strategy made.
- `Solver.reseed(seed)` restarts the random choices from a seed.
- `Table.cell_at(x, y)` and `Table.note_at(x, y)` give the cell and its candidates
  (`NumCheck`).
- `Table.note_format()` draws every cell's candidates.
- Two tables compare equal when all their notes match.

### Custom layouts

`table_from_zone_map(size, zone_map)` takes a flat, row-major list of `size * size`
region numbers in `1..size`. Column and row zones are added for you. For example,
`jigsaw_9()` is built this way.

A `Cell` can also belong to a sum zone made with `Zone.summed(number, total)`. Cell
values count from 1 toward the total. You then build the table yourself with
`Table(size, cells)` or `Table.from_rows(size, rows)`. Every unique zone must hold
exactly `size` cells.

## What it does not do

- Puzzles cannot be read from text or files.
- There is no interactive play.
- The command only generates puzzles from a seed, on the built-in square layouts.
- No ready-made layout uses sum zones.

## Tests

```
pip install .[test]
pytest
```