"""Sudoku grid generation, logical solving with backtracking, and puzzle punching."""

__version__ = "0.1.0"