"""Backtracking solver for 9x9 Sudoku."""

from .errors import ConflictingFixedValuesError, InvalidDigitError, SudokuError, UnsolvableError
from .grid import Grid, block_at, col_at, parse_puzzle, row_at
from .solver import ASCENDING, DESCENDING, SolveResult, has_unique_solution, solve, solve_puzzle

__all__ = [
    "ASCENDING",
    "ConflictingFixedValuesError",
    "DESCENDING",
    "Grid",
    "InvalidDigitError",
    "SolveResult",
    "SudokuError",
    "UnsolvableError",
    "block_at",
    "col_at",
    "has_unique_solution",
    "parse_puzzle",
    "row_at",
    "solve",
    "solve_puzzle",
]
