"""Row, column and block constraints over a flat list of 81 cells."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .errors import ConflictingFixedValuesError, InvalidDigitError
from .grid import EMPTY, Grid, block_at, col_at, row_at


def valid_at(cells: Sequence[int], n: int, at: int) -> bool:
    """Return True if digit ``n`` can be placed at index ``at``.

    The cell at ``at`` must already be cleared by the caller.
    """
    row = row_at(at)
    col = col_at(at)
    block = block_at(at)
    for i, value in enumerate(cells):
        if value == n and (row == row_at(i) or col == col_at(i) or block == block_at(i)):
            return False
    return True


def invalid_digit(cells: Sequence[int]) -> Optional[int]:
    for value in cells:
        if not 0 <= value <= 9:
            return value
    return None


def valid_game(cells: Sequence[int]) -> bool:
    """Return True if the non-zero digits so far do not conflict."""
    work: List[int] = list(cells)
    for i, n in enumerate(work):
        if n == EMPTY:
            continue
        work[i] = EMPTY
        if not valid_at(work, n, i):
            return False
        work[i] = n
    return True


def check_game(grid: Grid) -> None:
    """Raise the first reason ``grid`` cannot be handed to the search."""
    value = invalid_digit(grid.cells)
    if value is not None:
        raise InvalidDigitError(value, grid)
    if not valid_game(grid.cells):
        raise ConflictingFixedValuesError(grid=grid)


__all__ = ["check_game", "invalid_digit", "valid_at", "valid_game"]
