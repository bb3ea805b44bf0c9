"""Backtracking search over a flat 9x9 Sudoku grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from .constraints import check_game, valid_at
from .errors import SudokuError, UnsolvableError
from .grid import EMPTY, Grid, parse_puzzle

log = logging.getLogger(__name__)

ASCENDING = (1, 2, 3, 4, 5, 6, 7, 8, 9)
DESCENDING = tuple(reversed(ASCENDING))

Puzzle = Union[Grid, str, Iterable[int]]


@dataclass(frozen=True)
class SolveResult:
    """Outcome of :func:`solve`.

    On failure ``grid`` is the game exactly as it was handed in.
    """

    grid: Grid
    error: Optional[SudokuError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Grid:
        if self.error is not None:
            raise self.error
        return self.grid

    def __iter__(self) -> Iterator[object]:
        return iter((self.grid, self.error))


def find_empty(cells: Sequence[int]) -> Optional[int]:
    for i, value in enumerate(cells):
        if value == EMPTY:
            return i
    return None


def search(cells: List[int], order: Sequence[int] = ASCENDING) -> bool:
    """Fill ``cells`` in place, trying digits in ``order``.

    Returns True once no empty cell is left. On failure every cell this
    call assigned is back to 0.
    """
    at = find_empty(cells)
    if at is None:
        return True
    for candidate in order:
        if valid_at(cells, candidate, at):
            cells[at] = candidate
            if search(cells, order):
                return True
            cells[at] = EMPTY
    return False


def solve(grid: Grid) -> SolveResult:
    """Find the first solution of ``grid`` trying digits 1 to 9.

    Non-zero digits are fixed. If multiple solutions exist, the first one
    found is returned. On error the result carries the unchanged input::

        solved, error = solve(grid)
    """
    try:
        check_game(grid)
    except SudokuError as exc:
        log.debug("Rejected game: %s", exc)
        return SolveResult(grid, exc)

    work = grid.cells_list()
    log.debug("Searching %d empty cells", grid.empty_count())
    if not search(work, ASCENDING):
        log.debug("Search exhausted without a solution")
        return SolveResult(grid, UnsolvableError(grid=grid))
    return SolveResult(Grid(work))


def has_unique_solution(grid: Grid) -> bool:
    """Return True if the upward and downward solutions of ``grid`` agree.

    The game is solved once trying digits 1 to 9 and once trying 9 to 1.
    A game with one solution always gives the same grid both ways; a game
    with several can in principle give the same grid too, so this is a
    check rather than a count. Invalid digits, conflicting fixed values
    and unsolvable games all give False.
    """
    try:
        check_game(grid)
    except SudokuError as exc:
        log.debug("Rejected game: %s", exc)
        return False

    up = grid.cells_list()
    if not search(up, ASCENDING):
        return False
    down = grid.cells_list()
    if not search(down, DESCENDING):
        return False
    return up == down


def solve_puzzle(puzzle: Puzzle) -> Grid:
    """Solve a grid, puzzle string or 81 integers, raising on failure."""
    if isinstance(puzzle, Grid):
        grid = puzzle
    elif isinstance(puzzle, str):
        grid = parse_puzzle(puzzle)
    else:
        grid = Grid(puzzle)
    return solve(grid).unwrap()


__all__ = [
    "ASCENDING",
    "DESCENDING",
    "SolveResult",
    "find_empty",
    "has_unique_solution",
    "search",
    "solve",
    "solve_puzzle",
]
