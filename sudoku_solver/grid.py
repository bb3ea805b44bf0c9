"""Grid model for a 9x9 Sudoku: 81 cells, line by line, 0 for empty."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

SIZE = 9
CELLS = SIZE * SIZE
EMPTY = 0

DIGITS = "0123456789"
EMPTY_MARKS = {".", "_", "-"}


def row_at(i: int) -> int:
    return i // SIZE


def col_at(i: int) -> int:
    return i % SIZE


def block_at(i: int) -> int:
    return (row_at(i) // 3) * 3 + col_at(i) // 3


@dataclass(frozen=True, init=False)
class Grid:
    """Immutable 81-cell game.

    Values of 1-9 are fixed digits, 0 marks a cell still to be solved for.
    Values are not range-checked here so that the solver can report them.
    """

    cells: Tuple[int, ...]

    def __init__(self, cells: Iterable[int]) -> None:
        values = []
        for value in cells:
            number = int(value)
            if number != value:
                raise ValueError(f"Sudoku cell must be a whole number, got {value!r}")
            values.append(number)
        if len(values) != CELLS:
            raise ValueError(f"Sudoku grid must have {CELLS} cells, got {len(values)}")
        object.__setattr__(self, "cells", tuple(values))

    @classmethod
    def empty(cls) -> "Grid":
        return cls([EMPTY] * CELLS)

    @classmethod
    def from_string(cls, puzzle: str) -> "Grid":
        return parse_puzzle(puzzle)

    def __len__(self) -> int:
        return CELLS

    def __iter__(self) -> Iterator[int]:
        return iter(self.cells)

    def __getitem__(self, index: int) -> int:
        return self.cells[index]

    def __str__(self) -> str:
        return self.to_display_string()

    def cells_list(self) -> List[int]:
        """Return a mutable copy of the cells for a search to own."""
        return list(self.cells)

    def empty_count(self) -> int:
        return sum(1 for value in self.cells if value == EMPTY)

    def is_complete(self) -> bool:
        return self.empty_count() == 0

    def serialize(self) -> str:
        """Return the grid as a single string for easy comparison."""
        return "".join(str(value) for value in self.cells)

    def to_display_string(self) -> str:
        """Render the grid as three blocks of three rows.

        Digits are grouped in threes separated by a space, blocks are
        separated by a blank line and there is no trailing newline::

            123 456 789
            456 789 123
            789 123 456

            234 567 891
            ...
        """
        rows = []
        for start in range(0, CELLS, SIZE):
            row = self.cells[start : start + SIZE]
            groups = ["".join(str(value) for value in row[c : c + 3]) for c in range(0, SIZE, 3)]
            rows.append(" ".join(groups))
        blocks = ["\n".join(rows[r : r + 3]) for r in range(0, SIZE, 3)]
        return "\n\n".join(blocks)


def parse_puzzle(puzzle: Iterable[str]) -> Grid:
    """Convert a flat iterable of characters into a grid.

    Digits are taken as is, ``.``, ``_`` and ``-`` mark empty cells and any
    other character (whitespace, ``|``, ``+``) is ignored.
    """
    digits = []
    for ch in puzzle:
        if ch in DIGITS:
            digits.append(int(ch))
        elif ch in EMPTY_MARKS:
            digits.append(EMPTY)
    if len(digits) != CELLS:
        raise ValueError(f"Sudoku puzzle must yield {CELLS} cells, got {len(digits)}")
    return Grid(digits)


__all__ = [
    "CELLS",
    "EMPTY",
    "Grid",
    "SIZE",
    "block_at",
    "col_at",
    "parse_puzzle",
    "row_at",
]
