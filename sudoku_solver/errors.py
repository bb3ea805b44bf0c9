"""Errors reported when a game cannot be solved."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .grid import Grid


class SudokuError(ValueError):
    """Base error; ``grid`` is the game as it was handed in."""

    message = "invalid game"

    def __init__(self, message: Optional[str] = None, grid: Optional["Grid"] = None) -> None:
        super().__init__(message or self.message)
        self.grid = grid


class InvalidDigitError(SudokuError):
    def __init__(self, value: int, grid: Optional["Grid"] = None) -> None:
        super().__init__(f"invalid digit {value} in game", grid)
        self.value = value


class ConflictingFixedValuesError(SudokuError):
    message = "illegal input, conflicting fixed values"


class UnsolvableError(SudokuError):
    message = "unsolvable game"


__all__ = [
    "ConflictingFixedValuesError",
    "InvalidDigitError",
    "SudokuError",
    "UnsolvableError",
]
