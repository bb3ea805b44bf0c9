"""Command line front end for the Sudoku solver."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from .grid import Grid, parse_puzzle
from .solver import has_unique_solution, solve

app = typer.Typer(help="Solve 9x9 Sudoku puzzles and check whether their solution is unique.")

PUZZLE_HELP = "81 cells, digits with 0 . _ or - for empty; '-' or nothing reads stdin."


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log search details."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def read_puzzle(puzzle: Optional[str], file: Optional[Path]) -> Grid:
    """Load the puzzle from the argument, a file or stdin."""
    try:
        if file is not None:
            text = file.read_text(encoding="utf-8")
        elif puzzle is None or puzzle == "-":
            text = sys.stdin.read()
        else:
            text = puzzle
        return parse_puzzle(text)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)


@app.command("solve")
def solve_command(
    puzzle: Optional[str] = typer.Argument(None, help=PUZZLE_HELP),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, help="Read the puzzle from a file."),
) -> None:
    grid = read_puzzle(puzzle, file)
    result, error = solve(grid)
    if error is not None:
        typer.echo(f"Error: {error}", err=True)
        typer.echo(result)
        raise typer.Exit(code=1)
    typer.echo(result)


@app.command("unique")
def unique_command(
    puzzle: Optional[str] = typer.Argument(None, help=PUZZLE_HELP),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, help="Read the puzzle from a file."),
) -> None:
    grid = read_puzzle(puzzle, file)
    if has_unique_solution(grid):
        typer.echo("unique")
        return
    typer.echo("not unique")
    raise typer.Exit(code=1)


@app.command("show")
def show_command(
    puzzle: Optional[str] = typer.Argument(None, help=PUZZLE_HELP),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, help="Read the puzzle from a file."),
) -> None:
    typer.echo(read_puzzle(puzzle, file))


if __name__ == "__main__":
    app()
