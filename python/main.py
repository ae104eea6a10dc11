#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py solve puzzle.txt              # plain text report
    python main.py solve puzzle.txt -f rich      # Rich panels
    python main.py solve puzzle.txt -s twin -v   # twin-race strategy, debug log
    python main.py generate 4 --seed 7 -o p.txt  # write a random board
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamesolver import Solver, SolverOptions, Strategy  # noqa: E402
from backend.models import SliderError, load_board, save_board  # noqa: E402

err_console = Console(stderr=True)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(message: str) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {message}")
    raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Sliding Puzzle Solver.")


@app.command()
def solve(
    path: Path = typer.Argument(..., help="Board file: N, then N×N tiles."),
    strategy: Strategy = typer.Option(
        Strategy.PARITY, "-s", "--strategy",
        help="How unsolvable boards are detected.",
    ),
    linear_conflict: bool = typer.Option(
        True, "--linear-conflict/--no-linear-conflict",
        help="Add the linear-conflict correction to the Manhattan heuristic.",
    ),
    parent_only: bool = typer.Option(
        False, "--parent-only",
        help="Only skip the parent board instead of every expanded board.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging."),
) -> None:
    """Solve a board file and print the shortest solution."""
    _configure_logging(verbose)
    try:
        board = load_board(path)
    except (SliderError, OSError) as exc:
        _fail(str(exc))

    options = SolverOptions(
        strategy=strategy,
        linear_conflict=linear_conflict,
        dedupe=not parent_only,
    )
    solver = Solver(board, options)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(solver)


@app.command()
def generate(
    size: int = typer.Argument(..., min=2, help="Grid side length."),
    steps: Optional[int] = typer.Option(
        None, "--steps", min=1,
        help="Random moves away from the goal (default: 100·N²).",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
    shuffle: bool = typer.Option(
        False, "--shuffle",
        help="Random permutation instead of a walk; may be unsolvable.",
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write to this file instead of stdout.",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging."),
) -> None:
    """Write a random board file."""
    _configure_logging(verbose)
    if shuffle:
        board = GameGenerator.shuffle(size, seed=seed)
    else:
        board = GameGenerator.generate(size, steps=steps, seed=seed)

    if output is None:
        typer.echo(str(board), nl=False)
        return
    try:
        save_board(board, output)
    except OSError as exc:
        _fail(str(exc))


if __name__ == "__main__":
    app()
