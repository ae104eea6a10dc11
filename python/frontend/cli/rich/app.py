"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import Solver
from backend.models.board import Board, Direction

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"[dim]{0:>{width}}[/dim]")
            elif board.is_tile_correct(r * board.size + c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _step_title(index: int, direction: Direction | None) -> str:
    if direction is None:
        return "[bold cyan]Start[/bold cyan]"
    return f"[bold cyan]Move {index}[/bold cyan] [dim]({direction.value})[/dim]"


# -- report -------------------------------------------------------------------


def render_solution(solver: Solver) -> Group:
    """Return a renderable summarising the solver result."""
    solution = solver.solution()
    if solution is None:
        return Group(Text("No solution possible", style="bold red"))

    size = solver.initial.size
    header = Text()
    header.append("Minimum number of moves = ", style="bold")
    header.append(str(solver.moves()), style="bold green")

    directions: list[Direction | None] = [None, *(solver.directions() or [])]
    panels = [
        Panel(
            Align.center(_render_board(board)),
            title=_step_title(i, direction),
            subtitle=f"{size}×{size}",
            border_style="cyan",
            padding=(0, 2),
            expand=False,
        )
        for i, (board, direction) in enumerate(zip(solution, directions))
    ]

    stats = solver.stats
    footer = Text(
        f"expanded {stats.expanded}  generated {stats.generated}  "
        f"peak frontier {stats.max_frontier}",
        style="dim",
    )
    return Group(header, *panels, footer)


def run(solver: Solver, out: Console | None = None) -> None:
    (out or console).print(render_solution(solver))
