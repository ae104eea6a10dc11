"""Vanilla terminal frontend — no third-party dependencies.

Prints the solver result in the plain text format::

    Minimum number of moves = 4
    3
     0  1  3
     4  2  5
     7  8  6

    3
    ...
"""

from __future__ import annotations

from backend.engine.gamesolver import Solver


def format_solution(solver: Solver) -> str:
    """Return the full text report for a finished solver."""
    solution = solver.solution()
    if solution is None:
        return "No solution possible\n"

    lines = [f"Minimum number of moves = {solver.moves()}"]
    for board in solution:
        lines.append(str(board))
    return "\n".join(lines)


def run(solver: Solver) -> None:
    print(format_solution(solver), end="")
