from backend.engine.gamesolver.frontier import Frontier
from backend.engine.gamesolver.solver import (
    SearchNode,
    SearchStats,
    Solver,
    SolverOptions,
    SolverState,
    Strategy,
)

__all__ = [
    "Frontier",
    "SearchNode",
    "SearchStats",
    "Solver",
    "SolverOptions",
    "SolverState",
    "Strategy",
]
