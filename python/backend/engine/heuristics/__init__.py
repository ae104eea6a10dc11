from backend.engine.heuristics.cache import HeuristicCache

__all__ = ["HeuristicCache"]
