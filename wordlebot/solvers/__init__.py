from __future__ import annotations
from typing import List
from wordlebot.engine.dictionary import WordleDictionary
from .base import WordleBot, SolverState, REGISTRY, register

from . import entropy  # noqa: F401
from . import expected_left  # noqa: F401

__all__ = ["WordleBot", "SolverState", "REGISTRY", "register", "create_solver", "get_solver_ids"]


def create_solver(solver_id: str, dictionary: WordleDictionary) -> WordleBot:
    """
    Factory: instantiate a registered solver by id over a built dictionary.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(dictionary)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
