"""wordlebot: an information-based solver for fixed-length word-guessing games."""

# engine first: config and solvers import from it
from .engine import (
    WordleDictionary,
    compute_signature,
    parse_feedback,
    format_signature,
    WordleBotError,
    ConfigurationError,
    FeedbackFormatError,
    ExhaustionError,
    EmptyUniverseError,
    ContradictoryFeedbackError,
)
from .config import SolverConfig
from .solvers import WordleBot, SolverState, create_solver, get_solver_ids

__version__ = "0.1.0"

__all__ = [
    "WordleDictionary", "compute_signature", "parse_feedback", "format_signature",
    "WordleBotError", "ConfigurationError", "FeedbackFormatError", "ExhaustionError",
    "EmptyUniverseError", "ContradictoryFeedbackError",
    "SolverConfig", "WordleBot", "SolverState", "create_solver", "get_solver_ids",
]
