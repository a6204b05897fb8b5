"""
WordleBot: the guess-selection state machine shared by every cost function.

Per round the bot moves through
    AWAITING_FIRST_GUESS -> SCORING_LOOP -> SOLVED
and reset() returns it to AWAITING_FIRST_GUESS without touching the
signature table.

Scoring a guess g:
  - partition the remaining candidates by their signature against g
    (class sizes c_0 .. c_{3^N - 1}),
  - drop the all-correct class (that branch is already a win),
  - sum cost(c_i) over the other classes.
Lower is better. Subclasses only provide `cost`, applied elementwise to an
array of class sizes; it must be increasing and strictly convex with cost(0) = 0.
"""

from __future__ import annotations
import enum
import logging
from typing import Dict, List, Type

import numpy as np

from wordlebot.engine.dictionary import WordleDictionary
from wordlebot.engine.errors import (
    ContradictoryFeedbackError,
    EmptyUniverseError,
    FeedbackFormatError,
)

log = logging.getLogger(__name__)

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["WordleBot"]] = {}


def register(cls: Type["WordleBot"]) -> Type["WordleBot"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


class SolverState(enum.Enum):
    AWAITING_FIRST_GUESS = "awaiting_first_guess"
    SCORING_LOOP = "scoring_loop"
    SOLVED = "solved"


class WordleBot:
    id = "base"
    name = "Base"
    version = "0.0.0"

    # Upper bound on guesses x max(signature classes, remaining) cells per numpy pass.
    SCORE_CELLS_PER_CHUNK = 4_000_000

    def __init__(self, dictionary: WordleDictionary):
        self.dictionary = dictionary
        self._n_classes = dictionary.config.n_signatures
        self._remaining = np.arange(dictionary.n_solutions, dtype=np.intp)

        # Scoring against the full solution set is the same every round,
        # so the opening guess is computed once here and cached.
        self.is_first_guess = False
        self.first_guess = self.select_guess()
        self.is_first_guess = True
        log.debug("%s opening guess: %s", self.id, dictionary.word_string(self.first_guess))

    def cost(self, sizes: np.ndarray) -> np.ndarray:
        raise NotImplementedError("Override in subclass")

    # ---- state ----
    @property
    def remaining(self) -> List[int]:
        """Solution indices still consistent with all feedback, ascending."""
        return self._remaining.tolist()

    @property
    def n_remaining(self) -> int:
        return int(self._remaining.size)

    @property
    def state(self) -> SolverState:
        if self._remaining.size == 1:
            return SolverState.SOLVED
        if self.is_first_guess:
            return SolverState.AWAITING_FIRST_GUESS
        return SolverState.SCORING_LOOP

    def current_solution(self) -> int | None:
        if self._remaining.size == 1:
            return int(self._remaining[0])
        return None

    def reset(self) -> None:
        self.is_first_guess = True
        self._remaining = np.arange(self.dictionary.n_solutions, dtype=np.intp)

    # ---- guessing ----
    def select_guess(self) -> int:
        """Word index of the next guess (minimum score, lowest index on ties)."""
        if self.dictionary.n_words == 0:
            raise EmptyUniverseError("no guessable words")

        solution = self.current_solution()
        if solution is not None:
            return self.dictionary.solution_to_word(solution)
        if self.is_first_guess:
            return self.first_guess
        return int(np.argmin(self.score_all()))

    def apply_feedback(self, guess: int, signature: int) -> None:
        """
        Keep only the candidates that would have produced `signature` for `guess`.

        Raises ContradictoryFeedbackError (state unchanged) when none would.
        """
        if not 0 <= guess < self.dictionary.n_words:
            raise IndexError(f"guess index {guess} out of range")
        if not 0 <= signature < self._n_classes:
            raise FeedbackFormatError(
                f"signature {signature} out of range for word length {self.dictionary.word_length}")

        row = self.dictionary.row(guess)
        kept = self._remaining[row[self._remaining] == signature]
        if kept.size == 0:
            raise ContradictoryFeedbackError(guess, signature, int(self._remaining.size))

        self.is_first_guess = False
        self._remaining = kept

    # ---- scoring ----
    def score(self, guess: int) -> float:
        return float(self._score_rows(np.array([guess], dtype=np.intp))[0])

    def score_all(self) -> np.ndarray:
        """Scores of every word in the universe, indexed by word index."""
        n_words = self.dictionary.n_words
        step = self.rows_per_chunk()
        parts = [self._score_rows(np.arange(start, min(start + step, n_words), dtype=np.intp))
                 for start in range(0, n_words, step)]
        return np.concatenate(parts) if parts else np.empty(0, dtype=np.float64)

    def rows_per_chunk(self) -> int:
        """Guesses scored per pass; bounds both the signature slice and the counts."""
        width = max(self._n_classes, int(self._remaining.size))
        return max(1, self.SCORE_CELLS_PER_CHUNK // width)

    def class_sizes(self, guesses: np.ndarray) -> np.ndarray:
        """(len(guesses), 3**N) counts of remaining candidates per signature."""
        k = len(guesses)
        sigs = self.dictionary.table[np.ix_(guesses, self._remaining)].astype(np.int64)
        sigs += (np.arange(k, dtype=np.int64) * self._n_classes)[:, None]
        counts = np.bincount(sigs.ravel(), minlength=k * self._n_classes)
        return counts.reshape(k, self._n_classes)

    def _score_rows(self, guesses: np.ndarray) -> np.ndarray:
        # last column is the all-correct class
        sizes = self.class_sizes(guesses)[:, :-1].astype(np.float64)
        # sorted so equal partitions at different signatures sum identically
        return np.sort(self.cost(sizes), axis=1).sum(axis=1)
