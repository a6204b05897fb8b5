"""
WordleDictionary: the word universe plus its precomputed signature table.

Words are addressed by dense integer index. The universe is consolidated as
the (de-duplicated) solutions first, followed by every other guessable word
in input order, so solution index s is also word index s.
"""

from __future__ import annotations
import logging
from typing import Dict, Iterable, List

import numpy as np

from ..config import SolverConfig
from .errors import ConfigurationError, EmptyUniverseError
from .table import build_signature_table
from .validation import dedupe, normalize_words

log = logging.getLogger(__name__)


class WordleDictionary:
    def __init__(self, all_words: Iterable[str], solutions: Iterable[str],
                 config: SolverConfig | None = None):
        self.config = (config or SolverConfig()).validate()
        N = self.config.word_length

        guessable = dedupe(normalize_words(all_words, N, label="word list"))
        answers = dedupe(normalize_words(solutions, N, label="solution list"))

        if not guessable and not answers:
            raise EmptyUniverseError("no guessable words")
        if not answers:
            raise ConfigurationError("solution list contains 0 words")

        guessable_set = set(guessable)
        missing = [w for w in answers if w not in guessable_set]
        if missing:
            raise ConfigurationError(
                f"solutions not subset of word list (e.g., {missing[:5]}; {len(missing)} total)")

        answer_set = set(answers)
        self._words: List[str] = answers + [w for w in guessable if w not in answer_set]
        self._n_solutions = len(answers)
        self._index: Dict[str, int] = {w: i for i, w in enumerate(self._words)}

        log.info("dictionary: %d words, %d solutions, N=%d",
                 len(self._words), self._n_solutions, N)
        self._table = build_signature_table(
            self._words, answers,
            dtype=self.config.dtype,
            workers=self.config.workers,
            progress=self.config.progress,
        )

    # ---- sizes ----
    @property
    def word_length(self) -> int:
        return self.config.word_length

    @property
    def n_words(self) -> int:
        return len(self._words)

    @property
    def n_solutions(self) -> int:
        return self._n_solutions

    # ---- lookups ----
    def word_string(self, word: int) -> str:
        return self._words[word]

    def solution_string(self, solution: int) -> str:
        if not self.is_solution(solution):
            raise IndexError(f"solution index {solution} out of range")
        return self._words[solution]

    def solution_to_word(self, solution: int) -> int:
        """Solutions lead the universe, so the mapping is the identity."""
        if not self.is_solution(solution):
            raise IndexError(f"solution index {solution} out of range")
        return solution

    def index_of(self, word: str) -> int:
        """Word index of `word`; KeyError if it is not in the universe."""
        return self._index[word.strip().lower()]

    def is_solution(self, word: int) -> bool:
        return 0 <= word < self._n_solutions

    @property
    def words(self) -> List[str]:
        return list(self._words)

    # ---- signatures ----
    @property
    def table(self) -> np.ndarray:
        """Read-only (n_words, n_solutions) signature table."""
        return self._table

    def row(self, guess: int) -> np.ndarray:
        """Signatures of `guess` against every solution."""
        return self._table[guess]

    def get_feedback(self, solution: int, guess: int) -> int:
        return int(self._table[guess, solution])
