"""
Word-list hygiene for the solver core.

A word is usable iff it is lowercase a–z only and has exact length N once
surrounding whitespace is stripped. Anything else is a configuration error:
the core never silently drops words. (Dropping blank lines is the job of the
list reader in wordlebot.datasets.)
"""

from __future__ import annotations
import string
from typing import Iterable, List

from .errors import ConfigurationError

_ALPHABET = frozenset(string.ascii_lowercase)


def is_valid_word(word: str, N: int) -> bool:
    """True if `word` (already normalized) is N letters from a–z."""
    return len(word) == N and all(ch in _ALPHABET for ch in word)


def normalize_words(words: Iterable[str], N: int, *, label: str = "word list") -> List[str]:
    """
    Strip/lowercase every word and check its shape; order and duplicates kept.

    Raises ConfigurationError naming the first offending entry.
    """
    out: List[str] = []
    for lineno, raw in enumerate(words, start=1):
        if not isinstance(raw, str):
            raise ConfigurationError(f"{label}: entry {lineno} is not a string: {raw!r}")
        w = raw.strip().lower()
        if not is_valid_word(w, N):
            raise ConfigurationError(
                f"{label}: entry {lineno} {raw!r} is not a {N}-letter a-z word")
        out.append(w)
    return out


def dedupe(words: Iterable[str]) -> List[str]:
    """Drop repeats, keeping first occurrences in order."""
    seen = set()
    out: List[str] = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out
