"""
Wordle-style feedback for a single (target, guess) pair, as a base-3 signature.

Conventions (one digit per letter position, most significant first):
  - 0 : ABSENT  = letter not present (or present fewer times than guessed)
  - 1 : PRESENT = correct letter in the wrong position
  - 2 : CORRECT = correct letter in the correct position

So for N letters a signature lies in [0, 3**N), and guessing the target
itself always gives 3**N - 1.

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks every CORRECT position and consumes that target letter.
  2) Second pass walks the guess left to right; each remaining guess letter
     consumes the first unused matching target letter and becomes PRESENT.
     A target letter can satisfy at most one guess position.

Human-entered feedback uses one symbol per position: 'x' / 'y' / 'g'.
"""

from __future__ import annotations
from typing import List

import numpy as np

from .errors import ConfigurationError, FeedbackFormatError

ABSENT = 0
PRESENT = 1
CORRECT = 2

# Symbol for each digit, indexed by digit value.
FEEDBACK_SYMBOLS = "xyg"


def signature_space(word_length: int) -> int:
    """Number of distinct signatures for words of `word_length` letters."""
    return 3 ** word_length


def all_correct(word_length: int) -> int:
    """Signature of a guess that equals the target."""
    return signature_space(word_length) - 1


def check_signature_dtype(word_length: int, dtype) -> np.dtype:
    """
    Make sure a numpy integer dtype can store every signature for this length.

    Returns the resolved dtype; raises ConfigurationError otherwise.
    """
    try:
        dt = np.dtype(dtype)
    except TypeError as e:
        raise ConfigurationError(f"unknown signature dtype: {dtype!r}") from e
    if dt.kind not in "iu":
        raise ConfigurationError(f"signature dtype must be an integer type, got {dt}")
    if np.iinfo(dt).max < all_correct(word_length):
        raise ConfigurationError(
            f"signature dtype {dt} is too narrow for word length {word_length} "
            f"(needs to hold {all_correct(word_length)})")
    return dt


def compute_signature(target: str, guess: str) -> int:
    """
    Compute the feedback signature of `guess` against the hidden `target`.

    Preconditions:
      - len(target) == len(guess)

    Examples:
      compute_signature("hello", "zebra") -> 54    (x g x x x)
      compute_signature("abcde", "bcdea") -> 121   (y y y y y)
    """
    assert len(target) == len(guess), "Target and guess must be the same length"

    n = len(target)
    used = [False] * n
    digits: List[int] = [ABSENT] * n

    # Pass 1: correctly placed letters
    for i in range(n):
        if guess[i] == target[i]:
            used[i] = True
            digits[i] = CORRECT

    # Pass 2: misplaced letters, first unused match wins
    for i in range(n):
        if digits[i] == CORRECT:
            continue
        for j in range(n):
            if not used[j] and guess[i] == target[j]:
                used[j] = True
                digits[i] = PRESENT
                break

    signature = 0
    for d in digits:
        signature = signature * 3 + d
    return signature


def parse_feedback(text: str, word_length: int | None = None) -> int:
    """
    Turn a feedback string such as "xgyxx" into a signature.

    Case-insensitive; surrounding whitespace is ignored. If `word_length` is
    given the string must have exactly that many symbols.
    """
    s = text.strip().lower()
    if not s:
        raise FeedbackFormatError("feedback is empty")
    if word_length is not None and len(s) != word_length:
        raise FeedbackFormatError(
            f"feedback {text.strip()!r} has {len(s)} symbols, expected {word_length}")

    signature = 0
    for ch in s:
        digit = FEEDBACK_SYMBOLS.find(ch)
        if digit < 0:
            raise FeedbackFormatError(
                f"unknown feedback symbol {ch!r}; use one of {', '.join(FEEDBACK_SYMBOLS)}")
        signature = signature * 3 + digit
    return signature


def format_signature(signature: int, word_length: int) -> str:
    """Inverse of parse_feedback, e.g. 54 -> 'xgxxx' for length 5."""
    if not 0 <= signature < signature_space(word_length):
        raise FeedbackFormatError(
            f"signature {signature} out of range for word length {word_length}")
    out = []
    for _ in range(word_length):
        signature, d = divmod(signature, 3)
        out.append(FEEDBACK_SYMBOLS[d])
    return "".join(reversed(out))
