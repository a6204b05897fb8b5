"""
Expected Remaining Candidates (ERC).

Idea:
  For guess g, if CURRENT candidates partition into buckets of sizes {c_i},
  the expected leftover after seeing the pattern is:
      E[left | g] = sum_i ( (c_i / n) * c_i ) = (1/n) * sum_i c_i^2
  n is the same for every guess, so minimizing sum_i c_i^2 is enough.
  The all-correct bucket is excluded as for every WordleBot.

Ranks close to the entropy cost but punishes large buckets harder, so the
two can disagree when guesses carry similar information.
"""

from __future__ import annotations

import numpy as np

from .base import WordleBot, register


@register
class ExpectedLeftBot(WordleBot):
    id = "expected_left"
    name = "Expected Remaining Candidates"
    version = "1.0.0"

    def cost(self, sizes: np.ndarray) -> np.ndarray:
        return sizes * sizes
