"""
Entropy-like cost (the default).

For guess g with remaining-candidate classes of sizes {c_i}:
    score(g) = sum_i c_i * log2(c_i + 1)        (all-correct class excluded)

c * log2(c + 1) grows slightly faster than linear, so one big class costs
more than several small ones of the same total size: it rewards guesses
whose feedback splits the candidates into many small, even buckets, much
like maximizing Shannon entropy, while staying zero for empty classes.
"""

from __future__ import annotations

import numpy as np

from .base import WordleBot, register


@register
class EntropyBot(WordleBot):
    id = "entropy"
    name = "Entropy-weighted class size"
    version = "1.0.0"

    def cost(self, sizes: np.ndarray) -> np.ndarray:
        return sizes * np.log2(sizes + 1.0)
