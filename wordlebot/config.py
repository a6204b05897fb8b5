"""
Run configuration shared by the dictionary, the solvers and the CLI.

Word length and the derived signature space are plain settings rather than
module constants, so the same core serves 5-, 6- or 7-letter games.
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .engine.errors import ConfigurationError
from .engine.feedback import check_signature_dtype, signature_space

DEFAULT_WORD_LENGTH = 5
DEFAULT_SOLVER = "entropy"


@dataclass(frozen=True)
class SolverConfig:
    word_length: int = DEFAULT_WORD_LENGTH
    signature_dtype: str = "uint16"   # must hold 3**word_length - 1
    workers: int | None = None        # table build processes; None -> cpu count
    solver: str = DEFAULT_SOLVER      # registered solver id
    progress: bool = False            # tqdm bar while building the table

    def validate(self) -> "SolverConfig":
        """Raise ConfigurationError on unusable settings; return self for chaining."""
        if not isinstance(self.word_length, int) or self.word_length <= 0:
            raise ConfigurationError(f"word_length must be a positive integer, got {self.word_length!r}")
        if self.workers is not None and self.workers < 1:
            raise ConfigurationError(f"workers must be >= 1, got {self.workers}")
        check_signature_dtype(self.word_length, self.signature_dtype)
        return self

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.signature_dtype)

    @property
    def n_signatures(self) -> int:
        return signature_space(self.word_length)
