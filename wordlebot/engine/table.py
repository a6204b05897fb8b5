"""
Signature table: every guess scored against every solution, computed once.

Shape is (n_words, n_solutions); entry [g, s] is
compute_signature(solutions[s], words[g]). Rows are independent, so the work
is split by guess row across a process pool. Each worker receives the
solution list once through the pool initializer and returns whole row chunks,
which are written back by row offset (completion order does not matter).
"""

from __future__ import annotations
import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import List, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from .feedback import compute_signature

log = logging.getLogger(__name__)

# Below this many cells the pool start-up costs more than it saves.
SERIAL_CELL_LIMIT = 200_000

# Guess rows per submitted task.
CHUNK_ROWS = 256

# ---- Worker globals & helpers for multiprocessing ----
_worker_solutions: List[str] | None = None  # set once per worker process


def _init_worker(solutions: List[str]) -> None:
    global _worker_solutions
    _worker_solutions = solutions


def _rows(guesses: Sequence[str], solutions: Sequence[str]) -> List[List[int]]:
    return [[compute_signature(t, g) for t in solutions] for g in guesses]


def _rows_worker(start: int, guesses: List[str]) -> Tuple[int, List[List[int]]]:
    return start, _rows(guesses, _worker_solutions)


def build_signature_table(
        words: Sequence[str],
        solutions: Sequence[str],
        *,
        dtype=np.uint16,
        workers: int | None = None,
        progress: bool = False,
) -> np.ndarray:
    """
    Build the read-only (guess x solution) signature table.

    Args:
      words    : every guessable word (row order)
      solutions: possible hidden words (column order)
      dtype    : numpy integer dtype for signatures (caller checks capacity)
      workers  : process count; None -> os.cpu_count(), 1 -> in-process
      progress : show a tqdm bar over row chunks
    """
    n_words, n_solutions = len(words), len(solutions)
    table = np.empty((n_words, n_solutions), dtype=dtype)
    if workers is None:
        workers = os.cpu_count() or 1

    t0 = time.perf_counter()
    chunks = [(start, list(words[start:start + CHUNK_ROWS]))
              for start in range(0, n_words, CHUNK_ROWS)]

    bar = None
    if progress:
        bar = tqdm(total=n_words, ncols=80, desc="Signatures", unit="word")

    if workers <= 1 or n_words * n_solutions <= SERIAL_CELL_LIMIT:
        for start, guesses in chunks:
            table[start:start + len(guesses)] = _rows(guesses, solutions)
            if bar is not None:
                bar.update(len(guesses))
    else:
        with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                                 initargs=(list(solutions),)) as ex:
            futures = [ex.submit(_rows_worker, start, guesses) for start, guesses in chunks]
            for fut in as_completed(futures):
                start, rows = fut.result()
                table[start:start + len(rows)] = rows
                if bar is not None:
                    bar.update(len(rows))

    if bar is not None:
        bar.close()

    table.flags.writeable = False
    log.info("built %dx%d signature table in %.2fs (workers=%d)",
             n_words, n_solutions, time.perf_counter() - t0, workers)
    return table
