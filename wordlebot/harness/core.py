"""
Batch harness: let the bot play against every hidden solution.

- play_solution:   one round against one known solution index.
- run_batch:       play_solution over all (or the first K) solutions.
- average_guesses: mean guesses per round over a batch.

The bot is reset at the start of each round, so the signature table and
the cached opening guess are shared by the whole batch. There is no turn
cap; `success` only records whether the round fit Wordle's six turns.
"""

from __future__ import annotations
import time
from typing import Dict, List, Tuple

from tqdm import tqdm

from wordlebot.engine.feedback import format_signature
from wordlebot.solvers import WordleBot

# Wordle's turn budget, used for the success flag only.
WORDLE_MAX_TURNS = 6


def play_solution(bot: WordleBot, solution: int) -> Dict:
    """
    Play one round where `solution` (a solution index) is the hidden word.

    Returns:
        dict with keys:
            answer (str), guesses (int), success (bool), time_ms (float),
            history (list[(guess, pattern)])
    """
    d = bot.dictionary
    target = d.solution_to_word(solution)
    bot.reset()

    history: List[Tuple[str, str]] = []
    t0 = time.perf_counter_ns()
    while True:
        guess = bot.select_guess()
        signature = d.get_feedback(solution, guess)
        history.append((d.word_string(guess), format_signature(signature, d.word_length)))
        if guess == target:
            break
        bot.apply_feedback(guess, signature)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "answer": d.solution_string(solution),
        "guesses": len(history),
        "success": len(history) <= WORDLE_MAX_TURNS,
        "time_ms": dt,
        "history": history,
    }


def run_batch(bot: WordleBot, *, sample: int | None = None,
              progress: bool = False) -> List[Dict]:
    """
    Play every solution in index order. If `sample` is given, only the first K
    solutions are played (quick experiments).
    """
    pool = range(bot.dictionary.n_solutions)
    if sample is not None:
        pool = pool[:sample]

    iterator = pool
    if progress:
        iterator = tqdm(pool, ncols=80, desc="Playing", unit="game")

    out: List[Dict] = []
    for solution in iterator:
        r = play_solution(bot, solution)
        r["solver_id"] = bot.id
        out.append(r)
    return out


def average_guesses(results: List[Dict]) -> float:
    if not results:
        raise ValueError("no results to average")
    return sum(r["guesses"] for r in results) / len(results)
