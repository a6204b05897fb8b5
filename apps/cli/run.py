# apps/cli/run.py
"""
CLI entry point for wordlebot.

Modes:
  game     (default) the bot proposes guesses, you type the feedback
  average  the bot plays every solution and reports the mean guess count,
           optionally writing a CSV of every round plus a JSON manifest

Both modes:
  1) Validate the word lists (prints counts + SHA, checks solutions ⊆ words).
  2) Build the dictionary (signature table, computed once) and the solver.

Run from the repository root:
  python -m apps.cli.run game --solutions data/solutions.txt --words data/words.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from wordlebot.config import SolverConfig, DEFAULT_WORD_LENGTH, DEFAULT_SOLVER
from wordlebot.datasets import validate_wordlists, pretty_summary, read_wordlist
from wordlebot.engine import WordleDictionary, WordleBotError
from wordlebot.harness import play_game, run_batch, average_guesses, write_csv, write_manifest
from wordlebot.harness.io import timestamp_id, git_commit_or_unknown
from wordlebot.solvers import create_solver, get_solver_ids


def build_parser() -> argparse.ArgumentParser:
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordlebot: information-based word-game solver")
    ap.add_argument("mode", nargs="?", choices=["game", "average"], default="game")
    ap.add_argument("--solutions", default="dictionary_solutions.txt",
                    help="path to the solution list (possible hidden words)")
    ap.add_argument("--words", default="dictionary_full.txt",
                    help="path to the guessable word list (must contain every solution)")
    ap.add_argument("--N", type=int, default=DEFAULT_WORD_LENGTH, help="word length")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--dtype", default="uint16", help="numpy dtype for signatures")
    ap.add_argument("--workers", type=int, help="processes for the signature table (default: all cores)")
    ap.add_argument("--sample", type=int, help="average mode: play only the first K solutions")
    ap.add_argument("--outdir", help="average mode: write CSV + manifest here")
    ap.add_argument("--progress", action="store_true", help="show tqdm progress bars")
    ap.add_argument("-v", "--verbose", action="store_true", help="log table build details")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.N, args.solutions, args.words)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}", file=sys.stderr)

    # 2) Build dictionary + solver; configuration problems are fatal
    config = SolverConfig(word_length=args.N, signature_dtype=args.dtype,
                          workers=args.workers, solver=args.solver, progress=args.progress)
    try:
        dictionary = WordleDictionary(read_wordlist(args.words), read_wordlist(args.solutions),
                                      config)
        bot = create_solver(config.solver, dictionary)
    except (WordleBotError, UnicodeDecodeError, ValueError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.mode == "game":
        play_game(bot)
        return 0

    # 3) Average mode
    start = time.time()
    results = run_batch(bot, sample=args.sample, progress=args.progress)
    avg = average_guesses(results)
    print(f"Average guesses used: {avg}")
    print(f"Played {len(results)} round(s) in {time.time() - start:.1f}s")

    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = write_csv(results, str(outdir / f"run_{run_id}.csv"), N=args.N)
        manifest_path = write_manifest({
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlists": rep,
            "num_cases": len(results),
            "solver_id": bot.id,
            "opening_guess": dictionary.word_string(bot.first_guess),
            "average_guesses": avg,
        }, str(outdir / f"run_{run_id}_manifest.json"))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
