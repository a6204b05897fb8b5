"""
Pre-flight report on a (solutions, words) pair of word-list files.

WordleDictionary refuses bad input outright; this module instead collects
every problem at once so the CLI can print a one-line summary (and a
manifest can record the file hashes) before the signature table is built.

Checks per file: existence, SHA-256 of the raw bytes, valid / invalid /
blank lines, duplicates. Across files: solutions ⊆ words.

Typical use:
    from wordlebot.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "data/solutions.txt", "data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from wordlebot.engine.validation import is_valid_word

# How many offending line numbers to keep per file.
MAX_EXAMPLES = 5


@dataclass
class ListReport:
    path: str
    exists: bool
    sha256: str = ""
    valid: int = 0               # valid lines, duplicates included
    unique: int = 0              # distinct valid words
    blank_lines: int = 0
    invalid_lines: int = 0
    invalid_examples: List[int] = field(default_factory=list)  # 1-based line numbers


@dataclass
class PairReport:
    N: int
    solutions: ListReport
    words: ListReport
    solutions_subset_words: bool
    universe: int                # distinct words the solver would index
    passed: bool
    issues: List[str]


def _scan(path: Path, N: int) -> tuple[ListReport, set]:
    rep = ListReport(path=str(path), exists=path.exists())
    if not rep.exists:
        return rep, set()

    data = path.read_bytes()
    rep.sha256 = hashlib.sha256(data).hexdigest()

    seen: set = set()
    for lineno, raw in enumerate(data.splitlines(), start=1):
        try:
            w = raw.decode("utf-8").strip().lower()
        except UnicodeDecodeError:
            w = None  # undecodable line counts as invalid
        if w == "":
            rep.blank_lines += 1
        elif w is not None and is_valid_word(w, N):
            rep.valid += 1
            seen.add(w)
        else:
            rep.invalid_lines += 1
            if len(rep.invalid_examples) < MAX_EXAMPLES:
                rep.invalid_examples.append(lineno)
    rep.unique = len(seen)
    return rep, seen


def _file_issues(label: str, rep: ListReport) -> List[str]:
    if not rep.exists:
        return [f"{label} file not found: {rep.path}"]
    out = []
    if rep.unique == 0:
        out.append(f"{label} file contains 0 valid words")
    if rep.invalid_lines:
        out.append(f"{label} has {rep.invalid_lines} invalid line(s), e.g. lines {rep.invalid_examples}")
    if rep.valid != rep.unique:
        out.append(f"{label} has {rep.valid - rep.unique} duplicate word(s)")
    return out


def validate_wordlists(N: int, solutions_path: str, words_path: str) -> Dict:
    """
    Validate the solution and guessable-word lists for word length N.

    Returns a JSON-serializable dict (PairReport schema). `passed` is strict:
    both files exist and are non-empty, no invalid lines, solutions ⊆ words.
    Blank lines and duplicates are reported but tolerated (the reader drops
    blanks and the dictionary de-duplicates).
    """
    sol_rep, sol_words = _scan(Path(solutions_path), N)
    all_rep, all_words = _scan(Path(words_path), N)

    issues = _file_issues("solutions", sol_rep) + _file_issues("words", all_rep)

    subset_ok = sol_rep.exists and all_rep.exists and sol_words <= all_words
    if sol_rep.exists and all_rep.exists and not subset_ok:
        missing = sorted(sol_words - all_words)
        issues.append(f"solutions not subset of words (e.g., {missing[:MAX_EXAMPLES]})")

    passed = (
        subset_ok
        and sol_rep.unique > 0
        and all_rep.unique > 0
        and sol_rep.invalid_lines == 0
        and all_rep.invalid_lines == 0
    )
    rep = PairReport(
        N=N,
        solutions=sol_rep,
        words=all_rep,
        solutions_subset_words=subset_ok,
        universe=len(sol_words | all_words),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console, e.g.
        N=5 | solutions=2315 (sha=abc123...) | words=12972 (sha=def456...) | solutions⊆words=True | OK
    """
    s, w = report["solutions"], report["words"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | solutions={s['unique']} (sha={s['sha256'][:12]}) "
        f"| words={w['unique']} (sha={w['sha256'][:12]}) "
        f"| solutions⊆words={report['solutions_subset_words']} | {status}"
    )
