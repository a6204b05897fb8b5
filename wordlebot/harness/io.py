"""
Report files for a batch run.

- write_csv:      one row per round, guess/pattern columns widened to the
                  longest round in the batch.
- write_manifest: JSON with the run configuration and word-list report.
- timestamp_id:   UTC run id for filenames.
- git_commit_or_unknown: short commit hash when run from a checkout.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import datetime as dt
import json
import subprocess


def write_csv(results: List[Dict], path: str, N: int) -> str:
    """
    Columns: solver, N, answer, guesses, success, time_ms,
             guess_1, patt_1, ..., guess_K, patt_K   (K = longest round)

    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    width = max((len(r.get("history", [])) for r in results), default=0)
    fields = ["solver", "N", "answer", "guesses", "success", "time_ms"]
    for i in range(1, width + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields, restval="")
        w.writeheader()
        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "N": N,
                "answer": r["answer"],
                "guesses": r["guesses"],
                "success": r["success"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            for i, (g, patt) in enumerate(r.get("history", []), start=1):
                row[f"guess_{i}"] = g
                row[f"patt_{i}"] = patt
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short git hash of the working tree, or 'unknown' outside a checkout."""
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            stderr=subprocess.DEVNULL,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()
