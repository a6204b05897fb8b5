from __future__ import annotations
from pathlib import Path
from typing import List


def read_wordlist(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list: one word per line, lowercased, blank lines and
    trailing CR/LF dropped. Length/alphabet checks are left to
    WordleDictionary so bad entries surface as configuration errors.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    words: List[str] = []
    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w:
                words.append(w.lower())
    return words
