from .validator import validate_wordlists, pretty_summary
from .io import read_wordlist

__all__ = ["validate_wordlists", "pretty_summary", "read_wordlist"]
