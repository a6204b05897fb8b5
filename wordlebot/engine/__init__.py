from .errors import (
    WordleBotError,
    ConfigurationError,
    FeedbackFormatError,
    ExhaustionError,
    EmptyUniverseError,
    ContradictoryFeedbackError,
)
from .feedback import (
    ABSENT,
    PRESENT,
    CORRECT,
    compute_signature,
    parse_feedback,
    format_signature,
    signature_space,
    all_correct,
)
from .validation import normalize_words
from .table import build_signature_table
from .dictionary import WordleDictionary

__all__ = [
    "WordleBotError", "ConfigurationError", "FeedbackFormatError", "ExhaustionError",
    "EmptyUniverseError", "ContradictoryFeedbackError",
    "ABSENT", "PRESENT", "CORRECT", "compute_signature", "parse_feedback",
    "format_signature", "signature_space", "all_correct",
    "normalize_words", "build_signature_table", "WordleDictionary",
]
