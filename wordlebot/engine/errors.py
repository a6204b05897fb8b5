"""
Error taxonomy for the solver core.

  - ConfigurationError : bad word lists, word-length mismatches, a signature
                         dtype too narrow for 3**N. Fatal, raised at startup.
  - FeedbackFormatError: feedback text/signature that cannot be decoded.
  - ExhaustionError    : the solver has nothing left to offer.
      * EmptyUniverseError         : no guessable words at all.
      * ContradictoryFeedbackError : feedback eliminated every candidate.
"""


class WordleBotError(Exception):
    """Base class for every error raised by wordlebot."""


class ConfigurationError(WordleBotError, ValueError):
    pass


class FeedbackFormatError(WordleBotError, ValueError):
    pass


class ExhaustionError(WordleBotError, RuntimeError):
    pass


class EmptyUniverseError(ExhaustionError):
    pass


class ContradictoryFeedbackError(ExhaustionError):
    """
    Raised by apply_feedback when no remaining candidate matches the given
    (guess, signature) pair. The candidate set is left as it was.
    """

    def __init__(self, guess: int, signature: int, remaining: int):
        self.guess = guess
        self.signature = signature
        self.remaining = remaining
        super().__init__(
            f"feedback {signature} for guess #{guess} is inconsistent with all "
            f"{remaining} remaining candidate(s)")
