"""
Line-oriented game loop: the bot guesses, a human types the feedback.

Feedback is one symbol per letter: 'g' (right place), 'y' (wrong place),
'x' (absent). Typing `reset` starts a new round, `quit` (or EOF) stops.
"""

from __future__ import annotations
from typing import Callable

from wordlebot.engine.errors import ContradictoryFeedbackError, FeedbackFormatError
from wordlebot.engine.feedback import parse_feedback
from wordlebot.solvers import WordleBot

PROMPT = "Please enter feedback using 'g', 'y', and 'x': "


def play_game(bot: WordleBot, read: Callable[[str], str] = input,
              write: Callable[[str], None] = print) -> int | None:
    """
    Run one interactive round. Returns the solution index once it is
    determined, or None if the player quits.
    """
    d = bot.dictionary
    while True:
        solution = bot.current_solution()
        if solution is not None:
            write(f"Solution found: {d.solution_string(solution)}")
            return solution

        guess = bot.select_guess()
        write(f"My guess is {d.word_string(guess)}")

        while True:
            try:
                line = read(PROMPT)
            except EOFError:
                return None
            cmd = line.strip().lower()
            if cmd in ("quit", "q"):
                return None
            if cmd == "reset":
                bot.reset()
                write("Starting over.")
                break
            try:
                bot.apply_feedback(guess, parse_feedback(line, d.word_length))
            except FeedbackFormatError as e:
                write(f"Invalid feedback: {e}")
                continue
            except ContradictoryFeedbackError:
                write("That feedback rules out every remaining word; check it and try again "
                      "(or type 'reset').")
                continue
            break
