from .core import play_solution, run_batch, average_guesses
from .interactive import play_game
from .io import write_csv, write_manifest

__all__ = ["play_solution", "run_batch", "average_guesses", "play_game",
           "write_csv", "write_manifest"]
