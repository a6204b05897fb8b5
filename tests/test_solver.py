import math
import random
from collections import defaultdict
import numpy as np
import pytest
from wordlebot.engine import (
    WordleDictionary, compute_signature, parse_feedback,
    ContradictoryFeedbackError, EmptyUniverseError, FeedbackFormatError,
)
from wordlebot.config import SolverConfig
from wordlebot.solvers import SolverState, create_solver, get_solver_ids

WORDS = ["crane", "raise", "stare", "trace", "cared", "slate", "adieu", "alone",
         "roate", "salet", "least", "steal", "react", "caret", "irate"]
SOLUTIONS = ["crane", "raise", "stare", "trace", "cared", "least", "steal", "react", "irate"]


@pytest.fixture(scope="module")
def dictionary():
    return WordleDictionary(WORDS, SOLUTIONS)


@pytest.fixture(params=["entropy", "expected_left"])
def bot(request, dictionary):
    return create_solver(request.param, dictionary)


def test_registry():
    assert get_solver_ids() == ["entropy", "expected_left"]
    with pytest.raises(ValueError):
        create_solver("nope", None)


def test_end_to_end_two_words():
    d = WordleDictionary(["abcde", "edcba"], ["abcde", "edcba"])
    bot = create_solver("entropy", d)
    assert bot.state is SolverState.AWAITING_FIRST_GUESS
    guess = bot.select_guess()
    assert guess == 0
    bot.apply_feedback(guess, compute_signature("edcba", d.word_string(guess)))
    assert bot.current_solution() == 1
    assert bot.select_guess() == 1
    assert bot.state is SolverState.SOLVED


@pytest.mark.parametrize("order", [["abcde", "edcba"], ["edcba", "abcde"]])
def test_ties_go_to_lowest_index(order):
    d = WordleDictionary(order, order)
    bot = create_solver("entropy", d)
    assert bot.score(0) == bot.score(1) == 1.0
    assert bot.first_guess == 0
    assert d.word_string(bot.select_guess()) == order[0]


def test_scores_exclude_all_correct_class():
    d = WordleDictionary(["aaaaa", "bbbbb", "ccccc", "abcde"], ["aaaaa", "bbbbb", "ccccc"])
    entropy = create_solver("entropy", d)
    squares = create_solver("expected_left", d)
    # abcde splits the three solutions into singletons
    assert entropy.score(3) == pytest.approx(3.0)
    assert squares.score(3) == pytest.approx(3.0)
    # aaaaa: itself is a win, the other two share one class
    assert entropy.score(0) == pytest.approx(2 * math.log2(3))
    assert squares.score(0) == pytest.approx(4.0)
    assert entropy.first_guess == squares.first_guess == d.index_of("abcde")


def test_score_all_agrees_with_score(bot, dictionary):
    bot.apply_feedback(bot.select_guess(), dictionary.get_feedback(0, bot.select_guess()))
    scores = bot.score_all()
    assert scores.shape == (dictionary.n_words,)
    for g in range(dictionary.n_words):
        assert scores[g] == pytest.approx(bot.score(g))


def test_class_sizes_cover_remaining(bot, dictionary):
    sizes = bot.class_sizes(np.arange(dictionary.n_words))
    assert sizes.shape == (dictionary.n_words, 243)
    assert (sizes.sum(axis=1) == dictionary.n_solutions).all()


def test_first_guess_is_cached(bot):
    first = bot.first_guess
    bot.is_first_guess = True
    assert bot.select_guess() == first
    # scoring the full set again gives the same word
    bot.is_first_guess = False
    assert bot.select_guess() == first


def test_feedback_is_monotonic(bot, dictionary):
    for guess in range(dictionary.n_words):
        bot.reset()
        for s in range(dictionary.n_solutions):
            before = set(bot.remaining)
            signature = dictionary.get_feedback(s, guess)
            if signature not in {dictionary.get_feedback(r, guess) for r in before}:
                continue
            bot.apply_feedback(guess, signature)
            after = set(bot.remaining)
            assert after <= before
            assert all(dictionary.get_feedback(r, guess) == signature for r in after)


def test_reset_restores_full_set(bot, dictionary):
    full = bot.remaining
    guess = bot.select_guess()
    bot.apply_feedback(guess, dictionary.get_feedback(3, guess))
    assert bot.state is not SolverState.AWAITING_FIRST_GUESS
    bot.reset()
    assert bot.remaining == full == list(range(dictionary.n_solutions))
    assert bot.state is SolverState.AWAITING_FIRST_GUESS
    assert bot.select_guess() == bot.first_guess


def test_contradictory_feedback_leaves_state(bot, dictionary):
    crane = dictionary.index_of("crane")
    before = bot.remaining
    with pytest.raises(ContradictoryFeedbackError):
        bot.apply_feedback(crane, parse_feedback("yyyyy"))
    assert bot.remaining == before
    assert bot.is_first_guess is True


def test_out_of_range_feedback(bot):
    with pytest.raises(FeedbackFormatError):
        bot.apply_feedback(0, 243)
    with pytest.raises(IndexError):
        bot.apply_feedback(len(WORDS), 0)


@pytest.mark.parametrize("solver_id", ["entropy", "expected_left"])
def test_two_instances_are_deterministic(solver_id):
    a = create_solver(solver_id, WordleDictionary(WORDS, SOLUTIONS))
    b = create_solver(solver_id, WordleDictionary(WORDS, SOLUTIONS))
    for hidden in SOLUTIONS:
        a.reset()
        b.reset()
        target = a.dictionary.index_of(hidden)
        while a.current_solution() is None:
            ga, gb = a.select_guess(), b.select_guess()
            assert ga == gb
            sig = a.dictionary.get_feedback(target, ga)
            a.apply_feedback(ga, sig)
            b.apply_feedback(gb, sig)
        assert a.current_solution() == b.current_solution() == target


def test_empty_universe_is_reported():
    class _Empty:
        config = SolverConfig()
        word_length = 5
        n_words = 0
        n_solutions = 0

    with pytest.raises(EmptyUniverseError):
        create_solver("entropy", _Empty())


def _random_words(n, seed, letters="abcdefgh"):
    rng = random.Random(seed)
    seen = {}
    while len(seen) < n:
        seen["".join(rng.choice(letters) for _ in range(5))] = None
    return list(seen)


@pytest.fixture(scope="module")
def random_dictionary():
    # closed under reversal: w and w[::-1] split the candidates into the same
    # class sizes, at mirrored signature values
    words = []
    for w in _random_words(200, seed=11):
        for v in (w, w[::-1]):
            if v not in words:
                words.append(v)
    return WordleDictionary(words, words)


@pytest.mark.parametrize("solver_id", ["entropy", "expected_left"])
def test_mirrored_partitions_score_identically(random_dictionary, solver_id):
    d = random_dictionary
    bot = create_solver(solver_id, d)
    scores = bot.score_all()
    sizes = bot.class_sizes(np.arange(d.n_words))[:, :-1]
    for g in range(d.n_words):
        m = d.index_of(d.word_string(g)[::-1])
        assert sorted(sizes[g]) == sorted(sizes[m])
        assert scores[g] == scores[m]

    # ties resolve to the lowest word index
    best = scores.min()
    bot.is_first_guess = False
    assert bot.select_guess() == min(g for g in range(d.n_words) if scores[g] == best)


def test_chunk_rows_bounded_by_remaining(random_dictionary):
    bot = create_solver("entropy", random_dictionary)
    expected = bot.score_all()
    bot.SCORE_CELLS_PER_CHUNK = 1000
    # every word is a candidate, wider than the 243 signature classes
    assert random_dictionary.n_solutions > 243
    assert bot.rows_per_chunk() == 1000 // random_dictionary.n_solutions
    assert np.array_equal(bot.score_all(), expected)

    small = create_solver("entropy", WordleDictionary(WORDS, SOLUTIONS))
    small.SCORE_CELLS_PER_CHUNK = 1000
    assert small.rows_per_chunk() == 1000 // 243
