"""
Experiment harness core primitives.

- run_case:  play a single game of evil hangman with a given guesser.
- run_batch: play one game per requested word length.

A game ends when:
  - the pattern is fully revealed            -> win
  - the manager's mistake budget hits zero   -> loss
  - the guesser has no letters left to try   -> loss

These functions are UI-agnostic so they can be reused by a CLI app, a
notebook, or tests without changes.
"""

from __future__ import annotations
import logging
import time
from typing import Dict, Iterable, List, Tuple
from packages.engine import ALPHABET, HangmanManager, filter_candidates, is_complete, render_pattern

logger = logging.getLogger(__name__)

# Classic hangman gallows: head, body, two arms, two legs.
DEFAULT_MAX_WRONG = 6
DEFAULT_LENGTH = 5


def _answer_of(manager: HangmanManager) -> str:
    """The word a front end would reveal at the end: first remaining candidate."""
    pool = manager.candidate_pool()
    return min(pool) if pool else ""


def run_case(
        guesser,
        *,
        dictionary: Iterable[str],
        length: int = DEFAULT_LENGTH,
        max_wrong: int = DEFAULT_MAX_WRONG,
        seed: int | None = None,
        alphabet: str = ALPHABET,
) -> Dict:
    """
    Play one game until the guesser reveals the word or runs out of guesses.

    Args:
        guesser:    an object implementing BaseGuesser with next_letter(state)
        dictionary: words the manager (and the guesser) know about
        length:     word length for this game
        max_wrong:  wrong guesses allowed
        seed:       RNG seed to make guesser tie-breaks reproducible
        alphabet:   letters the guesser may try

    Returns:
        dict with keys:
            success (bool), guesses (int), wrong (int), time_ms (float),
            history (list[(letter, occurrences, pattern)]), answer (str),
            pool_sizes (list[int]), length (int), max_wrong (int)

    Raises:
        NoCandidatesError if the dictionary has no word of `length`.
    """
    words = list(dictionary)
    manager = HangmanManager(words, length, max_wrong)
    # Fail fast on an empty pool instead of inside the loop.
    manager.current_pattern()

    guesser.reset(dictionary=words, length=length, seed=seed)
    candidates = list(guesser.dictionary)

    history: List[Tuple[str, int, str]] = []
    pool_sizes: List[int] = [len(manager.candidate_pool())]
    success = False
    guess_ms = 0.0

    turn = 0
    while manager.guesses_left() > 0 and len(manager.guessed_letters()) < len(alphabet):
        turn += 1
        state = {
            "turn": turn,
            "length": length,
            "pattern": manager.pattern_slots,
            "guessed": manager.guessed_letters(),
            "guesses_left": manager.guesses_left(),
            "candidates": candidates,
            "alphabet": alphabet,
            "rng": guesser.rng,
        }

        t0 = time.perf_counter_ns()
        letter = guesser.next_letter(state)
        guess_ms += (time.perf_counter_ns() - t0) / 1_000_000.0

        occurrences = manager.record_guess(letter)
        history.append((letter, occurrences, manager.current_pattern()))
        pool_sizes.append(len(manager.candidate_pool()))

        if is_complete(manager.pattern_slots):
            success = True
            break

        # Narrow the guesser's view using what it was just shown
        candidates = filter_candidates(candidates, manager.pattern_slots, manager.guessed_letters())

    wrong = max_wrong - manager.guesses_left()
    answer = _answer_of(manager)
    logger.debug("game over: guesser=%s length=%d success=%s guesses=%d wrong=%d answer=%s",
                 getattr(guesser, "id", "?"), length, success, len(history), wrong, answer)
    return {
        "success": success,
        "guesses": len(history),
        "wrong": wrong,
        "time_ms": guess_ms,
        "history": history,
        "answer": answer,
        "final_pattern": render_pattern(manager.pattern_slots),
        "pool_sizes": pool_sizes,
        "length": length,
        "max_wrong": max_wrong,
    }


def run_batch(
        guesser,
        *,
        dictionary: List[str],
        lengths: Iterable[int],
        max_wrong: int = DEFAULT_MAX_WRONG,
        seed: int | None = None,
) -> List[Dict]:
    """
    Run one case per entry in `lengths` (repeat a length to replay it with
    another seed). Lengths with no dictionary words are skipped with a warning.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    available = {len(w) for w in dictionary}

    out: List[Dict] = []
    for idx, n in enumerate(lengths, start=1):
        if n not in available:
            logger.warning("no dictionary words of length %d; skipping", n)
            continue
        case_seed = None if seed is None else (seed + idx)
        r = run_case(guesser, dictionary=dictionary, length=n,
                     max_wrong=max_wrong, seed=case_seed)
        r["guesser_id"] = getattr(guesser, "id", "?")
        out.append(r)
    return out
