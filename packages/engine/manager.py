"""
Adversarial hangman manager.

The manager never picks a secret word. It keeps every dictionary word of
the requested length as a live candidate and, on each guess, narrows the
pool to the largest family sharing one reveal pattern (see families.py).
The guesser is always told the truth about *some* word, but the manager
commits as late as it possibly can.

State:
  All four pieces of game state (pool, guessed letters, reveal pattern,
  mistake budget) live in one frozen GameState. record_guess() builds the
  next GameState and swaps it in with a single assignment, so callers never
  observe a half-applied guess.

Errors (see errors.py):
  - InvalidArgumentError : length < 1, max_wrong < 0, repeated letter
  - NoCandidatesError    : pattern/guess with an empty pool
  - NoGuessesLeftError   : guess with no budget left

Outcome (won/lost) is the caller's call: a complete pattern means the word
is found, guesses_left() == 0 means the player is out of guesses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Tuple

from .errors import InvalidArgumentError, NoCandidatesError, NoGuessesLeftError
from .families import largest_family, partition
from .patterns import Pattern, blank_pattern, count_letter, render_pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameState:
    """One immutable snapshot of a game."""
    pool: frozenset              # candidate words still consistent with play
    guessed: Tuple[str, ...]     # sorted, unique
    pattern: Pattern             # what the guesser currently sees
    guesses_left: int            # remaining wrong guesses allowed


class HangmanManager:
    """
    Evil hangman: plays the secret-word side against a guesser.

    Args:
      dictionary : iterable of words; read once, not retained
      length     : target word length (>= 1)
      max_wrong  : wrong guesses the player may make (>= 0)

    An empty pool (no dictionary word of `length`) is accepted here and only
    fails once current_pattern() or record_guess() is called.
    """

    def __init__(self, dictionary: Iterable[str], length: int, max_wrong: int):
        if length < 1:
            raise InvalidArgumentError(f"word length must be at least 1; got {length}")
        if max_wrong < 0:
            raise InvalidArgumentError(f"max wrong guesses must be at least 0; got {max_wrong}")

        self._length = length
        self._max_wrong = max_wrong
        self._state = GameState(
            pool=frozenset(w for w in dictionary if len(w) == length),
            guessed=(),
            pattern=blank_pattern(length),
            guesses_left=max_wrong,
        )
        logger.debug("new game: length=%d max_wrong=%d pool=%d",
                     length, max_wrong, len(self._state.pool))

    # ---- read-only views ----

    @property
    def length(self) -> int:
        return self._length

    @property
    def max_wrong(self) -> int:
        return self._max_wrong

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def pattern_slots(self) -> Pattern:
        """Current pattern as slots (None = unrevealed), without the empty-pool check."""
        return self._state.pattern

    def candidate_pool(self) -> frozenset:
        """Words the manager could still claim as the secret."""
        return self._state.pool

    def guesses_left(self) -> int:
        return self._state.guesses_left

    def guessed_letters(self) -> Tuple[str, ...]:
        """Letters guessed so far, alphabetically sorted."""
        return self._state.guessed

    def current_pattern(self) -> str:
        """
        Rendered reveal pattern, e.g. "- a - ".

        Raises NoCandidatesError when there is nothing left to be consistent with.
        """
        if not self._state.pool:
            raise NoCandidatesError("no candidate words are being considered")
        return render_pattern(self._state.pattern)

    # ---- the one mutation ----

    def record_guess(self, letter: str) -> int:
        """
        Apply a guess and return how many slots it revealed.

        Steps:
          1) partition the pool into families by the pattern `letter` would give
          2) keep the largest family (ties: smallest rendered pattern)
          3) add `letter` to the guessed letters
          4) if the new pattern shows `letter` nowhere, spend one wrong guess

        Nothing changes if a precondition fails.
        """
        state = self._state
        if not state.pool:
            raise NoCandidatesError("no candidate words are being considered")
        if state.guesses_left < 1:
            raise NoGuessesLeftError("no guesses left")
        if letter in state.guessed:
            raise InvalidArgumentError(f"letter {letter!r} was already guessed")

        families = partition(state.pool, state.pattern, letter)
        pattern, pool = largest_family(families)

        occurrences = count_letter(pattern, letter)
        guesses_left = state.guesses_left - 1 if occurrences == 0 else state.guesses_left

        self._state = replace(
            state,
            pool=pool,
            guessed=tuple(sorted(state.guessed + (letter,))),
            pattern=pattern,
            guesses_left=guesses_left,
        )
        logger.debug(
            "guess %r: %d families, kept %d/%d words, occurrences=%d, guesses_left=%d",
            letter, len(families), len(pool), len(state.pool), occurrences, guesses_left,
        )
        return occurrences
