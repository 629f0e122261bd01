"""
Candidate filtering from the guesser's side of the table.

The manager knows its pool; a guesser only sees:
  - the reveal pattern
  - the letters it has guessed so far

Given a dictionary, return the words still consistent with both. Solvers use
this to reason about which letters are worth trying next; tests use it to
check that the manager's pool never contradicts what it has shown.

A word is consistent iff:
  - it has the pattern's length
  - every revealed slot matches the word's letter at that position
  - every guessed letter shows up in the word exactly where the pattern
    reveals it, and nowhere else (a miss means absent everywhere)
"""

from typing import Iterable, List

from .patterns import Pattern


def is_consistent(word: str, pattern: Pattern, guessed: Iterable[str]) -> bool:
    """True if `word` could be the secret given `pattern` and `guessed`."""
    if len(word) != len(pattern):
        return False

    for slot, ch in zip(pattern, word):
        if slot is not None and slot != ch:
            return False

    for letter in guessed:
        for slot, ch in zip(pattern, word):
            # A guessed letter in the word must have been revealed here.
            if ch == letter and slot != letter:
                return False
    return True


def filter_candidates(words: Iterable[str], pattern: Pattern, guessed: Iterable[str]) -> List[str]:
    """
    Keep only words consistent with `pattern` and `guessed`.

    Returns:
      List[str] (order preserved as in `words`).
    """
    guessed = tuple(guessed)
    return [w for w in words if is_consistent(w, pattern, guessed)]
