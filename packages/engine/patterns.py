"""
Reveal patterns for hangman.

A pattern is a tuple with one slot per letter of the word:
  - None  : slot not revealed yet
  - 'x'   : slot revealed as letter 'x'

The dash/space string shown to players is only produced at the edge by
render_pattern():

  (None, 'a', None)  ->  "- a - "

Each slot is followed by a single space, unrevealed slots are '-'.
Sorting rendered strings is how the manager breaks ties between families,
so render_pattern() must stay stable.
"""

from __future__ import annotations

from typing import Optional, Tuple

# One slot per word position; None means unrevealed.
Pattern = Tuple[Optional[str], ...]

UNREVEALED = "-"
SEPARATOR = " "


def blank_pattern(length: int) -> Pattern:
    """Pattern with `length` unrevealed slots."""
    return (None,) * length


def reveal(pattern: Pattern, word: str, letter: str) -> Pattern:
    """
    Return `pattern` with `letter` revealed wherever `word` has it.

    Slots already revealed stay revealed; everything else stays hidden,
    regardless of the other letters in `word`.

    Examples:
      reveal((None, None, None), "aba", "a") -> ('a', None, 'a')
      reveal(('a', None, 'a'), "aba", "c")   -> ('a', None, 'a')
    """
    return tuple(
        ch if ch == letter else slot
        for slot, ch in zip(pattern, word)
    )


def render_pattern(pattern: Pattern) -> str:
    """Dash/space display string, e.g. (None, 'b') -> '- b '."""
    return "".join(
        (UNREVEALED if slot is None else slot) + SEPARATOR
        for slot in pattern
    )


def parse_pattern(text: str) -> Pattern:
    """
    Inverse of render_pattern() for strings produced by it.

    A revealed '-' reads back as unrevealed: the display can't tell them apart.
    """
    slots = text[::2]
    return tuple(None if ch == UNREVEALED else ch for ch in slots)


def count_letter(pattern: Pattern, letter: str) -> int:
    """How many slots of `pattern` show `letter`."""
    return sum(1 for slot in pattern if slot == letter)


def is_complete(pattern: Pattern) -> bool:
    """True once every slot is revealed (the guesser has found the word)."""
    return all(slot is not None for slot in pattern)
