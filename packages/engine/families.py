"""
Pattern families: splitting a candidate pool by what a guess would reveal.

For a guessed letter, every candidate word maps to the pattern the player
would see if that word were the secret. Words that map to the same pattern
form one family. The manager keeps the largest family, which is the least
informative answer it can truthfully give.

Tie-break:
  Family patterns are sorted by their rendered string and scanned in that
  order; a family replaces the best only when it is strictly larger. Among
  families tied for the largest size, the lexicographically smallest
  rendered pattern wins ("- - " beats "b b").
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Set, Tuple

from .patterns import Pattern, parse_pattern, render_pattern, reveal

Families = Dict[Pattern, frozenset]


def partition(words: Iterable[str], pattern: Pattern, letter: str) -> Families:
    """
    Group `words` by the pattern `letter` would produce on top of `pattern`.

    Words belong to the same family when the player would see the same
    display string, so families are keyed by render_pattern(). Guessing '-'
    or ' ' reveals nothing distinguishable from the display and merges the
    words it would otherwise split.

    Returns:
      dict mapping family pattern -> frozenset of member words.
    """
    groups: Dict[str, Set[str]] = defaultdict(set)
    for w in words:
        groups[render_pattern(reveal(pattern, w, letter))].add(w)
    return {parse_pattern(shown): frozenset(members) for shown, members in groups.items()}


def ordered_patterns(families: Families) -> List[Pattern]:
    """Family patterns sorted by rendered string (the tie-break order)."""
    return sorted(families, key=render_pattern)


def largest_family(families: Families) -> Tuple[Pattern, frozenset]:
    """
    Pick the family the adversary retreats to.

    Raises ValueError if `families` is empty; callers guarantee a non-empty
    pool so this only happens on misuse.
    """
    best_pattern = None
    best_words: frozenset = frozenset()
    for p in ordered_patterns(families):
        members = families[p]
        if len(members) > len(best_words):
            best_pattern, best_words = p, members
    if best_pattern is None:
        raise ValueError("cannot choose a family from an empty partition")
    return best_pattern, best_words


def worst_family_size(words: Iterable[str], pattern: Pattern, letter: str) -> int:
    """Size of the family the adversary would keep after `letter`."""
    families = partition(words, pattern, letter)
    if not families:
        return 0
    return max(len(m) for m in families.values())
