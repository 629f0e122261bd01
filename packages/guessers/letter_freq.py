"""
Letter-Frequency guesser (distinct-letter coverage).

Idea:
  - Look at the dictionary words still consistent with the pattern and the
    misses so far (state["candidates"]). Count, for each unguessed letter,
    how many of those words contain it at least once. Guess the max.

Why it works:
  - A letter present in most candidates is the one least likely to cost a
    wrong guess, even against an adversary that picks the largest family.

Notes:
  - When no candidate remains (the dictionary the guesser holds differs from
    the manager's), falls back to English letter order.
"""

from __future__ import annotations
from collections import Counter
from typing import Dict, List
from .base import BaseGuesser, register, unguessed

# Fallback order when candidates give no signal.
ENGLISH_ORDER = "etaoinshrdlcumwfgypbvkjxqz"


def letter_coverage(candidates: List[str], letters: List[str]) -> Counter:
    """Per-letter count of candidates containing it (each word counted once)."""
    wanted = set(letters)
    counts: Counter = Counter()
    for w in candidates:
        for ch in set(w):
            if ch in wanted:
                counts[ch] += 1
    return counts


def fallback_rank(letters: List[str]) -> Dict[str, int]:
    """Lower is better; letters outside ENGLISH_ORDER go last."""
    return {ch: (ENGLISH_ORDER.index(ch) if ch in ENGLISH_ORDER else len(ENGLISH_ORDER))
            for ch in letters}


@register
class LetterFreqGuesser(BaseGuesser):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "1.0.0"

    def next_letter(self, state: dict) -> str:
        """
        Decide the next letter based on candidate coverage.
        """
        letters = unguessed(state)
        if not letters:
            raise ValueError("every letter has already been guessed")

        counts = letter_coverage(state["candidates"], letters)
        if not counts:
            rank = fallback_rank(letters)
            return min(letters, key=lambda ch: rank[ch])

        best_count = max(counts.values())
        best_letters = [ch for ch in letters if counts[ch] == best_count]

        # Deterministic tie-break using the guesser RNG.
        return best_letters[self.rng.randrange(len(best_letters))]
