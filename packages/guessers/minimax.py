"""
Minimax guesser (smallest worst family).

Idea:
  The manager always keeps the largest pattern family. So for each
  unguessed letter, partition the CURRENT candidates exactly the way the
  manager would and look at the largest family. Pick the letter that
  leaves the adversary the smallest pool.
  Tie-break: higher letter coverage, then RNG.

Acceleration:
  Partitioning is O(candidates x letters). Above CANDIDATE_LIMIT only the
  TOP_LETTERS letters by coverage are partitioned.
"""

from __future__ import annotations
from typing import List, Tuple
from .base import BaseGuesser, register, unguessed
from .letter_freq import fallback_rank, letter_coverage
from packages.engine.families import worst_family_size


@register
class MinimaxGuesser(BaseGuesser):
    id = "minimax"
    name = "Minimax (smallest worst family)"
    version = "1.0.0"

    CANDIDATE_LIMIT = 2000
    TOP_LETTERS = 8

    def _select_letters(self, letters: List[str], candidates: List[str]) -> List[str]:
        if len(candidates) <= self.CANDIDATE_LIMIT:
            return letters
        counts = letter_coverage(candidates, letters)
        ranked = sorted(letters, key=lambda ch: counts[ch], reverse=True)
        return ranked[: self.TOP_LETTERS]

    def next_letter(self, state: dict) -> str:
        letters = unguessed(state)
        if not letters:
            raise ValueError("every letter has already been guessed")

        candidates: List[str] = state["candidates"]
        if not candidates:
            rank = fallback_rank(letters)
            return min(letters, key=lambda ch: rank[ch])

        pattern = state["pattern"]
        counts = letter_coverage(candidates, letters)

        best_key: Tuple[int, int] | None = None
        best: List[str] = []
        for ch in self._select_letters(letters, candidates):
            key = (worst_family_size(candidates, pattern, ch), -counts[ch])
            if best_key is None or key < best_key:
                best_key, best = key, [ch]
            elif key == best_key:
                best.append(ch)

        return best[self.rng.randrange(len(best))]
