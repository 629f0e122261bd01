"""
Random Letter guesser.

Strategy:
  - Pick uniformly at random among alphabet letters not guessed yet.

Notes:
  - Deterministic across runs with the same seed (via BaseGuesser.rng).
  - Baseline to verify the pipeline; ignores the candidate set entirely.
"""

from __future__ import annotations

from typing import List
from .base import BaseGuesser, register, unguessed


@register
class RandomLetterGuesser(BaseGuesser):
    id = "random_letter"
    name = "Random Letter"
    version = "1.0.0"

    def next_letter(self, state: dict) -> str:
        """
        Pick any unguessed letter uniformly at random (seeded RNG).

        Args:
            state: dict with keys:
                - "guessed":  letters tried so far (tuple)
                - "alphabet": letters the game accepts

        Returns:
            A single lowercase letter.
        """
        pool: List[str] = unguessed(state)
        if not pool:
            raise ValueError("every letter has already been guessed")
        return pool[self.rng.randrange(len(pool))]
