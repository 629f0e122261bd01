from __future__ import annotations
import random
from typing import Dict, List, Type

from packages.engine import ALPHABET

# ---- Global guesser registry ----
REGISTRY: Dict[str, Type["BaseGuesser"]] = {}


def register(cls: Type["BaseGuesser"]) -> Type["BaseGuesser"]:
    """
    Decorator: @register on a guesser class adds it to REGISTRY by its `id`.
    """
    gid = getattr(cls, "id", None)
    if not gid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if gid in REGISTRY:
        raise ValueError(f"Duplicate guesser id: {gid}")
    REGISTRY[gid] = cls
    return cls


def unguessed(state: dict) -> List[str]:
    """Alphabet letters not tried yet, in alphabet order."""
    guessed = set(state["guessed"])
    return [ch for ch in state.get("alphabet", ALPHABET) if ch not in guessed]


# ---- Base class that guessers inherit ----
class BaseGuesser:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.length: int = 5
        self.dictionary: List[str] = []
        self.rng = random.Random()

    def reset(self, *, dictionary: List[str], length: int,
              seed: int | None = None) -> None:
        self.length = int(length)
        self.dictionary = [w for w in dictionary if len(w) == self.length]
        if seed is not None:
            self.rng.seed(seed)

    def next_letter(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
