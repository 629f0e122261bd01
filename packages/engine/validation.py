"""
Lightweight guess validation for front ends.

The manager assumes it is handed one valid character; checking raw user
input is the caller's job. This helper answers "can this input be sent to
record_guess() right now?":
  - it is a string
  - after strip/lowercase it is exactly one a–z letter
  - it has not been guessed already
"""

from typing import Iterable, Optional

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def normalize_letter(text: str) -> Optional[str]:
    """Lowercased single letter, or None if `text` isn't one."""
    if not isinstance(text, str):
        return None
    t = text.strip().lower()
    if len(t) != 1 or t not in ALPHABET:
        return None
    return t


def validate_letter(text: str, guessed: Iterable[str]) -> bool:
    """Return True if `text` is a fresh single-letter guess."""
    letter = normalize_letter(text)
    return letter is not None and letter not in set(guessed)
