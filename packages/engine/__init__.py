from .errors import HangmanError, InvalidArgumentError, NoCandidatesError, NoGuessesLeftError
from .patterns import Pattern, blank_pattern, render_pattern, is_complete
from .families import partition, largest_family
from .manager import GameState, HangmanManager
from .constraints import filter_candidates
from .validation import ALPHABET, normalize_letter, validate_letter

__all__ = [
    "HangmanError", "InvalidArgumentError", "NoCandidatesError", "NoGuessesLeftError",
    "Pattern", "blank_pattern", "render_pattern", "is_complete",
    "partition", "largest_family",
    "GameState", "HangmanManager",
    "filter_candidates",
    "ALPHABET", "normalize_letter", "validate_letter",
]
