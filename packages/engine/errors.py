"""
Error types raised by the hangman manager.

All three share HangmanError so a front end can catch them together:
  - InvalidArgumentError : bad constructor parameters or a repeated guess
  - NoCandidatesError    : pattern/guess requested with an empty pool
  - NoGuessesLeftError   : guess requested after the budget reached zero
"""


class HangmanError(Exception):
    """Base class for every manager failure."""


class InvalidArgumentError(HangmanError, ValueError):
    pass


class NoCandidatesError(HangmanError, RuntimeError):
    pass


class NoGuessesLeftError(HangmanError, RuntimeError):
    pass
