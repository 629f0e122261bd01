# apps/cli/play.py
"""
Play evil hangman against the adversarial manager in a terminal.

The manager never picks a word up front; it dodges every guess by keeping
the largest family of words that fit what you have seen. At the end it
reveals one word from whatever is left.

Usage:
    python -m apps.cli.play --length 6 --max-wrong 8
    python -m apps.cli.play --show-count      # peek at how many words remain
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Callable

from packages.datasets import DEFAULT_DICTIONARY, load_dictionary
from packages.engine import HangmanError, HangmanManager, NoGuessesLeftError, is_complete, normalize_letter
from packages.harness import DEFAULT_MAX_WRONG

logger = logging.getLogger(__name__)


def _print_status(manager: HangmanManager, show_count: bool, out: Callable[[str], None]) -> None:
    out("")
    out(f"guesses left: {manager.guesses_left()}")
    out(f"guessed     : {' '.join(manager.guessed_letters()) or '-'}")
    out(f"word        : {manager.current_pattern()}")
    if show_count:
        out(f"words left  : {len(manager.candidate_pool())}")


def play_game(manager: HangmanManager, *, show_count: bool = False,
              ask: Callable[[str], str] = input, out: Callable[[str], None] = print) -> bool:
    """
    Drive one interactive game. Returns True if the player found the word.

    Input is read through `ask` and text written through `out` so the loop
    can be scripted.
    """
    while manager.guesses_left() > 0 and not is_complete(manager.pattern_slots):
        _print_status(manager, show_count, out)
        raw = ask("your guess? ")
        if raw.strip().lower() == "quit":
            out("Giving up.")
            break

        letter = normalize_letter(raw)
        if letter is None:
            out("Please enter a single letter a-z.")
            continue
        if letter in manager.guessed_letters():
            out(f"You already guessed '{letter}'.")
            continue

        try:
            count = manager.record_guess(letter)
        except NoGuessesLeftError:
            break
        if count == 0:
            out(f"Sorry, there are no {letter}'s")
        elif count == 1:
            out(f"Yes, there is one {letter}")
        else:
            out(f"Yes, there are {count} {letter}'s")

    answer = min(manager.candidate_pool())
    won = is_complete(manager.pattern_slots)
    out("")
    if won:
        out(f"You beat me! The word was '{answer}'.")
    else:
        out(f"Game over. The word was '{answer}'.")
    return won


def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser(description="Play evil hangman in the terminal")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY),
                    help="path to the word list (one word per line)")
    ap.add_argument("--length", type=int,
                    help="word length (default: random length present in the dictionary)")
    ap.add_argument("--max-wrong", type=int, default=DEFAULT_MAX_WRONG,
                    help="wrong guesses allowed")
    ap.add_argument("--show-count", action="store_true",
                    help="show how many words the manager is still considering")
    ap.add_argument("--seed", type=int, help="seed for picking a random length")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    dictionary = load_dictionary(args.dictionary)
    length = args.length
    if length is None:
        lengths = sorted({len(w) for w in dictionary})
        if not lengths:
            raise SystemExit(f"No words in {args.dictionary}")
        length = random.Random(args.seed).choice(lengths)

    try:
        manager = HangmanManager(dictionary, length, args.max_wrong)
        manager.current_pattern()
    except HangmanError as e:
        raise SystemExit(f"Cannot start a game: {e}") from e

    print(f"Welcome to hangman. I'm thinking of a {length}-letter word.")
    logger.info("starting game: length=%d max_wrong=%d pool=%d",
                length, args.max_wrong, len(manager.candidate_pool()))
    try:
        play_game(manager, show_count=args.show_count)
    except (EOFError, KeyboardInterrupt):
        print("\nBye!")


if __name__ == "__main__":
    main()
