from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

# Small bundled word list so the CLIs run out of the box.
DEFAULT_DICTIONARY = Path(__file__).resolve().parent / "data" / "dictionary.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def is_word(token: str) -> bool:
    """True for a lowercase a–z token (the only words a–z guesses can reveal)."""
    return bool(token) and token.isascii() and token.isalpha() and token.islower()


def load_dictionary(p: Path | str = DEFAULT_DICTIONARY) -> List[str]:
    """
    Read a newline-separated word list, normalize to lowercase, and keep
    only a–z words (blanks, apostrophes, digits etc. are dropped).
    """
    words = (ln.strip().lower() for ln in read_lines(p))
    return [w for w in words if is_word(w)]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
