"""
Dictionary validator for evil hangman.

What this module does:
- Validate a dictionary file (one word per line) before a game or batch run.
- Enforce formatting rules (lowercase a–z only, one token per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Count words per length and check every requested length has words.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("packages/datasets/data/dictionary.txt", lengths=[5, 7])
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple
import hashlib

from .io import is_word


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class DictionaryReport:
    """Validation result for one dictionary file."""
    path: str                     # file path (as given)
    exists: bool                  # did the file exist on disk?
    count: int                    # number of VALID words after cleaning
    sha256: str                   # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int             # unique valid words (after dedupe)
    invalid_lines: int            # number of invalid lines encountered
    by_length: Dict[int, int]     # unique valid words per word length
    lengths_checked: List[int]    # lengths the caller asked about
    passed: bool
    issues: List[str]             # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if is_word(w):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(path: str, lengths: Optional[Iterable[int]] = None) -> Dict:
    """
    Validate a dictionary file, optionally for specific word lengths.

    Parameters
    ----------
    path : str
        Path to the word list (one word per line).
    lengths : iterable of int, optional
        Word lengths that must have at least one word (e.g. the lengths a
        batch run will play).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport schema) with:
          - counts, SHA-256, duplicate/invalid flags, per-length counts
          - `passed` boolean (file exists, has words, every length covered)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []
    wanted = sorted(set(lengths or []))
    p = Path(path)

    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
        rep = DictionaryReport(path, False, 0, "", 0, 0, {}, wanted, False, issues)
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = set(words)
    by_length = dict(sorted(Counter(len(w) for w in unique).items()))

    if not words:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        # load_dictionary() lowercases and drops non a–z tokens; report but don't fail.
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("dictionary contains duplicate lines")

    missing = [n for n in wanted if by_length.get(n, 0) == 0]
    if missing:
        issues.append(f"no words of length {missing}")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        by_length=by_length,
        lengths_checked=wanted,
        passed=bool(words) and not missing,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        dictionary=480 (uniq=480, invalid=0, sha=abc123...) | lengths=[5, 7] covered | OK
    """
    sha = (report.get("sha256") or "")[:12]
    status = "OK" if report["passed"] else "FAIL"
    checked = report.get("lengths_checked") or []
    by_length = report.get("by_length") or {}
    coverage = ", ".join(f"{n}:{by_length.get(n, 0)}" for n in checked) or "any"
    return (
        f"dictionary={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) "
        f"| lengths {coverage} | {status}"
    )
