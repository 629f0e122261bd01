"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "- a - " as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "- a - " -> "'- a - "
    """
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      guesser, length, max_wrong, answer, success, guesses, wrong, time_ms,
      final_pool, final_pattern, letters, occurrences, pool_sizes

    `letters` is the guess order as one string ("eai..."), `occurrences` and
    `pool_sizes` are space-separated integers aligned with it (pool_sizes has
    one extra leading entry: the starting pool).

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["guesser", "length", "max_wrong", "answer", "success", "guesses",
              "wrong", "time_ms", "final_pool", "final_pattern", "letters",
              "occurrences", "pool_sizes"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            hist = r.get("history", [])
            sizes = r.get("pool_sizes", [])
            w.writerow({
                "guesser": r.get("guesser_id", "?"),
                "length": r["length"],
                "max_wrong": r["max_wrong"],
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "wrong": r["wrong"],
                "time_ms": round(float(r["time_ms"]), 3),
                "final_pool": sizes[-1] if sizes else "",
                "final_pattern": _excel_safe_pattern(r.get("final_pattern", "")),
                "letters": "".join(letter for letter, _, _ in hist),
                "occurrences": " ".join(str(n) for _, n, _ in hist),
                "pool_sizes": " ".join(str(n) for n in sizes),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (guesser, lengths, max_wrong, dictionary, seed, outdir)
      - dictionary: output of datasets.validate_dictionary(...)
      - summary: output of harness.stats.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
