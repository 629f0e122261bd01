# apps/cli/run.py
"""
CLI entry point for running evil hangman experiments.

This script:
  1) Validates the dictionary (prints counts + SHA, checks requested lengths).
  2) Loads the dictionary and instantiates the requested guesser.
  3) Plays a batch of games against the adversarial manager with a live
     progress indicator and writes:
       - CSV:  per-game results + guess/occurrence/pool-size history
       - JSON: manifest with config, dictionary hash, summary, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

import numpy as np
from tqdm import tqdm

from packages.datasets import DEFAULT_DICTIONARY, load_dictionary, pretty_summary, validate_dictionary
from packages.guessers import create_guesser, get_guesser_ids
from packages.harness import DEFAULT_MAX_WRONG, run_case, summarize, pretty_stats
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

logger = logging.getLogger(__name__)


def _choose_lengths(args, available: set[int]) -> list[int]:
    """
    Expand --lengths x --games into the per-game length list. With --games,
    lengths are drawn with a seeded numpy RNG so runs are reproducible.
    """
    lengths = [n for n in args.lengths if n in available]
    if not lengths:
        raise SystemExit(f"No dictionary words for any of lengths {args.lengths}")
    if args.games is None:
        return lengths
    rng = np.random.default_rng(args.seed)
    return [int(n) for n in rng.choice(lengths, size=args.games, replace=True)]


def main(argv: list[str] | None = None):
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    guesser_choices = ", ".join(get_guesser_ids())

    ap = argparse.ArgumentParser(description="evil hangman: run guesser experiments")
    ap.add_argument("--guesser", default="letter_freq",
                    help=f"guesser id (one of: {guesser_choices})")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY),
                    help="path to the word list (one word per line)")
    ap.add_argument("--lengths", type=int, nargs="+", default=[4, 5, 6, 7],
                    help="word lengths to play")
    ap.add_argument("--games", type=int,
                    help="number of games; lengths are sampled from --lengths (default: one per length)")
    ap.add_argument("--max-wrong", type=int, default=DEFAULT_MAX_WRONG,
                    help="wrong guesses allowed per game")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    if args.max_wrong < 0:
        ap.error(f"--max-wrong must be at least 0; got {args.max_wrong}")

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate the dictionary and print a one-liner summary
    rep = validate_dictionary(args.dictionary, lengths=args.lengths)
    print(pretty_summary(rep))
    if not rep["exists"] or rep["count"] == 0:
        raise SystemExit("Dictionary is unusable: " + "; ".join(rep["issues"]))

    # 2) Load into memory (lowercased, no blanks)
    dictionary = load_dictionary(args.dictionary)

    # 3) Instantiate guesser by id
    try:
        guesser = create_guesser(args.guesser)
    except ValueError as e:
        raise SystemExit(str(e)) from e

    # 4) Choose cases
    cases = _choose_lengths(args, {len(w) for w in dictionary})
    total = len(cases)

    # 5) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Playing", unit="game") if mode == "bar" else cases

    # 6) Run batch with live progress
    for idx, n in enumerate(iterator, 1):
        per_seed = args.seed + idx * 1013904223  # LCG-ish stride to avoid collisions
        r = run_case(guesser, dictionary=dictionary, length=n,
                     max_wrong=args.max_wrong, seed=per_seed)
        r["guesser_id"] = guesser.id  # stamp id for downstream tools
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    stats = summarize(results)
    print(pretty_stats(stats))

    # 7) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_cases": len(results),
        "guesser_id": guesser.id,
        "summary": stats,
    }
    write_manifest(manifest, str(manifest_path))
    logger.info("batch done: %d games in %.1fs", total, time.time() - start)

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
