"""
Batch summaries.

summarize() turns a list of run_case() results into a flat dict of
headline numbers for the console and the run manifest.
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np


def summarize(results: List[Dict]) -> Dict:
    """
    Keys:
      games, wins, win_rate,
      guesses_mean, guesses_median, guesses_p90,
      wrong_mean, final_pool_mean
    All zero for an empty batch.
    """
    if not results:
        return {
            "games": 0, "wins": 0, "win_rate": 0.0,
            "guesses_mean": 0.0, "guesses_median": 0.0, "guesses_p90": 0.0,
            "wrong_mean": 0.0, "final_pool_mean": 0.0,
        }

    success = np.array([bool(r["success"]) for r in results])
    guesses = np.array([r["guesses"] for r in results], dtype=float)
    wrong = np.array([r["wrong"] for r in results], dtype=float)
    final_pool = np.array([r["pool_sizes"][-1] for r in results], dtype=float)

    return {
        "games": int(success.size),
        "wins": int(success.sum()),
        "win_rate": float(success.mean()),
        "guesses_mean": float(guesses.mean()),
        "guesses_median": float(np.median(guesses)),
        "guesses_p90": float(np.percentile(guesses, 90)),
        "wrong_mean": float(wrong.mean()),
        "final_pool_mean": float(final_pool.mean()),
    }


def pretty_stats(stats: Dict) -> str:
    """One-liner, e.g. 'games=20 | win_rate=15.0% | guesses mean=9.40 ...'."""
    return (
        f"games={stats['games']} | win_rate={100.0 * stats['win_rate']:.1f}% "
        f"| guesses mean={stats['guesses_mean']:.2f} median={stats['guesses_median']:.1f} "
        f"p90={stats['guesses_p90']:.1f} | wrong mean={stats['wrong_mean']:.2f} "
        f"| final pool mean={stats['final_pool_mean']:.1f}"
    )
