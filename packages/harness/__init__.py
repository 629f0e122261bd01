from .core import run_case, run_batch, DEFAULT_LENGTH, DEFAULT_MAX_WRONG
from .io import write_csv, write_manifest
from .stats import summarize, pretty_stats

__all__ = ["run_case", "run_batch", "DEFAULT_LENGTH", "DEFAULT_MAX_WRONG",
           "write_csv", "write_manifest", "summarize", "pretty_stats"]
