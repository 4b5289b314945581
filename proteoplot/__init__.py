"""proteoplot public API."""

from proteoplot._version import __version__
from proteoplot.core.compare import (
    bland_altman,
    bland_altman_axes,
    mirrored_histogram,
    mirrored_histogram_axes,
)
from proteoplot.core.ranklog import auto_categorize, compute_rank_log
from proteoplot.core.ticks import auto_limits_ticks, nice_step
from proteoplot.core.types import ComparisonConfig, RankLogConfig


def run_cli(*args, **kwargs):
    """Lazy wrapper to avoid selecting a matplotlib backend at import time."""
    from proteoplot.cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "__version__",
    "RankLogConfig",
    "ComparisonConfig",
    "nice_step",
    "auto_limits_ticks",
    "auto_categorize",
    "compute_rank_log",
    "bland_altman",
    "bland_altman_axes",
    "mirrored_histogram",
    "mirrored_histogram_axes",
    "run_cli",
]
