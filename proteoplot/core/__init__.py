"""Core compute subpackage (no plotting, no filesystem I/O)."""

from proteoplot.core.compare import (
    bland_altman,
    bland_altman_axes,
    mirrored_histogram,
    mirrored_histogram_axes,
    paired_vectors,
)
from proteoplot.core.ranklog import auto_categorize, compute_rank_log, validate_labels
from proteoplot.core.ticks import (
    auto_limits_ticks,
    autospace,
    mirrored_count_axis,
    nice_step,
    padded_limits_ticks,
    unit_limits_ticks,
)
from proteoplot.core.types import (
    CATEGORIES,
    CATEGORY_DOWN,
    CATEGORY_UNCHANGED,
    CATEGORY_UP,
    AxisScale,
    BlandAltmanAxes,
    BlandAltmanResult,
    ComparisonConfig,
    CountAxis,
    MirroredHistogram,
    MirroredHistogramAxes,
    RankLogConfig,
    RankLogResult,
)

__all__ = [
    "CATEGORIES",
    "CATEGORY_UP",
    "CATEGORY_DOWN",
    "CATEGORY_UNCHANGED",
    "AxisScale",
    "CountAxis",
    "RankLogConfig",
    "ComparisonConfig",
    "RankLogResult",
    "MirroredHistogram",
    "MirroredHistogramAxes",
    "BlandAltmanResult",
    "BlandAltmanAxes",
    "nice_step",
    "auto_limits_ticks",
    "autospace",
    "mirrored_count_axis",
    "padded_limits_ticks",
    "unit_limits_ticks",
    "auto_categorize",
    "validate_labels",
    "compute_rank_log",
    "paired_vectors",
    "bland_altman",
    "bland_altman_axes",
    "mirrored_histogram",
    "mirrored_histogram_axes",
]
