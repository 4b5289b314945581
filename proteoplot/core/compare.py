"""Method comparison statistics: Bland-Altman agreement and mirrored histogram bins."""

from __future__ import annotations

import math

import numpy as np
from scipy import stats

from proteoplot.core.ticks import auto_limits_ticks, mirrored_count_axis, padded_limits_ticks
from proteoplot.core.types import (
    BlandAltmanAxes,
    BlandAltmanResult,
    MirroredHistogram,
    MirroredHistogramAxes,
)
from proteoplot.core.utils import finite_1d

# Bin-index slack so values sitting on an edge are not pushed down by rounding.
_EDGE_TOL = 1e-9


def paired_vectors(a, b) -> tuple[np.ndarray, np.ndarray]:
    """Validate two paired measurement vectors of equal, non-zero length."""
    x = finite_1d("a", a)
    y = finite_1d("b", b)
    if x.size != y.size:
        raise ValueError(f"a and b must have the same length (got {x.size} and {y.size}).")
    return x, y


def bland_altman(
    a,
    b,
    *,
    loa_multiplier: float = 1.96,
    confidence: float = 0.95,
) -> BlandAltmanResult:
    """Compute bias and limits of agreement for ``difference = a - b``.

    The SD of differences is the sample estimator (ddof=1); a single pair has
    SD 0. Confidence intervals use t quantiles with n-1 degrees of freedom,
    with the approximate LoA standard error ``sd * sqrt(3 / n)``; they are NaN
    for fewer than two pairs.
    """
    x, y = paired_vectors(a, b)
    if not 0.0 < float(confidence) < 1.0:
        raise ValueError("confidence must be in (0, 1).")

    n = int(x.size)
    average = (x + y) / 2.0
    difference = x - y
    bias = float(np.mean(difference))
    sd = float(np.std(difference, ddof=1)) if n > 1 else 0.0
    k = float(loa_multiplier)
    upper = bias + k * sd
    lower = bias - k * sd

    nan_pair = (float("nan"), float("nan"))
    bias_ci = upper_ci = lower_ci = nan_pair
    t_crit = float("nan")
    if n > 1:
        t_crit = float(stats.t.ppf(0.5 + float(confidence) / 2.0, df=n - 1))
        se_bias = sd / math.sqrt(n)
        se_loa = sd * math.sqrt(3.0 / n)
        bias_ci = (bias - t_crit * se_bias, bias + t_crit * se_bias)
        upper_ci = (upper - t_crit * se_loa, upper + t_crit * se_loa)
        lower_ci = (lower - t_crit * se_loa, lower + t_crit * se_loa)

    within = float(np.mean((difference >= lower) & (difference <= upper)))

    return BlandAltmanResult(
        average=average,
        difference=difference,
        bias=bias,
        sd=sd,
        upper_loa=upper,
        lower_loa=lower,
        n_pairs=n,
        loa_multiplier=k,
        bias_ci=bias_ci,
        upper_loa_ci=upper_ci,
        lower_loa_ci=lower_ci,
        fraction_within_loa=within,
        metadata={"confidence": float(confidence), "t_critical": t_crit},
    )


def bland_altman_axes(
    result: BlandAltmanResult, *, target_x_ticks: int = 7, target_y_ticks: int = 6
) -> BlandAltmanAxes:
    """Average axis from the tick heuristic; difference axis covers both LoA lines."""
    x_axis = auto_limits_ticks(
        float(np.min(result.average)), float(np.max(result.average)), target_x_ticks
    )
    y_data = np.concatenate([result.difference, [result.lower_loa, result.upper_loa]])
    y_limits, y_ticks = padded_limits_ticks(y_data, target_y_ticks)
    return BlandAltmanAxes(x_axis=x_axis, y_limits=y_limits, y_ticks=y_ticks)


def histogram_edges(lo: float, hi: float, bin_width: float) -> np.ndarray:
    """Uniform edges from ``lo`` whose last half-open bin still contains ``hi``."""
    width = float(bin_width)
    if not (math.isfinite(width) and width > 0):
        raise ValueError("bin_width must be a positive finite number.")
    n_bins = math.floor((float(hi) - float(lo)) / width + _EDGE_TOL) + 1
    return float(lo) + width * np.arange(n_bins + 1, dtype=float)


def bin_counts(values: np.ndarray, lo: float, bin_width: float, n_bins: int) -> np.ndarray:
    """Count values per half-open bin ``[lo + i*w, lo + (i+1)*w)``."""
    idx = np.floor((np.asarray(values, dtype=float) - float(lo)) / float(bin_width) + _EDGE_TOL)
    idx = np.clip(idx.astype(np.int64), 0, int(n_bins) - 1)
    return np.bincount(idx, minlength=int(n_bins)).astype(int)


def mirrored_histogram(a, b, *, bin_width: float = 0.1) -> MirroredHistogram:
    """Bin both vectors on one edge set spanning their combined range."""
    x = finite_1d("a", a)
    y = finite_1d("b", b)
    combined = np.concatenate([x, y])
    lo = float(combined.min())
    hi = float(combined.max())

    edges = histogram_edges(lo, hi, bin_width)
    n_bins = edges.size - 1
    centers = edges[:-1] + float(bin_width) / 2.0
    return MirroredHistogram(
        edges=edges,
        centers=centers,
        counts_a=bin_counts(x, lo, bin_width, n_bins),
        counts_b=bin_counts(y, lo, bin_width, n_bins),
        bin_width=float(bin_width),
    )


def mirrored_histogram_axes(
    hist: MirroredHistogram, *, target_x_ticks: int = 7, target_y_ticks: int = 6
) -> MirroredHistogramAxes:
    value_axis = auto_limits_ticks(
        float(hist.edges[0]), float(hist.edges[-1]), target_y_ticks
    )
    count_axis = mirrored_count_axis(
        float(np.max(hist.counts_a)), float(np.max(hist.counts_b)), target_x_ticks
    )
    return MirroredHistogramAxes(value_axis=value_axis, count_axis=count_axis)
