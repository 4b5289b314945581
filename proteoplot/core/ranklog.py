"""Rank-log computation: categorisation, descending sort and axis layout."""

from __future__ import annotations

import numpy as np

from proteoplot.core.ticks import autospace, unit_limits_ticks
from proteoplot.core.types import (
    CATEGORIES,
    CATEGORY_DOWN,
    CATEGORY_UNCHANGED,
    CATEGORY_UP,
    RankLogConfig,
    RankLogResult,
)
from proteoplot.core.utils import finite_1d


def validate_labels(labels, n: int) -> np.ndarray:
    """Check caller-supplied categories against the data length and category set."""
    arr = np.asarray(labels, dtype=object).ravel()
    if arr.size != int(n):
        raise ValueError(
            f"labels must be the same length as values (got {arr.size} labels for {int(n)} values)."
        )
    out = np.array([str(v) for v in arr], dtype=object)
    unknown = sorted(set(out.tolist()) - set(CATEGORIES))
    if unknown:
        raise ValueError(f"Unknown category labels {unknown}; expected one of {list(CATEGORIES)}.")
    return out


def auto_categorize(
    values,
    *,
    fc_threshold: float = RankLogConfig.fc_threshold,
    p_values=None,
    p_threshold: float = RankLogConfig.p_threshold,
) -> np.ndarray:
    """Label each value Upregulated, Down-regulated or Unchanged.

    A value is significant when its p-value is below ``p_threshold``. Without
    p-values every value counts as significant, so only the fold-change
    threshold applies.
    """
    y = finite_1d("values", values)
    if p_values is None:
        significant = np.ones(y.size, dtype=bool)
    else:
        p = np.asarray(p_values, dtype=float).ravel()
        if p.size != y.size:
            raise ValueError(
                f"p_values must be the same length as values (got {p.size} for {y.size})."
            )
        significant = p < float(p_threshold)

    t = float(fc_threshold)
    labels = np.full(y.size, CATEGORY_UNCHANGED, dtype=object)
    labels[(y >= t) & significant] = CATEGORY_UP
    labels[(y <= -t) & significant] = CATEGORY_DOWN
    return labels


def category_counts(labels) -> dict[str, int]:
    arr = np.asarray(labels, dtype=object)
    return {cat: int(np.sum(arr == cat)) for cat in CATEGORIES}


def compute_rank_log(
    values,
    *,
    labels=None,
    p_values=None,
    config: RankLogConfig = RankLogConfig(),
) -> RankLogResult:
    """Label, sort descending and lay out axes for a rank-log plot (no plotting)."""
    y = finite_1d("values", values)
    if labels is not None:
        cats = validate_labels(labels, y.size)
    else:
        cats = auto_categorize(
            y,
            fc_threshold=config.fc_threshold,
            p_values=p_values,
            p_threshold=config.p_threshold,
        )

    # Stable so ties keep input order.
    order = np.argsort(-y, kind="mergesort")
    sorted_y = y[order]
    sorted_cats = cats[order]
    ranks = np.arange(1, y.size + 1, dtype=int)

    x_max = float(y.size if config.x_max_override is None else config.x_max_override)
    y_limits, y_ticks = unit_limits_ticks(sorted_y, pad=config.y_pad)

    return RankLogResult(
        values=sorted_y,
        labels=sorted_cats,
        ranks=ranks,
        order=order,
        counts=category_counts(sorted_cats),
        x_max=x_max,
        x_ticks=autospace(0.0, x_max),
        y_limits=y_limits,
        y_ticks=y_ticks,
    )
