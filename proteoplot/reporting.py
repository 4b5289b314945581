"""Plain-text console summaries printed after each figure is computed."""

from __future__ import annotations

from proteoplot.core.types import CATEGORIES, BlandAltmanResult, RankLogResult


def difference_caption(method_a: str, method_b: str) -> str:
    return f"Difference = {method_a} - {method_b}"


def histogram_legend_text(method_a: str, method_b: str) -> str:
    return "\n".join(
        [
            "Mirrored histogram legend:",
            f"  Left bars  (negative side) = {method_a}",
            f"  Right bars (positive side) = {method_b}",
        ]
    )


def bland_altman_text(result: BlandAltmanResult, method_a: str, method_b: str) -> str:
    lo_ci, hi_ci = result.bias_ci
    level = 100.0 * float(result.metadata.get("confidence", 0.95))
    lines = [
        "Bland-Altman interpretation:",
        f"  {difference_caption(method_a, method_b)}",
        f"  Bias: {result.bias:.2f} ({level:g}% CI {lo_ci:.2f} to {hi_ci:.2f})"
        if result.n_pairs > 1
        else f"  Bias: {result.bias:.2f}",
        f"  Limits of agreement: {result.lower_loa:.2f} to {result.upper_loa:.2f}"
        f" (bias +/- {result.loa_multiplier:g} SD, SD = {result.sd:.2f})",
        f"  Within limits: {100.0 * result.fraction_within_loa:.1f}%",
        f"  Pairs compared: {result.n_pairs} values",
    ]
    return "\n".join(lines)


def rank_log_text(result: RankLogResult) -> str:
    lines = [f"Rank-log categories ({result.n} values):"]
    width = max(len(cat) for cat in CATEGORIES)
    for cat in CATEGORIES:
        lines.append(f"  {cat:<{width}} = {result.counts.get(cat, 0)}")
    return "\n".join(lines)
