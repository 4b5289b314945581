"""Rank-log figure bound to `RankLogResult` objects."""

from __future__ import annotations

import math

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D

from proteoplot.core.ranklog import compute_rank_log
from proteoplot.core.types import (
    CATEGORY_DOWN,
    CATEGORY_UNCHANGED,
    CATEGORY_UP,
    RankLogConfig,
    RankLogResult,
)
from proteoplot.plotting.styles import DEFAULT_PLOT_STYLE, PlotStyle
from proteoplot.plotting.utils import draw_top_right_frame, style_axes

# Background first so key categories draw on top.
DRAW_ORDER = (CATEGORY_UNCHANGED, CATEGORY_DOWN, CATEGORY_UP)
LEGEND_ORDER = (CATEGORY_DOWN, CATEGORY_UNCHANGED, CATEGORY_UP)


def _legend_handles(style: PlotStyle) -> list[Line2D]:
    size = math.sqrt(style.marker_size_key) * style.legend_marker_scale
    return [
        Line2D(
            [],
            [],
            linestyle="none",
            marker="o",
            markersize=size,
            markerfacecolor=style.category_color(cat),
            markeredgecolor="black",
            label=cat,
        )
        for cat in LEGEND_ORDER
    ]


def plot_rank_log(
    result: RankLogResult,
    *,
    ax: plt.Axes | None = None,
    style: PlotStyle = DEFAULT_PLOT_STYLE,
    xlabel: str = "Rank",
    ylabel: str = r"Log$_2$ ratio",
    legend: bool = True,
) -> tuple[plt.Figure, plt.Axes]:
    """Plot a rank-log scatter from a precomputed `RankLogResult` (no recomputation)."""
    if ax is None:
        fig, ax = plt.subplots(figsize=style.figsize_ranklog)
    else:
        fig = ax.figure

    ax.axhline(
        0.0,
        color=style.color_zero_line,
        linestyle="--",
        linewidth=1.5,
        zorder=1,
    )
    for cat in DRAW_ORDER:
        mask = result.mask(cat)
        if not mask.any():
            continue
        key = cat != CATEGORY_UNCHANGED
        ax.scatter(
            result.ranks[mask],
            result.values[mask],
            s=style.marker_size_key if key else style.marker_size_bg,
            color=style.category_color(cat),
            edgecolors="black" if key else "none",
            linewidths=0.5 if key else 0.0,
            zorder=3 if key else 2,
        )

    ax.set_xticks(result.x_ticks)
    if result.y_ticks.size:
        ax.set_yticks(result.y_ticks)
    ax.set_xlim(0.0, result.x_max)
    ax.set_ylim(*result.y_limits)
    ax.set_facecolor("none")
    style_axes(ax, style)
    draw_top_right_frame(ax, style)

    ax.set_xlabel(xlabel, fontsize=style.label_fontsize, fontweight=style.label_fontweight)
    ax.set_ylabel(ylabel, fontsize=style.label_fontsize, fontweight=style.label_fontweight)

    if legend:
        leg = ax.legend(
            handles=_legend_handles(style),
            loc="upper center",
            bbox_to_anchor=(0.5, -0.22),
            ncol=len(LEGEND_ORDER),
            fontsize=style.legend_fontsize,
            frameon=True,
            fancybox=False,
            edgecolor="black",
        )
        leg.get_frame().set_linewidth(style.frame_linewidth)

    fig.tight_layout()
    return fig, ax


def compute_and_plot_rank_log(
    values,
    *,
    labels=None,
    p_values=None,
    config: RankLogConfig = RankLogConfig(),
    style: PlotStyle = DEFAULT_PLOT_STYLE,
) -> tuple[RankLogResult, plt.Figure, plt.Axes]:
    """Convenience wrapper used by the CLI."""
    result = compute_rank_log(values, labels=labels, p_values=p_values, config=config)
    fig, ax = plot_rank_log(result, style=style)
    return result, fig, ax
