"""Method comparison figure factories: mirrored histogram and Bland-Altman."""

from __future__ import annotations

import matplotlib.pyplot as plt

from proteoplot.core.types import (
    BlandAltmanAxes,
    BlandAltmanResult,
    MirroredHistogram,
    MirroredHistogramAxes,
)
from proteoplot.plotting.styles import DEFAULT_PLOT_STYLE, PlotStyle
from proteoplot.plotting.utils import draw_top_right_frame, style_axes


def plot_mirrored_histogram(
    hist: MirroredHistogram,
    axes: MirroredHistogramAxes,
    *,
    ax: plt.Axes | None = None,
    style: PlotStyle = DEFAULT_PLOT_STYLE,
    xlabel: str = "Frequency",
    ylabel: str = r"Log$_2$ fold change",
) -> tuple[plt.Figure, plt.Axes]:
    """Method A counts to the left of zero, method B counts to the right."""
    if ax is None:
        fig, ax = plt.subplots(figsize=style.figsize_hist)
    else:
        fig = ax.figure

    bar_kwargs = {"height": hist.bin_width, "edgecolor": "black", "linewidth": 0.8}
    ax.barh(hist.centers, hist.signed_counts_a, color=style.color_method_a, **bar_kwargs)
    ax.barh(hist.centers, hist.counts_b, color=style.color_method_b, **bar_kwargs)

    count_axis = axes.count_axis
    ax.set_xticks(count_axis.ticks)
    ax.set_xticklabels(count_axis.tick_labels)
    ax.set_xlim(*count_axis.limits)
    ax.set_yticks(axes.value_axis.ticks)
    ax.set_ylim(*axes.value_axis.limits)
    ax.axvline(0.0, color="black", linewidth=style.frame_linewidth)

    style_axes(ax, style)
    draw_top_right_frame(ax, style)
    ax.set_xlabel(xlabel, fontsize=style.label_fontsize, fontweight=style.label_fontweight)
    ax.set_ylabel(ylabel, fontsize=style.label_fontsize, fontweight=style.label_fontweight)
    fig.tight_layout()
    return fig, ax


def plot_bland_altman(
    result: BlandAltmanResult,
    axes: BlandAltmanAxes,
    *,
    ax: plt.Axes | None = None,
    style: PlotStyle = DEFAULT_PLOT_STYLE,
    xlabel: str = r"Log$_2$ ratio average",
    ylabel: str = r"Log$_2$ ratio difference",
) -> tuple[plt.Figure, plt.Axes]:
    """Difference vs average with bias and limits-of-agreement lines."""
    if ax is None:
        fig, ax = plt.subplots(figsize=style.figsize_ba)
    else:
        fig = ax.figure

    ax.scatter(
        result.average,
        result.difference,
        s=style.marker_size_ba,
        color=style.color_points,
        alpha=0.6,
        linewidths=0.0,
        clip_on=False,
        zorder=3,
    )

    x0, x1 = axes.x_axis.limits
    ax.set_xticks(axes.x_axis.ticks)
    ax.set_yticks(axes.y_ticks)
    ax.set_xlim(x0, x1)
    ax.set_ylim(*axes.y_limits)
    ax.grid(True, color=style.color_grid, alpha=0.5)

    lines = (
        (result.bias, style.color_bias, f"Bias: {result.bias:.2f}", "bottom"),
        (result.upper_loa, style.color_loa, f"Upper LoA: {result.upper_loa:.2f}", "bottom"),
        (result.lower_loa, style.color_loa, f"Lower LoA: {result.lower_loa:.2f}", "top"),
    )
    for y, color, text, va in lines:
        ax.plot([x0, x1], [y, y], linestyle="-.", color=color, linewidth=2.0, zorder=4)
        ax.text(
            x1 - 0.015 * (x1 - x0),
            y,
            text,
            ha="right",
            va=va,
            fontsize=style.annotation_fontsize,
            fontweight="bold",
            color=color,
        )

    style_axes(ax, style)
    draw_top_right_frame(ax, style)
    ax.set_xlabel(xlabel, fontsize=style.label_fontsize, fontweight=style.label_fontweight)
    ax.set_ylabel(ylabel, fontsize=style.label_fontsize, fontweight=style.label_fontweight)
    fig.tight_layout()
    return fig, ax
