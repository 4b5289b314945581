"""Unified plotting API for proteoplot figures."""

from proteoplot.plotting.compare import plot_bland_altman, plot_mirrored_histogram
from proteoplot.plotting.ranklog import compute_and_plot_rank_log, plot_rank_log
from proteoplot.plotting.styles import (
    DEFAULT_PLOT_STYLE,
    PlotStyle,
    apply_plot_style,
    plot_style_dict,
)
from proteoplot.plotting.utils import (
    EXPORT_FORMATS,
    draw_top_right_frame,
    export_figure,
    sanitize_stem,
    style_axes,
)

__all__ = [
    "PlotStyle",
    "DEFAULT_PLOT_STYLE",
    "apply_plot_style",
    "plot_style_dict",
    "EXPORT_FORMATS",
    "export_figure",
    "sanitize_stem",
    "style_axes",
    "draw_top_right_frame",
    "plot_rank_log",
    "compute_and_plot_rank_log",
    "plot_mirrored_histogram",
    "plot_bland_altman",
]
