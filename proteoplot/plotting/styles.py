"""Shared plotting style settings for manuscript figures."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

import matplotlib
import matplotlib.pyplot as plt
import numpy as np

from proteoplot.core.types import CATEGORY_DOWN, CATEGORY_UNCHANGED, CATEGORY_UP


@dataclass(frozen=True)
class PlotStyle:
    """Centralized plotting defaults used across figures."""

    dpi: int = 300
    font_family: tuple[str, ...] = ("Verdana", "DejaVu Sans")
    tick_fontsize: float = 21.5
    tick_fontweight: str = "bold"
    label_fontsize: float = 24.0
    label_fontweight: str = "normal"
    annotation_fontsize: float = 18.0
    legend_fontsize: float = 18.0
    legend_marker_scale: float = 1.5
    frame_linewidth: float = 1.5
    figsize_ranklog: tuple[float, float] = (9.125, 5.65)
    figsize_hist: tuple[float, float] = (8.0, 6.0)
    figsize_ba: tuple[float, float] = (8.0, 6.0)
    marker_size_bg: float = 20.0
    marker_size_key: float = 70.0
    marker_size_ba: float = 12.0
    color_up: str = "#edb120"
    color_down: str = "#0072bd"
    color_unchanged: str = "#cccccc"
    color_zero_line: str = "#999999"
    color_method_a: str = "#42a547"
    color_method_b: str = "#00587d"
    color_points: str = "#0000ff"
    color_bias: str = "#0000ff"
    color_loa: str = "#ff0000"
    color_grid: str = "#b3b3b3"

    def category_color(self, category: str) -> str:
        return {
            CATEGORY_UP: self.color_up,
            CATEGORY_DOWN: self.color_down,
            CATEGORY_UNCHANGED: self.color_unchanged,
        }.get(category, "#333333")


DEFAULT_PLOT_STYLE = PlotStyle()


def apply_plot_style(style: PlotStyle = DEFAULT_PLOT_STYLE) -> None:
    """Apply matplotlib rcParams for manuscript figures."""
    plt.rcParams.update(
        {
            "figure.dpi": 100,
            "savefig.dpi": style.dpi,
            "font.family": "sans-serif",
            "font.sans-serif": list(style.font_family),
            "axes.labelsize": style.label_fontsize,
            "axes.labelweight": style.label_fontweight,
            "xtick.labelsize": style.tick_fontsize,
            "ytick.labelsize": style.tick_fontsize,
            "legend.fontsize": style.legend_fontsize,
            "axes.linewidth": style.frame_linewidth,
            "xtick.direction": "out",
            "ytick.direction": "out",
            "axes.grid": False,
            "svg.fonttype": "none",
        }
    )


def plot_style_dict(style: PlotStyle = DEFAULT_PLOT_STYLE) -> dict[str, Any]:
    """Return style + dependency versions for summary manifests."""
    d = asdict(style)
    d["font_family"] = list(style.font_family)
    d["matplotlib_version"] = str(matplotlib.__version__)
    d["numpy_version"] = str(np.__version__)
    return d
