"""Shared plotting utilities used by figure factories."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import matplotlib.figure
import matplotlib.pyplot as plt

from proteoplot.plotting.styles import DEFAULT_PLOT_STYLE, PlotStyle

EXPORT_FORMATS: tuple[str, ...] = ("png", "svg")


def sanitize_stem(label: str, max_len: int = 64) -> str:
    """Create deterministic filesystem-safe stems for figure names."""
    clean = "".join(ch if (ch.isalnum() or ch in "_-") else "_" for ch in str(label))
    clean = clean.strip("_") or "figure"
    return clean[:max_len]


def style_axes(ax: plt.Axes, style: PlotStyle = DEFAULT_PLOT_STYLE) -> None:
    """Outward ticks, bold tick labels and an open (left/bottom) frame."""
    ax.tick_params(
        axis="both",
        direction="out",
        width=style.frame_linewidth,
        labelsize=style.tick_fontsize,
    )
    for label in ax.get_xticklabels() + ax.get_yticklabels():
        label.set_fontweight(style.tick_fontweight)
    for side in ("left", "bottom"):
        ax.spines[side].set_linewidth(style.frame_linewidth)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)


def draw_top_right_frame(ax: plt.Axes, style: PlotStyle = DEFAULT_PLOT_STYLE) -> None:
    """Close the frame with top/right lines at the current axis limits."""
    x0, x1 = ax.get_xlim()
    y0, y1 = ax.get_ylim()
    kwargs = {"color": "black", "linewidth": style.frame_linewidth, "clip_on": False}
    ax.plot([x0, x1], [y1, y1], **kwargs)
    ax.plot([x1, x1], [y0, y1], **kwargs)
    ax.set_xlim(x0, x1)
    ax.set_ylim(y0, y1)


def export_figure(
    fig: matplotlib.figure.Figure,
    out_base: str | Path,
    *,
    formats: Sequence[str] = EXPORT_FORMATS,
    style: PlotStyle = DEFAULT_PLOT_STYLE,
    dpi: int | None = None,
    transparent: bool = True,
    close: bool = False,
    logger: logging.Logger | None = None,
) -> list[Path]:
    """Save one file per format from an extensionless base path."""
    base = Path(out_base)
    if base.suffix.lower().lstrip(".") in {f.lower() for f in formats}:
        base = base.with_suffix("")
    base.parent.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for fmt in formats:
        ext = str(fmt).lower().lstrip(".")
        target = base.with_suffix(f".{ext}")
        save_kwargs: dict[str, object] = {
            "transparent": transparent,
            "bbox_inches": "tight",
            "pad_inches": 0.05,
        }
        if ext == "png":
            save_kwargs["dpi"] = int(dpi if dpi is not None else style.dpi)
        fig.savefig(target, format=ext, **save_kwargs)
        if logger is not None:
            logger.info("Saved %s to %s", ext.upper(), target.resolve().as_posix())
        written.append(target)
    if close:
        plt.close(fig)
    return written
