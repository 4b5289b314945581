"""Command-line interfaces for proteoplot figures."""

from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path
from typing import Any, Iterable

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from proteoplot._version import __version__
from proteoplot.config import (
    comparison_config_from_dict,
    load_json_config,
    plot_style_from_dict,
    rank_log_config_from_dict,
)
from proteoplot.core.compare import (
    bland_altman,
    bland_altman_axes,
    mirrored_histogram,
    mirrored_histogram_axes,
)
from proteoplot.core.ranklog import compute_rank_log
from proteoplot.datasets import demo_paired_methods, demo_rank_log
from proteoplot.io import read_paired_table, read_value_table, setup_logger, write_json
from proteoplot.plotting.compare import plot_bland_altman, plot_mirrored_histogram
from proteoplot.plotting.ranklog import plot_rank_log
from proteoplot.plotting.styles import apply_plot_style, plot_style_dict
from proteoplot.plotting.utils import export_figure, sanitize_stem
from proteoplot.reporting import bland_altman_text, histogram_legend_text, rank_log_text


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--input", default=None, help="CSV/TSV table; omit to use demo data")
    parser.add_argument("--config", default=None, help="Path to a .json figure config")
    parser.add_argument("--outdir", default=".", help="Output directory root")
    parser.add_argument(
        "--formats",
        nargs="*",
        default=None,
        help="Export formats (e.g. png svg); figures are not saved when omitted",
    )
    parser.add_argument("--dpi", type=int, default=None, help="Raster resolution override")
    parser.add_argument("--seed", type=int, default=1, help="Seed for demo data")


def _load_sections(config_path: str | None) -> dict[str, Any]:
    if config_path is None:
        return {}
    return load_json_config(config_path)


def _export(fig, outdir: Path, stem: str, args, style, logger: logging.Logger) -> list[str]:
    if not args.formats:
        plt.close(fig)
        return []
    paths = export_figure(
        fig,
        outdir / sanitize_stem(stem),
        formats=args.formats,
        style=style,
        dpi=args.dpi,
        close=True,
        logger=logger,
    )
    return [p.as_posix() for p in paths]


def ranklog_main(argv: Iterable[str] | None = None) -> int:
    """Render a rank-log figure.

    Args:
        argv: Command-line arguments (if None, uses sys.argv).

    Returns:
        Exit code (0 for success).
    """
    parser = argparse.ArgumentParser(description="Rank-log2 scatter plot")
    _add_common_args(parser)
    parser.add_argument("--value-col", default="log2_ratio", help="Column holding values")
    parser.add_argument("--label-col", default=None, help="Optional category column")
    parser.add_argument("--pvalue-col", default=None, help="Optional p-value column")
    parser.add_argument("--stem", default="rank_intensity", help="Output file stem")
    parser.add_argument("--n-demo", type=int, default=1200, help="Demo vector length")
    parser.add_argument("--x-max", type=int, default=None, help="Rank axis maximum override")
    args = parser.parse_args(list(argv) if argv is not None else None)

    outdir = Path(args.outdir)
    logger = setup_logger(outdir / "logs" / "ranklog.log", "proteoplot.ranklog")
    sections = _load_sections(args.config)
    config = rank_log_config_from_dict(sections.get("ranklog"))
    if args.x_max is not None:
        config = dataclasses.replace(config, x_max_override=int(args.x_max))
    style = plot_style_from_dict(sections.get("style"))

    labels = None
    if args.input is None:
        values, p_values = demo_rank_log(n=args.n_demo, seed=args.seed)
        logger.info("Using demo data: n=%d seed=%d", values.size, args.seed)
    else:
        values, labels, p_values = read_value_table(
            args.input,
            args.value_col,
            label_col=args.label_col,
            pvalue_col=args.pvalue_col,
            logger=logger,
        )
        logger.info("Loaded %d values from %s", values.size, args.input)

    result = compute_rank_log(values, labels=labels, p_values=p_values, config=config)
    print(rank_log_text(result))

    apply_plot_style(style)
    fig, _ = plot_rank_log(result, style=style)
    saved = _export(fig, outdir, args.stem, args, style, logger)

    write_json(
        outdir / f"{sanitize_stem(args.stem)}_summary.json",
        {
            "version": __version__,
            "n": result.n,
            "counts": result.counts,
            "config": dataclasses.asdict(config),
            "source": args.input or "demo",
            "labels_supplied": labels is not None,
            "p_values_supplied": p_values is not None,
            "figures": saved,
            "style": plot_style_dict(style),
        },
    )
    return 0


def compare_main(argv: Iterable[str] | None = None) -> int:
    """Render the mirrored histogram and Bland-Altman figures for two methods.

    Args:
        argv: Command-line arguments (if None, uses sys.argv).

    Returns:
        Exit code (0 for success).
    """
    parser = argparse.ArgumentParser(description="Method comparison plots")
    _add_common_args(parser)
    parser.add_argument("--col-a", default="method_a", help="Column for method A")
    parser.add_argument("--col-b", default="method_b", help="Column for method B")
    parser.add_argument("--name-a", default=None, help="Display name for method A")
    parser.add_argument("--name-b", default=None, help="Display name for method B")
    parser.add_argument("--bin-width", type=float, default=None, help="Histogram bin width")
    parser.add_argument("--stem-hist", default="mirrored_histogram", help="Histogram file stem")
    parser.add_argument("--stem-ba", default="bland_altman", help="Bland-Altman file stem")
    parser.add_argument("--n-demo", type=int, default=500, help="Demo pair count")
    args = parser.parse_args(list(argv) if argv is not None else None)

    outdir = Path(args.outdir)
    logger = setup_logger(outdir / "logs" / "compare.log", "proteoplot.compare")
    sections = _load_sections(args.config)
    config = comparison_config_from_dict(sections.get("compare"))
    overrides = {
        key: value
        for key, value in (
            ("method_a", args.name_a),
            ("method_b", args.name_b),
            ("bin_width", args.bin_width),
        )
        if value is not None
    }
    if overrides:
        config = dataclasses.replace(config, **overrides)
    style = plot_style_from_dict(sections.get("style"))

    if args.input is None:
        a, b = demo_paired_methods(n=args.n_demo, seed=args.seed)
        logger.info("Using demo data: n=%d seed=%d", a.size, args.seed)
    else:
        a, b = read_paired_table(args.input, args.col_a, args.col_b, logger=logger)
        logger.info("Loaded %d pairs from %s", a.size, args.input)

    ba = bland_altman(a, b, loa_multiplier=config.loa_multiplier, confidence=config.confidence)
    hist = mirrored_histogram(a, b, bin_width=config.bin_width)
    hist_axes = mirrored_histogram_axes(
        hist,
        target_x_ticks=config.target_x_ticks_hist,
        target_y_ticks=config.target_y_ticks_hist,
    )
    ba_axes = bland_altman_axes(
        ba,
        target_x_ticks=config.target_x_ticks_ba,
        target_y_ticks=config.target_y_ticks_ba,
    )

    print(histogram_legend_text(config.method_a, config.method_b))
    print()
    print(bland_altman_text(ba, config.method_a, config.method_b))

    apply_plot_style(style)
    fig_hist, _ = plot_mirrored_histogram(hist, hist_axes, style=style)
    saved = _export(fig_hist, outdir, args.stem_hist, args, style, logger)
    fig_ba, _ = plot_bland_altman(ba, ba_axes, style=style)
    saved += _export(fig_ba, outdir, args.stem_ba, args, style, logger)

    write_json(
        outdir / f"{sanitize_stem(args.stem_ba)}_summary.json",
        {
            "version": __version__,
            "method_a": config.method_a,
            "method_b": config.method_b,
            "source": args.input or "demo",
            "bland_altman": ba.summary(),
            "histogram": {
                "bin_width": hist.bin_width,
                "n_bins": hist.n_bins,
                "edges": hist.edges.tolist(),
                "counts_a": hist.counts_a.tolist(),
                "counts_b": hist.counts_b.tolist(),
            },
            "config": dataclasses.asdict(config),
            "figures": saved,
        },
    )
    return 0


def main(argv: Iterable[str] | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (if None, uses sys.argv).

    Returns:
        Exit code.
    """
    parser = argparse.ArgumentParser(description="proteoplot CLI")
    parser.add_argument("--version", action="version", version=f"proteoplot {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("ranklog", help="Rank-log2 scatter plot", add_help=False)
    sub.add_parser("compare", help="Mirrored histogram and Bland-Altman plots", add_help=False)

    args, remainder = parser.parse_known_args(list(argv) if argv is not None else None)
    if args.command == "ranklog":
        return ranklog_main(remainder)
    if args.command == "compare":
        return compare_main(remainder)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
