import matplotlib

matplotlib.use("Agg")

import logging

import matplotlib.pyplot as plt
import numpy as np
import pytest

from proteoplot.core.compare import (
    bland_altman,
    bland_altman_axes,
    mirrored_histogram,
    mirrored_histogram_axes,
)
from proteoplot.core.ranklog import compute_rank_log
from proteoplot.datasets import demo_paired_methods, demo_rank_log
from proteoplot.plotting import ranklog as ranklog_plotting
from proteoplot.plotting.compare import plot_bland_altman, plot_mirrored_histogram
from proteoplot.plotting.ranklog import plot_rank_log
from proteoplot.plotting.utils import export_figure, sanitize_stem


def test_rank_log_plot_does_not_recompute(monkeypatch) -> None:
    values, p_values = demo_rank_log(n=300, seed=0)
    result = compute_rank_log(values, p_values=p_values)

    def _no_recompute(*_args, **_kwargs):
        raise AssertionError("plot_rank_log should not recompute categories")

    monkeypatch.setattr(ranklog_plotting, "compute_rank_log", _no_recompute)

    fig, ax = plot_rank_log(result)
    assert ax.get_xlim() == pytest.approx((0.0, 300.0))
    assert ax.get_ylim() == pytest.approx(result.y_limits)
    assert ax.get_legend() is not None
    assert [t.get_text() for t in ax.get_legend().get_texts()] == [
        "Down-regulated",
        "Unchanged",
        "Upregulated",
    ]
    plt.close(fig)


def test_comparison_plots_use_precomputed_axes() -> None:
    a, b = demo_paired_methods(n=200, seed=2)
    hist = mirrored_histogram(a, b, bin_width=0.1)
    hist_axes = mirrored_histogram_axes(hist)
    fig_h, ax_h = plot_mirrored_histogram(hist, hist_axes)
    assert ax_h.get_xlim() == pytest.approx(hist_axes.count_axis.limits)
    assert ax_h.get_ylim() == pytest.approx(hist_axes.value_axis.limits)
    assert [t.get_text() for t in ax_h.get_xticklabels()] == hist_axes.count_axis.tick_labels
    plt.close(fig_h)

    ba = bland_altman(a, b)
    ba_axes = bland_altman_axes(ba)
    fig_b, ax_b = plot_bland_altman(ba, ba_axes)
    assert ax_b.get_xlim() == pytest.approx(ba_axes.x_axis.limits)
    assert ax_b.get_ylim() == pytest.approx(ba_axes.y_limits)
    texts = [t.get_text() for t in ax_b.texts]
    assert f"Bias: {ba.bias:.2f}" in texts
    assert any(t.startswith("Upper LoA") for t in texts)
    plt.close(fig_b)


def test_export_figure_writes_each_format(tmp_path, caplog) -> None:
    caplog.set_level(logging.INFO)
    fig, ax = plt.subplots()
    ax.plot([0, 1], [0, 1])
    paths = export_figure(
        fig,
        tmp_path / "figs" / "demo.png",
        formats=("png", "svg"),
        dpi=50,
        close=True,
        logger=logging.getLogger("test"),
    )
    assert [p.name for p in paths] == ["demo.png", "demo.svg"]
    assert all(p.exists() and p.stat().st_size > 0 for p in paths)
    assert "Saved PNG" in caplog.text
    assert "Saved SVG" in caplog.text


def test_sanitize_stem() -> None:
    assert sanitize_stem("rank intensity/v2") == "rank_intensity_v2"
    assert sanitize_stem("***") == "figure"


def test_demo_data_is_seeded() -> None:
    v1, p1 = demo_rank_log(n=50, seed=7)
    v2, p2 = demo_rank_log(n=50, seed=7)
    assert np.array_equal(v1, v2)
    assert np.array_equal(p1, p2)
    assert np.all((p1 >= 0.0) & (p1 < 0.5))
    a, b = demo_paired_methods(n=10, seed=7)
    assert a.shape == b.shape == (10,)
