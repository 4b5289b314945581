import numpy as np
import pytest

from proteoplot.core.compare import histogram_edges, mirrored_histogram, mirrored_histogram_axes


def test_shared_edges_keep_vectors_apart() -> None:
    hist = mirrored_histogram([0.05, 0.15], [0.25], bin_width=0.1)
    assert hist.counts_a.shape == hist.counts_b.shape
    assert hist.counts_a.tolist() == [1, 1, 0]
    assert hist.counts_b.tolist() == [0, 0, 1]
    assert np.allclose(hist.centers, [0.1, 0.2, 0.3])
    # bin holding 0.05
    assert (hist.counts_a[0], hist.counts_b[0]) == (1, 0)
    # bin holding 0.25
    assert (hist.counts_a[-1], hist.counts_b[-1]) == (0, 1)


def test_edges_cover_observed_range() -> None:
    rng = np.random.default_rng(3)
    a = rng.normal(size=300)
    b = rng.normal(loc=0.4, size=200)
    hist = mirrored_histogram(a, b, bin_width=0.25)
    combined = np.concatenate([a, b])
    assert hist.edges[0] == combined.min()
    assert hist.edges[-1] > combined.max()
    assert np.allclose(np.diff(hist.edges), 0.25)
    assert hist.counts_a.sum() == a.size
    assert hist.counts_b.sum() == b.size
    assert hist.n_bins == hist.edges.size - 1


def test_signed_counts_flip_left_side() -> None:
    hist = mirrored_histogram([0.0, 0.0, 0.3], [0.3], bin_width=0.1)
    assert hist.signed_counts_a.tolist() == [-c for c in hist.counts_a.tolist()]
    assert np.all(hist.counts_b >= 0)


def test_constant_input_has_one_bin() -> None:
    hist = mirrored_histogram([2.0, 2.0], [2.0], bin_width=0.1)
    assert hist.n_bins == 1
    assert hist.counts_a.tolist() == [2]
    assert hist.counts_b.tolist() == [1]


@pytest.mark.parametrize("width", [0.0, -1.0, float("nan")])
def test_invalid_bin_width(width) -> None:
    with pytest.raises(ValueError, match="bin_width"):
        histogram_edges(0.0, 1.0, width)


def test_axes_cover_bars() -> None:
    hist = mirrored_histogram([0.05, 0.15, 0.15], [0.25, 0.25, 0.25, 0.25], bin_width=0.1)
    axes = mirrored_histogram_axes(hist, target_x_ticks=7, target_y_ticks=6)
    assert axes.value_axis.lo <= hist.edges[0]
    assert axes.value_axis.hi >= hist.edges[-1] - 1e-12
    assert axes.count_axis.left >= hist.counts_a.max()
    assert axes.count_axis.right >= hist.counts_b.max()
