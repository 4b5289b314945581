import math

import numpy as np
import pytest

from proteoplot.core import compare
from proteoplot.core.compare import bland_altman, bland_altman_axes


def test_identical_methods_have_zero_bias_and_spread() -> None:
    res = bland_altman([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])
    assert res.bias == 0.0
    assert res.sd == 0.0
    assert res.upper_loa == 0.0
    assert res.lower_loa == 0.0
    assert res.average.tolist() == [1.0, 2.0, 3.0]
    assert res.fraction_within_loa == 1.0


def test_two_pair_reference_values() -> None:
    res = bland_altman([2.0, 4.0], [0.0, 0.0])
    assert res.average.tolist() == [1.0, 2.0]
    assert res.difference.tolist() == [2.0, 4.0]
    assert res.bias == pytest.approx(3.0)
    assert res.sd == pytest.approx(math.sqrt(2.0))
    assert res.upper_loa == pytest.approx(5.772, abs=1e-3)
    assert res.lower_loa == pytest.approx(0.228, abs=1e-3)
    assert res.n_pairs == 2


def test_sample_standard_deviation_is_used() -> None:
    a = np.array([1.0, 3.0, 6.0, 10.0])
    b = np.zeros(4)
    res = bland_altman(a, b)
    assert res.sd == pytest.approx(np.std(a, ddof=1))
    assert res.sd != pytest.approx(np.std(a, ddof=0))


def test_single_pair_has_zero_sd_and_no_intervals() -> None:
    res = bland_altman([5.0], [4.0])
    assert res.bias == 1.0
    assert res.sd == 0.0
    assert res.upper_loa == res.lower_loa == 1.0
    assert all(np.isnan(res.bias_ci))


def test_confidence_intervals_use_t_quantiles() -> None:
    res = bland_altman([2.0, 4.0], [0.0, 0.0])
    t_crit = 12.706204736174707  # t(0.975, df=1)
    assert res.bias_ci[0] == pytest.approx(3.0 - t_crit, rel=1e-9)
    assert res.bias_ci[1] == pytest.approx(3.0 + t_crit, rel=1e-9)
    half = t_crit * math.sqrt(2.0) * math.sqrt(3.0 / 2.0)
    assert res.upper_loa_ci[1] - res.upper_loa == pytest.approx(half)
    assert res.lower_loa - res.lower_loa_ci[0] == pytest.approx(half)


def test_custom_multiplier() -> None:
    res = bland_altman([2.0, 4.0], [0.0, 0.0], loa_multiplier=2.0)
    assert res.upper_loa == pytest.approx(3.0 + 2.0 * math.sqrt(2.0))


def test_length_mismatch_fails_before_any_statistic(monkeypatch) -> None:
    def _no_stats(*_args, **_kwargs):
        raise AssertionError("statistics computed before validation")

    monkeypatch.setattr(compare.np, "mean", _no_stats)
    monkeypatch.setattr(compare.np, "std", _no_stats)
    with pytest.raises(ValueError, match="same length"):
        bland_altman([1.0, 2.0, 3.0], [1.0, 2.0])


@pytest.mark.parametrize(
    "a, b", [([], []), ([1.0, float("nan")], [1.0, 2.0]), (np.ones((2, 2)), np.ones((2, 2)))]
)
def test_invalid_inputs_rejected(a, b) -> None:
    with pytest.raises(ValueError):
        bland_altman(a, b)


def test_summary_is_json_friendly() -> None:
    summary = bland_altman([2.0, 4.0, 3.5], [1.0, 1.5, 2.0]).summary()
    assert summary["n_pairs"] == 3
    assert isinstance(summary["bias_ci"], list)
    assert set(summary) >= {"bias", "sd", "upper_loa", "lower_loa"}


def test_axes_cover_points_and_limits_of_agreement() -> None:
    rng = np.random.default_rng(1)
    a = 0.5 * rng.standard_normal(500)
    b = a + 0.2 * rng.standard_normal(500)
    res = bland_altman(a, b)
    axes = bland_altman_axes(res, target_x_ticks=7, target_y_ticks=6)

    assert axes.x_axis.lo <= res.average.min()
    assert axes.x_axis.hi >= res.average.max()
    y_lo, y_hi = axes.y_limits
    assert y_lo < min(res.difference.min(), res.lower_loa)
    assert y_hi > max(res.difference.max(), res.upper_loa)
    assert np.allclose(np.diff(axes.y_ticks), axes.y_ticks[1] - axes.y_ticks[0])


def test_axes_for_zero_spread_are_not_degenerate() -> None:
    res = bland_altman([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])
    axes = bland_altman_axes(res)
    y_lo, y_hi = axes.y_limits
    assert y_lo < 0.0 < y_hi
