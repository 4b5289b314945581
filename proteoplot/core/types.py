"""Typed configuration and result containers for proteoplot core operations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

CATEGORY_UP = "Upregulated"
CATEGORY_DOWN = "Down-regulated"
CATEGORY_UNCHANGED = "Unchanged"
CATEGORIES = (CATEGORY_UP, CATEGORY_DOWN, CATEGORY_UNCHANGED)


@dataclass(frozen=True)
class AxisScale:
    """Axis bounds aligned to a tick step."""

    lo: float
    hi: float
    step: float

    @property
    def limits(self) -> tuple[float, float]:
        return (float(self.lo), float(self.hi))

    @property
    def ticks(self) -> np.ndarray:
        n = int(round((self.hi - self.lo) / self.step))
        return self.lo + self.step * np.arange(n + 1, dtype=float)


@dataclass(frozen=True)
class CountAxis:
    """Mirrored count axis; left extent is drawn on the negative side."""

    left: float
    right: float
    step: float

    @property
    def limits(self) -> tuple[float, float]:
        return (-float(self.left), float(self.right))

    @property
    def ticks(self) -> np.ndarray:
        n = int(round((self.left + self.right) / self.step))
        return -self.left + self.step * np.arange(n + 1, dtype=float)

    @property
    def tick_labels(self) -> list[str]:
        return [f"{abs(v):g}" for v in self.ticks]


@dataclass(frozen=True)
class RankLogConfig:
    """Categorisation thresholds and axis options for one rank-log figure."""

    fc_threshold: float = math.log2(1.5)
    p_threshold: float = 0.05
    x_max_override: int | None = None
    y_pad: float = 0.5


@dataclass(frozen=True)
class ComparisonConfig:
    """Binning, agreement and axis options for the method comparison figures."""

    method_a: str = "Method A"
    method_b: str = "Method B"
    bin_width: float = 0.1
    loa_multiplier: float = 1.96
    confidence: float = 0.95
    target_x_ticks_hist: int = 7
    target_y_ticks_hist: int = 6
    target_x_ticks_ba: int = 7
    target_y_ticks_ba: int = 6


@dataclass(frozen=True)
class RankLogResult:
    """Output of `compute_rank_log`.

    - `values`: input values sorted descending.
    - `labels`: categories carried through the same permutation.
    - `ranks`: 1-based sort positions.
    - `order`: permutation applied to the input.
    """

    values: np.ndarray
    labels: np.ndarray
    ranks: np.ndarray
    order: np.ndarray
    counts: dict[str, int]
    x_max: float
    x_ticks: np.ndarray
    y_limits: tuple[float, float]
    y_ticks: np.ndarray

    @property
    def n(self) -> int:
        return int(self.values.size)

    def mask(self, category: str) -> np.ndarray:
        return self.labels == category


@dataclass(frozen=True)
class MirroredHistogram:
    """Shared-edge bin counts for two vectors."""

    edges: np.ndarray
    centers: np.ndarray
    counts_a: np.ndarray
    counts_b: np.ndarray
    bin_width: float

    @property
    def signed_counts_a(self) -> np.ndarray:
        return -self.counts_a

    @property
    def n_bins(self) -> int:
        return int(self.centers.size)


@dataclass(frozen=True)
class MirroredHistogramAxes:
    value_axis: AxisScale
    count_axis: CountAxis


@dataclass(frozen=True)
class BlandAltmanResult:
    """Agreement statistics for paired measurements (difference = A - B)."""

    average: np.ndarray
    difference: np.ndarray
    bias: float
    sd: float
    upper_loa: float
    lower_loa: float
    n_pairs: int
    loa_multiplier: float = 1.96
    bias_ci: tuple[float, float] = (float("nan"), float("nan"))
    upper_loa_ci: tuple[float, float] = (float("nan"), float("nan"))
    lower_loa_ci: tuple[float, float] = (float("nan"), float("nan"))
    fraction_within_loa: float = float("nan")
    metadata: dict[str, float] = field(default_factory=dict)

    def summary(self) -> dict[str, float | int | list[float]]:
        return {
            "n_pairs": int(self.n_pairs),
            "bias": float(self.bias),
            "sd": float(self.sd),
            "upper_loa": float(self.upper_loa),
            "lower_loa": float(self.lower_loa),
            "loa_multiplier": float(self.loa_multiplier),
            "bias_ci": [float(v) for v in self.bias_ci],
            "upper_loa_ci": [float(v) for v in self.upper_loa_ci],
            "lower_loa_ci": [float(v) for v in self.lower_loa_ci],
            "fraction_within_loa": float(self.fraction_within_loa),
        }


@dataclass(frozen=True)
class BlandAltmanAxes:
    x_axis: AxisScale
    y_limits: tuple[float, float]
    y_ticks: np.ndarray
