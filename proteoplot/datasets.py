"""Synthetic demo inputs for the figure commands."""

from __future__ import annotations

import numpy as np


def rng_from_seed(seed: int) -> np.random.Generator:
    """Construct a NumPy Generator from seed."""
    return np.random.default_rng(int(seed))


def demo_rank_log(n: int = 1200, seed: int = 1) -> tuple[np.ndarray, np.ndarray]:
    """Log2 ratios with a slow oscillation plus noise, and demo p-values.

    The p-values are drawn from U(0, 0.5) so that only a fraction of values
    beyond the fold-change threshold are called significant.
    """
    if int(n) < 1:
        raise ValueError("n must be >= 1.")
    rng = rng_from_seed(seed)
    values = 0.8 * np.sin(np.linspace(0.0, 6.0 * np.pi, int(n))) + 0.4 * rng.standard_normal(int(n))
    p_values = rng.uniform(0.0, 0.5, size=int(n))
    return values, p_values


def demo_paired_methods(n: int = 500, seed: int = 1) -> tuple[np.ndarray, np.ndarray]:
    """Method B tracks method A with additive noise."""
    if int(n) < 1:
        raise ValueError("n must be >= 1.")
    rng = rng_from_seed(seed)
    a = 0.5 * rng.standard_normal(int(n))
    b = a + 0.2 * rng.standard_normal(int(n))
    return a, b
