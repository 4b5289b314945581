"""Small pure helpers for core computations."""

from __future__ import annotations

import numpy as np


def as_vector(name: str, values) -> np.ndarray:
    """Return ``values`` as a 1D float array; row/column vectors are flattened."""
    arr = np.asarray(values, dtype=float)
    if arr.ndim > 1:
        if sum(dim != 1 for dim in arr.shape) > 1:
            raise ValueError(f"{name} must be a non-empty numeric vector, got shape {arr.shape}.")
        arr = arr.ravel()
    elif arr.ndim == 0:
        arr = arr.reshape(1)
    if arr.size == 0:
        raise ValueError(f"{name} must be a non-empty numeric vector.")
    return arr


def finite_1d(name: str, values) -> np.ndarray:
    arr = as_vector(name, values)
    if not np.isfinite(arr).all():
        raise ValueError(f"{name} must be finite.")
    return arr
