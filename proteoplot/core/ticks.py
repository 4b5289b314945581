"""Axis range and tick-step heuristics ("nice numbers").

All helpers are pure and stateless; each axis of each figure calls them
independently.
"""

from __future__ import annotations

import math

import numpy as np

from proteoplot.core.types import AxisScale, CountAxis

NICE_BASES = (1.0, 2.0, 5.0, 10.0)
MIN_TARGET_TICKS = 3
FALLBACK_SCALE = AxisScale(lo=-1.0, hi=1.0, step=0.5)


def nice_step(x: float) -> float:
    """Round a rough step to ``base * 10**k`` with ``base`` in {1, 2, 5, 10}."""
    x = float(x)
    if x <= 0 or not math.isfinite(x):
        return 1.0
    k = math.floor(math.log10(x))
    m = x / 10.0**k
    if m <= 1.5:
        base = 1.0
    elif m <= 3.5:
        base = 2.0
    elif m <= 7.5:
        base = 5.0
    else:
        base = 10.0
    return base * 10.0**k


def _round_half_away(x: float) -> int:
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def _degenerate_pad(value: float) -> float:
    return max(1.0, abs(float(value)) * 0.1)


def auto_limits_ticks(min_val: float, max_val: float, target_ticks: int = 6) -> AxisScale:
    """Choose step-aligned bounds that contain ``[min_val, max_val]``.

    Non-finite input returns ``FALLBACK_SCALE`` instead of raising. Equal
    bounds are padded symmetrically before a step is chosen.
    """
    lo_val = float(min_val)
    hi_val = float(max_val)
    if not (math.isfinite(lo_val) and math.isfinite(hi_val)):
        return FALLBACK_SCALE
    if lo_val == hi_val:
        pad = _degenerate_pad(lo_val)
        lo_val, hi_val = lo_val - pad, hi_val + pad

    rough = (hi_val - lo_val) / max(MIN_TARGET_TICKS, int(target_ticks))
    step = nice_step(rough)
    lo = math.floor(lo_val / step) * step
    hi = math.ceil(hi_val / step) * step
    return AxisScale(lo=lo, hi=hi, step=step)


def autospace(x0: float, x1: float) -> np.ndarray:
    """Rank-axis ticks from ``x0`` to ``x1`` aiming for about four intervals."""
    span = max(float(x1) - float(x0), 1.0)
    raw = span / 4.0
    p10 = 10.0 ** math.floor(math.log10(raw))
    step = next((p10 * b for b in NICE_BASES if p10 * b >= raw), p10 * NICE_BASES[-1])
    n = int(math.floor((float(x1) - float(x0)) / step + 1e-9))
    if n < 0:
        return np.empty(0, dtype=float)
    return float(x0) + step * np.arange(n + 1, dtype=float)


def mirrored_count_axis(max_left: float, max_right: float, target_ticks: int = 7) -> CountAxis:
    """Shared count step for a two-sided histogram; each side rounds up to it."""
    left = float(max_left)
    right = float(max_right)
    rough = max(1.0, (left + right) / max(MIN_TARGET_TICKS, int(target_ticks)))
    step = nice_step(rough)
    return CountAxis(
        left=step * math.ceil(left / step),
        right=step * math.ceil(right / step),
        step=step,
    )


def padded_limits_ticks(
    values, target_ticks: int = 6, *, margin: float = 0.1
) -> tuple[tuple[float, float], np.ndarray]:
    """Limits at the data extent widened by ``margin * span``, with rounded ticks."""
    arr = np.asarray(values, dtype=float).ravel()
    arr = arr[np.isfinite(arr)]
    if arr.size == 0:
        return FALLBACK_SCALE.limits, FALLBACK_SCALE.ticks

    lo_data = float(arr.min())
    hi_data = float(arr.max())
    if lo_data == hi_data:
        pad = _degenerate_pad(lo_data)
        lo, hi = lo_data - pad, hi_data + pad
    else:
        extra = float(margin) * (hi_data - lo_data)
        lo, hi = lo_data - extra, hi_data + extra

    step = nice_step((hi - lo) / max(MIN_TARGET_TICKS, int(target_ticks)))
    first = _round_half_away(lo / step)
    last = _round_half_away(hi / step)
    ticks = step * np.arange(first, last + 1, dtype=float)
    return (lo, hi), ticks


def unit_limits_ticks(
    values, *, pad: float = 0.5, max_abs_tick: float = 1e6
) -> tuple[tuple[float, float], np.ndarray]:
    """Limits padded by ``pad`` with integer ticks; extreme ticks are dropped."""
    arr = np.asarray(values, dtype=float).ravel()
    lo = float(np.min(arr)) - float(pad)
    hi = float(np.max(arr)) + float(pad)
    first = max(math.floor(lo), -math.floor(max_abs_tick))
    last = min(math.ceil(hi), math.floor(max_abs_tick))
    ticks = np.arange(first, last + 1, dtype=float)
    return (lo, hi), ticks
