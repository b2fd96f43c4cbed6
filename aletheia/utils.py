"""
Numeric safety and state abstraction helpers.

The curiosity agent learns tables keyed by a discretized view of a continuous
state. This module provides that discretization (a foveated, logarithmic
binning) together with the guards that keep NaN/Inf out of the learned tables.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

# Largest magnitude a state component may take once sanitized.
STATE_LIMIT = 1e6


# ---------------------------------------------------------------------------
# Safe numeric operations (avoid NaN/Inf propagation)
# ---------------------------------------------------------------------------

def sanitize_state(values: Sequence[float]) -> np.ndarray:
    """Coerce a state vector to finite floats clipped to +/-STATE_LIMIT."""
    arr = np.asarray(values, dtype=float).ravel()
    arr = np.nan_to_num(arr, nan=0.0, posinf=STATE_LIMIT, neginf=-STATE_LIMIT)
    return np.clip(arr, -STATE_LIMIT, STATE_LIMIT)


def sanitize_reward(reward: float) -> float:
    """Non-finite rewards count as zero; finite ones are clipped to +/-STATE_LIMIT."""
    try:
        reward = float(reward)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(reward):
        return 0.0
    return min(STATE_LIMIT, max(-STATE_LIMIT, reward))


def safe_divisor(count: float) -> float:
    """Floor a count at 1 so it can be used as a divisor."""
    return max(float(count), 1.0)


# ---------------------------------------------------------------------------
# State abstraction
# ---------------------------------------------------------------------------

def fovea_bins(values: Sequence[float], scale: float = 2.0) -> Tuple[int, ...]:
    """
    Map each component through sign(v) * ln(1 + |v|) * scale and round.

    Resolution is fine near the origin and coarse far away, so large excursions
    do not explode the number of distinct keys.
    """
    arr = sanitize_state(values)
    binned = np.rint(np.sign(arr) * np.log1p(np.abs(arr)) * scale)
    # rint can yield -0.0; int() folds it into 0
    return tuple(int(b) for b in binned)


def discretize(values: Sequence[float], scale: float = 2.0) -> str:
    """Canonical state key, e.g. ``"6,-3,0"``."""
    return ",".join(str(b) for b in fovea_bins(values, scale))
