from __future__ import annotations
from typing import Tuple
import numpy as np
from numpy import ndarray


def sorted_positions(positions: list[float]) -> ndarray:
    """Return the stable sort order of key positions (ties keep insertion order)."""
    return np.argsort(np.asarray(positions, dtype=np.float64), kind="stable")


def bracket(positions: ndarray, t: ndarray) -> Tuple[ndarray, ndarray, ndarray]:
    """
    Locate the keys bracketing each parameter value.

    The lower key is the last key at or before ``t`` and the upper key the
    first key strictly after it, so duplicated positions never produce a
    zero-width span. Parameters before the first key or after the last key
    collapse onto that endpoint key.

    Args:
        positions: Sorted (non-decreasing) key positions, at least one
        t: Parameter values

    Returns:
        (lower indices, upper indices, fractional offset between them)
    """
    n = positions.shape[0]
    upper = np.searchsorted(positions, t, side="right")
    lower = np.clip(upper - 1, 0, n - 1)
    upper = np.clip(upper, 0, n - 1)

    span = positions[upper] - positions[lower]
    safe_span = np.where(span > 0.0, span, 1.0)
    frac = np.where(span > 0.0, (t - positions[lower]) / safe_span, 0.0)
    return lower, upper, frac


def step_index(positions: ndarray, t: ndarray) -> ndarray:
    """Index of the first key whose position is >= t, clamped to the last key."""
    n = positions.shape[0]
    return np.clip(np.searchsorted(positions, t, side="left"), 0, n - 1)


def hermite(
    v0: ndarray, v1: ndarray, m0: ndarray, m1: ndarray, s: ndarray, dt: ndarray
) -> ndarray:
    """Cubic Hermite spline on the unit segment ``s`` with tangents scaled by ``dt``."""
    s2 = s * s
    s3 = s2 * s
    h00 = 2 * s3 - 3 * s2 + 1
    h10 = s3 - 2 * s2 + s
    h01 = -2 * s3 + 3 * s2
    h11 = s3 - s2
    return h00 * v0 + h10 * dt * m0 + h01 * v1 + h11 * dt * m1
