"""
sRGB transfer functions.

Scalar functions operate on single channel values; the ``np_`` variants are
vectorised and act on the RGB channels of an ``(..., 4)`` array while leaving
alpha untouched. Values above 1.0 (HDR) continue along a pure power curve.
Negative inputs are clamped to 0.
"""
from __future__ import annotations
import math
import numpy as np
from numpy import ndarray

SRGB_LINEAR_THRESHOLD = 0.04045
LINEAR_SRGB_THRESHOLD = 0.0031308
SRGB_SLOPE = 12.92
SRGB_EXPONENT = 2.4
HDR_GAMMA = 2.2


def to_linear(value: float) -> float:
    """Decode one gamma (sRGB) encoded channel value to linear light."""
    if value <= SRGB_LINEAR_THRESHOLD:
        return max(value, 0.0) / SRGB_SLOPE
    if value < 1.0:
        return math.pow((value + 0.055) / 1.055, SRGB_EXPONENT)
    return math.pow(value, HDR_GAMMA)


def to_gamma(value: float) -> float:
    """Encode one linear channel value with the sRGB curve."""
    if value <= 0.0:
        return 0.0
    if value <= LINEAR_SRGB_THRESHOLD:
        return SRGB_SLOPE * value
    if value < 1.0:
        return 1.055 * math.pow(value, 1.0 / SRGB_EXPONENT) - 0.055
    return math.pow(value, 1.0 / HDR_GAMMA)


def np_to_linear_channels(values: ndarray) -> ndarray:
    v = np.maximum(np.asarray(values, dtype=np.float64), 0.0)
    low = v / SRGB_SLOPE
    # Clip inside the power calls so unused branches never warn
    mid = np.power((np.minimum(v, 1.0) + 0.055) / 1.055, SRGB_EXPONENT)
    high = np.power(np.maximum(v, 1.0), HDR_GAMMA)
    return np.where(v <= SRGB_LINEAR_THRESHOLD, low, np.where(v < 1.0, mid, high))


def np_to_gamma_channels(values: ndarray) -> ndarray:
    v = np.maximum(np.asarray(values, dtype=np.float64), 0.0)
    low = SRGB_SLOPE * v
    mid = 1.055 * np.power(np.minimum(v, 1.0), 1.0 / SRGB_EXPONENT) - 0.055
    high = np.power(np.maximum(v, 1.0), 1.0 / HDR_GAMMA)
    return np.where(v <= LINEAR_SRGB_THRESHOLD, low, np.where(v < 1.0, mid, high))


def np_to_linear(colors: ndarray) -> ndarray:
    """
    Decode the RGB channels of RGBA colors from sRGB to linear light.

    Args:
        colors: Array with shape (..., 4)

    Returns:
        New float64 array with the same shape; alpha copied unchanged
    """
    colors = np.asarray(colors, dtype=np.float64)
    out = colors.copy()
    out[..., :3] = np_to_linear_channels(colors[..., :3])
    return out


def np_to_gamma(colors: ndarray) -> ndarray:
    """
    Encode the RGB channels of linear RGBA colors with the sRGB curve.

    Args:
        colors: Array with shape (..., 4)

    Returns:
        New float64 array with the same shape; alpha copied unchanged
    """
    colors = np.asarray(colors, dtype=np.float64)
    out = colors.copy()
    out[..., :3] = np_to_gamma_channels(colors[..., :3])
    return out
