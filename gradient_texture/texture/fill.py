"""
Per-pixel gradient synthesis.

Every pixel ``(x, y)`` samples the horizontal gradients at ``x / width`` and
the blend curve at ``y / height``. Neither coordinate ever reaches 1.0 for
sizes above one pixel; this matches rasters produced by earlier releases and
must stay that way.
"""
from __future__ import annotations

from typing import Optional

import numpy as np
from numpy import ndarray

from ..conversions import np_to_gamma, np_to_linear
from ..gradients import BlendCurve, GradientField


def horizontal_coordinates(width: int) -> ndarray:
    return np.arange(width, dtype=np.float64) / width


def vertical_coordinates(height: int) -> ndarray:
    return np.arange(height, dtype=np.float64) / height


def correct_color_space(
    colors: ndarray,
    is_hdr: bool,
    store_as_srgb: bool,
    project_is_linear: bool,
) -> ndarray:
    """
    Apply the storage color-space correction to raw gradient colors.

    ====== ===================================== ==============
    target store_as_srgb and project_is_linear   otherwise
    ====== ===================================== ==============
    HDR    to_linear(c)                          c
    LDR    c                                     to_gamma(c)
    ====== ===================================== ==============

    Alpha is never converted.
    """
    srgb_in_linear_project = store_as_srgb and project_is_linear
    if is_hdr:
        return np_to_linear(colors) if srgb_in_linear_project else colors
    return colors if srgb_in_linear_project else np_to_gamma(colors)


def blend_rows(
    top: GradientField,
    bottom: Optional[GradientField],
    curve: BlendCurve,
    width: int,
    height: int,
    use_two_gradients: bool,
) -> ndarray:
    """
    Raw (uncorrected) gradient colors for a ``height x width`` raster.

    Returns:
        float64 array of shape (height, width, 4); row index is ``y``
    """
    t_horizontal = horizontal_coordinates(width)
    top_row = top.evaluate_array(t_horizontal)

    if not use_two_gradients:
        return np.broadcast_to(top_row, (height, width, 4)).copy()

    if bottom is None:
        raise ValueError("use_two_gradients is set but no bottom gradient was given")

    bottom_row = bottom.evaluate_array(t_horizontal)
    # Color lerp clamps its weight, the curve itself may overshoot
    t_vertical = np.clip(curve.evaluate_array(vertical_coordinates(height)), 0.0, 1.0)
    return bottom_row[None, :, :] + (top_row - bottom_row)[None, :, :] * t_vertical[:, None, None]


def render_gradient(
    top: GradientField,
    bottom: Optional[GradientField],
    curve: BlendCurve,
    width: int,
    height: int,
    *,
    use_two_gradients: bool,
    is_hdr: bool,
    store_as_srgb: bool,
    project_is_linear: bool,
) -> ndarray:
    raw = blend_rows(top, bottom, curve, width, height, use_two_gradients)
    return correct_color_space(raw, is_hdr, store_as_srgb, project_is_linear)
