"""Gradient ramps and blend curves evaluated by the raster fill."""

from .keys import ColorKey, AlphaKey, Keyframe
from .gradient_field import GradientField, FALLBACK_COLOR, FALLBACK_ALPHA
from .blend_curve import BlendCurve, FALLBACK_VALUE

__all__ = [
    "ColorKey",
    "AlphaKey",
    "Keyframe",
    "GradientField",
    "BlendCurve",
    "FALLBACK_COLOR",
    "FALLBACK_ALPHA",
    "FALLBACK_VALUE",
]
