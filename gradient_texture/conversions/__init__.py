"""Color transfer conversions (sRGB gamma <-> linear light)."""

from .transfer import (
    to_linear,
    to_gamma,
    np_to_linear,
    np_to_gamma,
    np_to_linear_channels,
    np_to_gamma_channels,
)

__all__ = [
    "to_linear",
    "to_gamma",
    "np_to_linear",
    "np_to_gamma",
    "np_to_linear_channels",
    "np_to_gamma_channels",
]
