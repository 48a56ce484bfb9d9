"""Raster reconciliation, fill and export."""

from .format_parameters import FormatParameters, Resolution
from .raster import RasterBuffer, ReconcileResult, validate_resolution
from .fill import (
    horizontal_coordinates,
    vertical_coordinates,
    correct_color_space,
    render_gradient,
)
from .mipmaps import mipmap_count_for, build_mip_chain
from .export import ExportedImage, encode_pixels, ENCODERS
from .gradient_texture import GradientTexture

__all__ = [
    "FormatParameters",
    "Resolution",
    "RasterBuffer",
    "ReconcileResult",
    "validate_resolution",
    "horizontal_coordinates",
    "vertical_coordinates",
    "correct_color_space",
    "render_gradient",
    "mipmap_count_for",
    "build_mip_chain",
    "ExportedImage",
    "encode_pixels",
    "ENCODERS",
    "GradientTexture",
]
