"""
Gradient Texture - gradient rasterization for texture assets
=============================================================

Synthesizes an RGBA raster from two horizontal color ramps blended
vertically by an easing curve, and keeps it consistent with its requested
format (resolution, dynamic range, sRGB storage, mipmaps).

Quick Start
-----------
>>> from gradient_texture import GradientTexture, GradientField, FormatParameters
>>>
>>> texture = GradientTexture(
...     "sky",
...     settings=FormatParameters(resolution=(64, 64), high_dynamic_range=False),
...     top=GradientField.from_colors([(0.1, 0.2, 0.8), (0.6, 0.8, 1.0)]),
... )
>>> _ = texture.update()
>>> png_bytes = texture.export_pixels("png")

Modules
-------
- colors: immutable RGBA color
- conversions: sRGB transfer functions
- gradients: gradient fields and blend curves
- texture: raster buffer, fill, export and the GradientTexture aggregate
"""

from .colors import ColorRGBA
from .conversions import to_linear, to_gamma, np_to_linear, np_to_gamma
from .gradients import GradientField, BlendCurve, ColorKey, AlphaKey, Keyframe
from .texture import (
    FormatParameters,
    Resolution,
    RasterBuffer,
    ReconcileResult,
    GradientTexture,
    ExportedImage,
    encode_pixels,
)
from .types import ContainerFormat, GradientMode, BufferState
from .errors import (
    GradientTextureError,
    InvalidResolutionError,
    AllocationError,
    RasterNotAllocatedError,
    ExportError,
    DegenerateGradientWarning,
)

__version__ = "1.0.0"

__all__ = [
    # colors
    "ColorRGBA",
    # conversions
    "to_linear",
    "to_gamma",
    "np_to_linear",
    "np_to_gamma",
    # gradients
    "GradientField",
    "BlendCurve",
    "ColorKey",
    "AlphaKey",
    "Keyframe",
    # texture
    "FormatParameters",
    "Resolution",
    "RasterBuffer",
    "ReconcileResult",
    "GradientTexture",
    "ExportedImage",
    "encode_pixels",
    # enums
    "ContainerFormat",
    "GradientMode",
    "BufferState",
    # errors
    "GradientTextureError",
    "InvalidResolutionError",
    "AllocationError",
    "RasterNotAllocatedError",
    "ExportError",
    "DegenerateGradientWarning",
    "__version__",
]
