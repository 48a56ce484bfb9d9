"""Exceptions and warning categories raised by gradient_texture."""


class GradientTextureError(Exception):
    """Base class for all gradient_texture errors."""


class InvalidResolutionError(GradientTextureError, ValueError):
    """Width or height is not a positive integer."""


class AllocationError(GradientTextureError, MemoryError):
    """Pixel storage could not be allocated. The previous buffer is left intact."""


class RasterNotAllocatedError(GradientTextureError, RuntimeError):
    """A raster operation ran before ``reconcile`` allocated the buffer."""


class ExportError(GradientTextureError):
    """An image codec failed to encode the raster."""


class DegenerateGradientWarning(UserWarning):
    """A gradient or curve without control points was evaluated; a fallback was used."""
