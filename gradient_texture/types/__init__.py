from .color_types import Scalar, ColorTuple, RGBA_CHANNELS, as_float_array
from .format_type import ContainerFormat, GradientMode, BufferState, storage_dtypes

__all__ = [
    "Scalar",
    "ColorTuple",
    "RGBA_CHANNELS",
    "as_float_array",
    "ContainerFormat",
    "GradientMode",
    "BufferState",
    "storage_dtypes",
]
