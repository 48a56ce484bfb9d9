from __future__ import annotations
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ColorTuple = Tuple[float, float, float, float]

# Channel count of every raster this package produces
RGBA_CHANNELS = 4


def as_float_array(value: Union[Scalar, ndarray]) -> np.ndarray:
    """
    Convert a scalar or array-like parameter to a float64 ndarray.

    Args:
        value: Scalar or array of positions

    Returns:
        numpy array representation (0-d for scalars)
    """
    return np.asarray(value, dtype=np.float64)
