from __future__ import annotations
from typing import List
import numpy as np
from numpy import ndarray


def mipmap_count_for(width: int, height: int, generate_mipmaps: bool) -> int:
    """Number of mip levels of a full chain down to 1x1, or 1 without mipmaps."""
    if not generate_mipmaps:
        return 1
    return int(max(width, height)).bit_length()


def _halve_axis(level: ndarray, axis: int) -> ndarray:
    size = level.shape[axis]
    if size == 1:
        return level
    half = size // 2
    # Odd sizes drop the trailing row/column so each level is floor(size / 2)
    even = np.take(level, np.arange(0, 2 * half, 2), axis=axis)
    odd = np.take(level, np.arange(1, 2 * half, 2), axis=axis)
    return (even + odd) * 0.5


def build_mip_chain(base: ndarray, count: int) -> List[ndarray]:
    """
    Box-filter a float RGBA image into a mip chain.

    Args:
        base: Level 0 with shape (height, width, 4)
        count: Total number of levels, including level 0

    Returns:
        List of ``count`` float arrays, each half the size of the previous one
    """
    levels = [base]
    for _ in range(1, count):
        level = _halve_axis(levels[-1], axis=0)
        levels.append(_halve_axis(level, axis=1))
    return levels
