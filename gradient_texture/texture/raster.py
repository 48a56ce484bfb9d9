from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
from numpy import ndarray

from ..errors import AllocationError, InvalidResolutionError, RasterNotAllocatedError
from ..gradients import BlendCurve, GradientField
from ..types.color_types import RGBA_CHANNELS
from ..types.format_type import LDR_MAX, BufferState, storage_dtypes
from .fill import render_gradient
from .format_parameters import FormatParameters
from .mipmaps import build_mip_chain, mipmap_count_for

logger = logging.getLogger(__name__)

WRAP_CLAMP = "clamp"


@dataclass(frozen=True)
class ReconcileResult:
    reallocated: bool
    reasons: Tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return self.reallocated


def validate_resolution(width: int, height: int) -> None:
    for label, size in (("width", width), ("height", height)):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise TypeError(f"Resolution {label} must be an integer, got {size!r}")
        if size <= 0:
            raise InvalidResolutionError(f"Resolution {label} must be positive, got {size}")


def _allocate_storage(width: int, height: int, is_hdr: bool) -> ndarray:
    return np.zeros((height, width, RGBA_CHANNELS), dtype=storage_dtypes[is_hdr])


def quantize(colors: ndarray, is_hdr: bool) -> ndarray:
    """Convert float colors to the storage dtype of an HDR or LDR buffer."""
    if is_hdr:
        return colors.astype(np.float16)
    return np.round(np.clip(colors, 0.0, 1.0) * LDR_MAX).astype(np.uint8)


def dequantize(stored: ndarray) -> ndarray:
    if stored.dtype == np.uint8:
        return stored.astype(np.float32) / LDR_MAX
    return stored.astype(np.float32)


class RasterBuffer:
    """
    Owns the RGBA pixel storage of a gradient texture and its format tags.

    Storage has shape ``(height, width, 4)`` and row ``y`` of the array is
    row ``y`` of the fill loop (row 0 is the bottom of the image). LDR
    buffers store 8-bit channels, HDR buffers store half floats.

    Call ``reconcile`` before ``fill``: the fill branches on the buffer's
    actual HDR tag, which only ``reconcile`` brings in line with the
    requested parameters.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.wrap_mode = WRAP_CLAMP
        self.alpha_is_transparency = True
        self._storage: Optional[ndarray] = None
        self._is_hdr = False
        self._mipmap_count = 1
        self._mip_levels: Optional[List[ndarray]] = None
        self._state = BufferState.ABSENT
        self._dirty = False

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def state(self) -> BufferState:
        return self._state

    @property
    def is_allocated(self) -> bool:
        return self._storage is not None

    @property
    def width(self) -> int:
        return 0 if self._storage is None else self._storage.shape[1]

    @property
    def height(self) -> int:
        return 0 if self._storage is None else self._storage.shape[0]

    @property
    def is_hdr(self) -> bool:
        return self._is_hdr

    @property
    def mipmap_count(self) -> int:
        return self._mipmap_count

    @property
    def is_dirty(self) -> bool:
        """True when the pixels changed since the last ``clear_dirty``."""
        return self._dirty

    def clear_dirty(self) -> None:
        self._dirty = False

    # ------------------ RECONCILE ------------------
    def reallocation_reasons(self, params: FormatParameters) -> Tuple[str, ...]:
        if self._storage is None:
            return ("absent",)
        reasons = []
        if self.width != params.width:
            reasons.append("width")
        if self.height != params.height:
            reasons.append("height")
        if self._is_hdr != params.high_dynamic_range:
            reasons.append("hdr")
        # A single mip level is read as "mipmaps disabled"
        if (self._mipmap_count > 1) != params.generate_mipmaps:
            reasons.append("mipmaps")
        return tuple(reasons)

    def reconcile(self, params: FormatParameters) -> ReconcileResult:
        """
        Bring the buffer's size, dynamic range and mip policy in line with ``params``.

        Reallocates only when something differs; otherwise the call is a no-op
        and the current pixels are preserved. After a reallocation the pixels
        are undefined until the next ``fill``.

        Raises:
            InvalidResolutionError: width or height is not positive
            AllocationError: storage could not be allocated (buffer unchanged)
        """
        width, height = params.resolution
        validate_resolution(width, height)

        reasons = self.reallocation_reasons(params)
        if not reasons:
            return ReconcileResult(reallocated=False)

        is_hdr = params.high_dynamic_range
        try:
            storage = _allocate_storage(width, height, is_hdr)
        except (MemoryError, ValueError) as e:
            raise AllocationError(
                f"Could not allocate {width}x{height} {'HDR' if is_hdr else 'LDR'} raster: {e}"
            ) from e

        self._storage = storage
        self._is_hdr = is_hdr
        self._mipmap_count = mipmap_count_for(width, height, params.generate_mipmaps)
        self._mip_levels = None
        self._state = BufferState.STALE
        self._dirty = True
        logger.debug(
            "Reallocated raster %r to %dx%d hdr=%s mips=%d (%s)",
            self.name, width, height, is_hdr, self._mipmap_count, ", ".join(reasons),
        )
        return ReconcileResult(reallocated=True, reasons=reasons)

    # ------------------ FILL ------------------
    def fill(
        self,
        top: GradientField,
        bottom: Optional[GradientField],
        curve: BlendCurve,
        params: FormatParameters,
        *,
        project_is_linear: bool,
    ) -> None:
        """
        Recompute every pixel from the gradients.

        Args:
            top: Gradient at the top of the image (and the only one in single mode)
            bottom: Gradient at the bottom; required when ``params.use_two_gradients``
            curve: Maps ``y / height`` to the bottom-to-top blend weight
            params: Supplies ``use_two_gradients`` and ``store_as_srgb``
            project_is_linear: Whether the rendering pipeline works in linear light
        """
        if self._storage is None:
            raise RasterNotAllocatedError("fill() called before reconcile() allocated the raster")

        colors = render_gradient(
            top, bottom, curve, self.width, self.height,
            use_two_gradients=params.use_two_gradients,
            is_hdr=self._is_hdr,
            store_as_srgb=params.store_as_srgb,
            project_is_linear=project_is_linear,
        )
        self._storage[...] = quantize(colors, self._is_hdr)
        self._mip_levels = None
        self._state = BufferState.FRESH
        self._dirty = True

    # ------------------ ACCESSORS ------------------
    @property
    def pixels(self) -> ndarray:
        """Read-only view of the raw storage (uint8 for LDR, float16 for HDR)."""
        storage = self._require_storage()
        view = storage.view()
        view.flags.writeable = False
        return view

    def get_pixels(self, mip_level: int = 0) -> ndarray:
        """Float32 copy of a mip level with shape (height, width, 4), LDR scaled to [0, 1]."""
        if mip_level == 0:
            return dequantize(self._require_storage())
        return self.mip_levels[mip_level].copy()

    def get_pixel(self, x: int, y: int) -> Tuple[float, float, float, float]:
        storage = self._require_storage()
        return tuple(dequantize(storage[y, x]).tolist())  # type: ignore[return-value]

    @property
    def mip_levels(self) -> List[ndarray]:
        """Float32 mip chain, rebuilt lazily after each fill or reallocation."""
        storage = self._require_storage()
        if self._mip_levels is None:
            base = dequantize(storage)
            levels = build_mip_chain(base, self._mipmap_count)
            # Re-quantize so every level matches what the storage format can hold
            self._mip_levels = [base] + [
                dequantize(quantize(level, self._is_hdr)) for level in levels[1:]
            ]
        return self._mip_levels

    def _require_storage(self) -> ndarray:
        if self._storage is None:
            raise RasterNotAllocatedError("Raster has not been allocated; call reconcile() first")
        return self._storage

    def __repr__(self) -> str:
        return (
            f"RasterBuffer(name={self.name!r}, {self.width}x{self.height}, "
            f"hdr={self._is_hdr}, mips={self._mipmap_count}, state={self._state.value})"
        )
