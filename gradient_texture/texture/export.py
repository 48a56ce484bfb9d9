"""
Container encoders for gradient rasters.

Encoders take float RGBA pixels in fill order (row 0 at the bottom) and
return the encoded file contents. PNG and TGA go through Pillow as 8-bit
RGBA; EXR goes through OpenImageIO as half-float RGBA.
"""
from __future__ import annotations

import io
import logging
import os
import tempfile
from dataclasses import dataclass
from typing import Callable, Dict

import numpy as np
from numpy import ndarray

from ..errors import ExportError
from ..types.format_type import LDR_MAX, ContainerFormat

logger = logging.getLogger(__name__)

Encoder = Callable[[ndarray], bytes]


@dataclass(frozen=True)
class ExportedImage:
    """Encoded raster plus the import settings a persistence layer should apply."""
    data: bytes
    container_format: ContainerFormat
    srgb: bool
    mipmaps_enabled: bool
    wrap_mode: str


def to_top_down(pixels: ndarray) -> ndarray:
    return np.ascontiguousarray(pixels[::-1])


def to_8bit(pixels: ndarray) -> ndarray:
    return np.round(np.clip(pixels, 0.0, 1.0) * LDR_MAX).astype(np.uint8)


def _encode_with_pillow(pixels: ndarray, pil_format: str) -> bytes:
    from PIL import Image

    image = Image.fromarray(to_8bit(to_top_down(pixels)))
    buffer = io.BytesIO()
    try:
        image.save(buffer, format=pil_format)
    except (OSError, ValueError) as e:
        raise ExportError(f"Pillow failed to encode {pil_format}: {e}") from e
    return buffer.getvalue()


def encode_png(pixels: ndarray) -> bytes:
    return _encode_with_pillow(pixels, "PNG")


def encode_tga(pixels: ndarray) -> bytes:
    return _encode_with_pillow(pixels, "TGA")


def encode_exr(pixels: ndarray) -> bytes:
    import OpenImageIO as oiio

    height, width, channels = pixels.shape
    data = np.ascontiguousarray(to_top_down(pixels), dtype=np.float32)

    # OpenImageIO writes to files, so round-trip through a scratch directory
    with tempfile.TemporaryDirectory() as scratch:
        filename = os.path.join(scratch, "gradient.exr")
        out = oiio.ImageOutput.create(filename)
        if not out:
            raise ExportError(f"OpenImageIO cannot create an EXR writer: {oiio.geterror()}")
        spec = oiio.ImageSpec(width, height, channels, "half")
        if not out.open(filename, spec):
            raise ExportError(f"OpenImageIO failed to open {filename}: {out.geterror()}")
        ok = out.write_image(data)
        error = out.geterror() if not ok else ""
        out.close()
        if not ok:
            raise ExportError(f"OpenImageIO failed to write EXR: {error}")
        with open(filename, "rb") as f:
            return f.read()


ENCODERS: Dict[ContainerFormat, Encoder] = {
    ContainerFormat.PNG: encode_png,
    ContainerFormat.TGA: encode_tga,
    ContainerFormat.EXR: encode_exr,
}


def encode_pixels(pixels: ndarray, container_format: ContainerFormat) -> bytes:
    """
    Encode float RGBA pixels to a container format.

    Args:
        pixels: Float array of shape (height, width, 4), row 0 at the bottom
        container_format: Target container

    Returns:
        Encoded file contents
    """
    container_format = ContainerFormat(container_format)
    encoder = ENCODERS.get(container_format)
    if encoder is None:
        raise ValueError(f"Unsupported container format: {container_format}")
    data = encoder(pixels)
    logger.debug("Encoded %dx%d raster as %s (%d bytes)",
                 pixels.shape[1], pixels.shape[0], container_format.value, len(data))
    return data
