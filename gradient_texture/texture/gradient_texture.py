from __future__ import annotations

import logging
from typing import Any, Optional

from numpy import ndarray

from ..gradients import BlendCurve, GradientField
from ..types.format_type import ContainerFormat
from .export import ExportedImage, encode_pixels
from .format_parameters import FormatParameters
from .raster import RasterBuffer, ReconcileResult

logger = logging.getLogger(__name__)


class GradientTexture:
    """
    A named gradient description together with the raster it renders to.

    Two horizontal gradients are blended bottom-to-top by ``curve``; with
    ``use_two_gradients`` off only ``top`` is used. Every edit re-runs
    ``update``, which reconciles the raster format and refills the pixels.

    ``project_is_linear`` describes the host rendering pipeline (linear or
    gamma lighting). It is an explicit input, never read from global state.

    Args:
        name: Asset name, mirrored onto the raster
        settings: Requested raster format
        top: Top gradient (defaults to black-to-white)
        bottom: Bottom gradient (defaults to black-to-white)
        curve: Vertical blend curve (defaults to identity)
        project_is_linear: Whether the host pipeline works in linear light
    """

    def __init__(
        self,
        name: str = "GradientTexture",
        settings: Optional[FormatParameters] = None,
        top: Optional[GradientField] = None,
        bottom: Optional[GradientField] = None,
        curve: Optional[BlendCurve] = None,
        project_is_linear: bool = True,
    ) -> None:
        self._name = name
        self.settings = settings if settings is not None else FormatParameters()
        self.top = top if top is not None else GradientField.default()
        self.bottom = bottom if bottom is not None else GradientField.default()
        self.curve = curve if curve is not None else BlendCurve.identity()
        self.project_is_linear = project_is_linear
        self._texture = RasterBuffer(name)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value
        self._texture.name = value

    def get_texture(self) -> RasterBuffer:
        """The raster this texture renders into; allocated by the first ``update``."""
        return self._texture

    def update(self) -> ReconcileResult:
        """Reconcile the raster format with ``settings`` and recompute all pixels."""
        result = self._texture.reconcile(self.settings)
        self._texture.fill(
            self.top, self.bottom, self.curve, self.settings,
            project_is_linear=self.project_is_linear,
        )
        return result

    # ------------------ EDITS ------------------
    def set_settings(self, **changes: Any) -> ReconcileResult:
        self.settings = self.settings.replace(**changes)
        return self.update()

    def set_gradients(
        self,
        top: Optional[GradientField] = None,
        bottom: Optional[GradientField] = None,
        curve: Optional[BlendCurve] = None,
    ) -> ReconcileResult:
        if top is not None:
            self.top = top
        if bottom is not None:
            self.bottom = bottom
        if curve is not None:
            self.curve = curve
        return self.update()

    def get_srgb(self) -> bool:
        return self.settings.store_as_srgb

    def set_srgb(self, value: bool) -> ReconcileResult:
        return self.set_settings(store_as_srgb=value)

    # ------------------ EXPORT ------------------
    def export_srgb_flag(self) -> bool:
        """sRGB flag the raster is rendered with while exporting.

        HDR rasters export linear data; LDR rasters are always encoded as sRGB.
        """
        return not self.settings.high_dynamic_range

    def capture_export_pixels(self) -> ndarray:
        """
        Render with the export sRGB flag, snapshot the pixels, then restore.

        The original flag is restored and the raster refilled even when the
        capture fails.
        """
        if not self._texture.is_allocated:
            self.update()

        was_srgb = self.get_srgb()
        try:
            self.set_srgb(self.export_srgb_flag())
            return self._texture.get_pixels()
        finally:
            self.set_srgb(was_srgb)

    def export_pixels(self, container_format: ContainerFormat) -> bytes:
        """Encode the current gradient to PNG, TGA or EXR bytes."""
        return encode_pixels(self.capture_export_pixels(), ContainerFormat(container_format))

    def export_image(self, container_format: ContainerFormat) -> ExportedImage:
        """Like ``export_pixels`` but also returns the import settings to persist with the file."""
        data = self.export_pixels(container_format)
        logger.debug("Exported %r as %s", self._name, ContainerFormat(container_format).value)
        return ExportedImage(
            data=data,
            container_format=ContainerFormat(container_format),
            srgb=self.get_srgb(),
            mipmaps_enabled=self._texture.mipmap_count > 1,
            wrap_mode=self._texture.wrap_mode,
        )

    def __repr__(self) -> str:
        return f"GradientTexture(name={self._name!r}, settings={self.settings!r})"
