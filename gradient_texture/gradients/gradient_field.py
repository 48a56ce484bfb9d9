from __future__ import annotations

import warnings
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np
from numpy import ndarray

from ..colors import ColorRGBA, BLACK, WHITE
from ..errors import DegenerateGradientWarning
from ..types.color_types import RGBA_CHANNELS, Scalar, as_float_array
from ..types.format_type import GradientMode
from .interpolation import bracket, sorted_positions, step_index
from .keys import AlphaKey, ColorKey, make_alpha_key, make_color_key

FALLBACK_COLOR = BLACK
FALLBACK_ALPHA = 1.0


class GradientField:
    """
    A 1D color ramp defined by independent color keys and alpha keys.

    Color and alpha are interpolated separately, each from its own pair of
    bracketing keys, so the two key lists need not share positions. Keys are
    stable-sorted on construction; parameters outside the key range collapse
    onto the nearest endpoint key.

    An empty key list is tolerated: evaluation falls back to black RGB and/or
    opaque alpha and emits a ``DegenerateGradientWarning``.
    """

    def __init__(
        self,
        color_keys: Iterable[Union[ColorKey, Tuple[Scalar, object]]] = (),
        alpha_keys: Iterable[Union[AlphaKey, Tuple[Scalar, Scalar]]] = (),
        mode: GradientMode = GradientMode.BLEND,
    ) -> None:
        colors = [make_color_key(k) for k in color_keys]
        alphas = [make_alpha_key(k) for k in alpha_keys]

        color_order = sorted_positions([k.position for k in colors])
        alpha_order = sorted_positions([k.position for k in alphas])
        self._color_keys: Tuple[ColorKey, ...] = tuple(colors[i] for i in color_order)
        self._alpha_keys: Tuple[AlphaKey, ...] = tuple(alphas[i] for i in alpha_order)
        self._mode = GradientMode(mode)

        self._color_positions = np.array([k.position for k in self._color_keys], dtype=np.float64)
        self._color_values = np.array(
            [k.color.value[:3] for k in self._color_keys], dtype=np.float64
        ).reshape(-1, 3)
        self._alpha_positions = np.array([k.position for k in self._alpha_keys], dtype=np.float64)
        self._alpha_values = np.array([k.alpha for k in self._alpha_keys], dtype=np.float64)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def default(cls) -> "GradientField":
        """Black to white, fully opaque."""
        return cls(
            color_keys=[(0.0, BLACK), (1.0, WHITE)],
            alpha_keys=[(1.0, 1.0)],
        )

    @classmethod
    def from_colors(
        cls,
        colors: Sequence[Union[ColorRGBA, Tuple[Scalar, ...]]],
        positions: Optional[Sequence[Scalar]] = None,
        mode: GradientMode = GradientMode.BLEND,
    ) -> "GradientField":
        """
        Build a gradient from a sequence of colors.

        Alpha keys are taken from each color's alpha at the same positions.

        Args:
            colors: Colors in order (ColorRGBA instances or 3/4-tuples)
            positions: Key positions; evenly spaced over [0, 1] when omitted
            mode: Interpolation mode

        Returns:
            GradientField instance
        """
        colors = [c if isinstance(c, ColorRGBA) else ColorRGBA(c) for c in colors]
        if positions is None:
            positions = np.linspace(0.0, 1.0, len(colors)).tolist() if len(colors) > 1 else [0.0] * len(colors)
        if len(positions) != len(colors):
            raise ValueError(
                f"Got {len(colors)} colors but {len(positions)} positions"
            )
        return cls(
            color_keys=list(zip(positions, colors)),
            alpha_keys=[(p, c.alpha) for p, c in zip(positions, colors)],
            mode=mode,
        )

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def color_keys(self) -> Tuple[ColorKey, ...]:
        return self._color_keys

    @property
    def alpha_keys(self) -> Tuple[AlphaKey, ...]:
        return self._alpha_keys

    @property
    def mode(self) -> GradientMode:
        return self._mode

    @property
    def is_degenerate(self) -> bool:
        """True when either key list is empty."""
        return not self._color_keys or not self._alpha_keys

    # ------------------ EVALUATION ------------------
    def evaluate(self, t: Union[Scalar, ndarray]) -> Union[ColorRGBA, ndarray]:
        """
        Sample the gradient.

        Args:
            t: Scalar or array of positions; clamped to [0, 1]

        Returns:
            ColorRGBA for a scalar, otherwise a float64 array of shape t.shape + (4,)
        """
        arr = self.evaluate_array(t)
        if np.ndim(t) == 0:
            return ColorRGBA(tuple(arr.tolist()))
        return arr

    def evaluate_array(self, t: Union[Scalar, ndarray]) -> ndarray:
        t = np.clip(as_float_array(t), 0.0, 1.0)
        out = np.empty(t.shape + (RGBA_CHANNELS,), dtype=np.float64)
        if self.is_degenerate:
            warnings.warn(
                f"Gradient has {len(self._color_keys)} color keys and "
                f"{len(self._alpha_keys)} alpha keys; using fallback values",
                DegenerateGradientWarning,
                stacklevel=3,
            )
        out[..., :3] = self._evaluate_rgb(t)
        out[..., 3] = self._evaluate_alpha(t)
        return out

    def _evaluate_rgb(self, t: ndarray) -> ndarray:
        if not self._color_keys:
            return np.broadcast_to(np.array(FALLBACK_COLOR.value[:3]), t.shape + (3,))
        if self._mode is GradientMode.FIXED:
            return self._color_values[step_index(self._color_positions, t)]
        lower, upper, frac = bracket(self._color_positions, t)
        start = self._color_values[lower]
        end = self._color_values[upper]
        return start + (end - start) * frac[..., None]

    def _evaluate_alpha(self, t: ndarray) -> ndarray:
        if not self._alpha_keys:
            return np.full(t.shape, FALLBACK_ALPHA)
        if self._mode is GradientMode.FIXED:
            return self._alpha_values[step_index(self._alpha_positions, t)]
        lower, upper, frac = bracket(self._alpha_positions, t)
        start = self._alpha_values[lower]
        return start + (self._alpha_values[upper] - start) * frac

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GradientField):
            return NotImplemented
        return (
            self._color_keys == other._color_keys
            and self._alpha_keys == other._alpha_keys
            and self._mode == other._mode
        )

    def __hash__(self) -> int:
        return hash((self._color_keys, self._alpha_keys, self._mode))

    def __repr__(self) -> str:
        return (
            f"GradientField(color_keys={len(self._color_keys)}, "
            f"alpha_keys={len(self._alpha_keys)}, mode={self._mode.value})"
        )
