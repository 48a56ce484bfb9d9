from __future__ import annotations

import warnings
from typing import Iterable, Tuple, Union

import numpy as np
from numpy import ndarray

from ..errors import DegenerateGradientWarning
from ..types.color_types import Scalar, as_float_array
from .interpolation import bracket, hermite, sorted_positions
from .keys import Keyframe, make_keyframe

FALLBACK_VALUE = 0.0


class BlendCurve:
    """
    Easing curve mapping a normalized vertical coordinate to a blend weight.

    Segments interpolate linearly unless both the left keyframe's
    ``out_tangent`` and the right keyframe's ``in_tangent`` are set, in which
    case the segment is a cubic Hermite spline. Output values are not clamped.
    """

    def __init__(self, keyframes: Iterable[Union[Keyframe, Tuple]] = ()) -> None:
        keys = [make_keyframe(k) for k in keyframes]
        order = sorted_positions([k.time for k in keys])
        self._keyframes: Tuple[Keyframe, ...] = tuple(keys[i] for i in order)

        self._times = np.array([k.time for k in self._keyframes], dtype=np.float64)
        self._values = np.array([k.value for k in self._keyframes], dtype=np.float64)
        self._out_tangents = np.array(
            [np.nan if k.out_tangent is None else k.out_tangent for k in self._keyframes],
            dtype=np.float64,
        )
        self._in_tangents = np.array(
            [np.nan if k.in_tangent is None else k.in_tangent for k in self._keyframes],
            dtype=np.float64,
        )

    @classmethod
    def linear(
        cls, time_start: float = 0.0, value_start: float = 0.0,
        time_end: float = 1.0, value_end: float = 1.0,
    ) -> "BlendCurve":
        """Straight line between two keyframes. Tangent-less keys interpolate linearly."""
        return cls([(time_start, value_start), (time_end, value_end)])

    @classmethod
    def ease_in_out(
        cls, time_start: float = 0.0, value_start: float = 0.0,
        time_end: float = 1.0, value_end: float = 1.0,
    ) -> "BlendCurve":
        """S-shaped curve with flat tangents at both ends."""
        return cls([
            Keyframe(time_start, value_start, 0.0, 0.0),
            Keyframe(time_end, value_end, 0.0, 0.0),
        ])

    @classmethod
    def identity(cls) -> "BlendCurve":
        return cls.linear(0.0, 0.0, 1.0, 1.0)

    @property
    def keyframes(self) -> Tuple[Keyframe, ...]:
        return self._keyframes

    @property
    def is_degenerate(self) -> bool:
        return not self._keyframes

    def evaluate(self, x: Union[Scalar, ndarray]) -> Union[float, ndarray]:
        """
        Sample the curve.

        Args:
            x: Scalar or array; clamped to [0, 1] and then to the keyframe range

        Returns:
            float for a scalar input, float64 array otherwise
        """
        result = self.evaluate_array(x)
        if np.ndim(x) == 0:
            return float(result)
        return result

    def evaluate_array(self, x: Union[Scalar, ndarray]) -> ndarray:
        x = np.clip(as_float_array(x), 0.0, 1.0)
        if self.is_degenerate:
            warnings.warn(
                "Blend curve has no keyframes; using fallback value",
                DegenerateGradientWarning,
                stacklevel=3,
            )
            return np.full(x.shape, FALLBACK_VALUE)

        lower, upper, frac = bracket(self._times, x)
        v0 = self._values[lower]
        v1 = self._values[upper]
        linear = v0 + (v1 - v0) * frac

        m0 = self._out_tangents[lower]
        m1 = self._in_tangents[upper]
        smooth = ~(np.isnan(m0) | np.isnan(m1)) & (upper != lower)
        if not np.any(smooth):
            return linear
        dt = self._times[upper] - self._times[lower]
        curved = hermite(v0, v1, np.nan_to_num(m0), np.nan_to_num(m1), frac, dt)
        return np.where(smooth, curved, linear)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlendCurve):
            return NotImplemented
        return self._keyframes == other._keyframes

    def __hash__(self) -> int:
        return hash(self._keyframes)

    def __repr__(self) -> str:
        return f"BlendCurve(keyframes={list(self._keyframes)!r})"
