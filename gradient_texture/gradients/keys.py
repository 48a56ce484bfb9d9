from __future__ import annotations
from typing import NamedTuple, Optional, Tuple, Union
from ..colors import ColorRGBA
from ..types.color_types import Scalar


class ColorKey(NamedTuple):
    position: float
    color: ColorRGBA


class AlphaKey(NamedTuple):
    position: float
    alpha: float


class Keyframe(NamedTuple):
    time: float
    value: float
    in_tangent: Optional[float] = None
    out_tangent: Optional[float] = None


def clamp_unit(value: Scalar) -> float:
    return max(0.0, min(float(value), 1.0))


def make_color_key(key: Union[ColorKey, Tuple[Scalar, object]]) -> ColorKey:
    position, color = key
    if not isinstance(color, ColorRGBA):
        color = ColorRGBA(color)  # type: ignore[arg-type]
    return ColorKey(clamp_unit(position), color)


def make_alpha_key(key: Union[AlphaKey, Tuple[Scalar, Scalar]]) -> AlphaKey:
    position, alpha = key
    return AlphaKey(clamp_unit(position), clamp_unit(alpha))


def make_keyframe(key: Union[Keyframe, Tuple]) -> Keyframe:
    if isinstance(key, Keyframe):
        return Keyframe(clamp_unit(key.time), float(key.value), key.in_tangent, key.out_tangent)
    if len(key) not in (2, 4):
        raise ValueError(f"Keyframe expects (time, value) or (time, value, in, out), got {key!r}")
    return make_keyframe(Keyframe(*key))
