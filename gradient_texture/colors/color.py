from __future__ import annotations
from typing import ClassVar, Tuple, Union, cast
from ..conversions import to_linear, to_gamma
from ..types.color_types import ColorTuple, Scalar
from ..utils import get_dimension


class ColorRGBA:
    """
    Immutable RGBA color with float channels.

    RGB channels are clamped below at 0 but unbounded above so HDR colors
    survive. Alpha is clamped to [0, 1]. A 3-tuple gets an opaque alpha.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 4
    alpha_index: ClassVar[int] = -1
    alpha_max: ClassVar[float] = 1.0

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union["ColorRGBA", Tuple[Scalar, ...]]) -> None:
        if isinstance(value, ColorRGBA):
            value = value.value

        value_dim = get_dimension(value)
        if value_dim == 3:
            value = tuple(value) + (1.0,)
        elif value_dim != self.num_channels:
            raise ValueError(f"RGBA color expects 3 or 4 channels, got {value!r}")

        r, g, b, a = (float(v) for v in cast(Tuple[Scalar, ...], value))
        self._value: ColorTuple = (
            max(0.0, r),
            max(0.0, g),
            max(0.0, b),
            max(0.0, min(a, self.alpha_max)),
        )

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorTuple:
        return self._value

    @property
    def r(self) -> float:
        return self._value[0]

    @property
    def g(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    @property
    def alpha(self) -> float:
        return self._value[self.alpha_index]

    @property
    def linear(self) -> "ColorRGBA":
        """This color decoded from sRGB to linear light (alpha untouched)."""
        r, g, b, a = self._value
        return ColorRGBA((to_linear(r), to_linear(g), to_linear(b), a))

    @property
    def gamma(self) -> "ColorRGBA":
        """This color encoded from linear light to sRGB (alpha untouched)."""
        r, g, b, a = self._value
        return ColorRGBA((to_gamma(r), to_gamma(g), to_gamma(b), a))

    def with_alpha(self, alpha: Scalar) -> "ColorRGBA":
        return ColorRGBA(self._value[:-1] + (alpha,))

    @staticmethod
    def lerp(start: "ColorRGBA", end: "ColorRGBA", t: float) -> "ColorRGBA":
        """Interpolate channel-wise from ``start`` to ``end``; ``t`` is clamped to [0, 1]."""
        t = max(0.0, min(float(t), 1.0))
        return ColorRGBA(tuple(s + (e - s) * t for s, e in zip(start.value, end.value)))

    def __iter__(self):
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorRGBA):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"ColorRGBA({self._value!r})"


BLACK = ColorRGBA((0.0, 0.0, 0.0, 1.0))
WHITE = ColorRGBA((1.0, 1.0, 1.0, 1.0))
