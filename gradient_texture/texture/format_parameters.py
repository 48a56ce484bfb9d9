from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Dict, NamedTuple

DEFAULT_RESOLUTION = 256


class Resolution(NamedTuple):
    width: int
    height: int


@dataclass(frozen=True)
class FormatParameters:
    """
    Shape and format requested for a gradient raster.

    The resolution is not validated here: ``RasterBuffer.reconcile`` rejects
    non-positive sizes. Use ``with_clamped_resolution`` to sanitize user input.
    """
    resolution: Resolution = field(default_factory=lambda: Resolution(DEFAULT_RESOLUTION, DEFAULT_RESOLUTION))
    high_dynamic_range: bool = True
    store_as_srgb: bool = True
    generate_mipmaps: bool = False
    use_two_gradients: bool = True

    def __post_init__(self):
        # Accept any (width, height) pair
        if not isinstance(self.resolution, Resolution):
            width, height = self.resolution
            object.__setattr__(self, "resolution", Resolution(width, height))

    @property
    def width(self) -> int:
        return self.resolution.width

    @property
    def height(self) -> int:
        return self.resolution.height

    def replace(self, **changes: Any) -> "FormatParameters":
        return replace(self, **changes)

    def with_clamped_resolution(self, minimum: int = 1) -> "FormatParameters":
        width, height = self.resolution
        return self.replace(resolution=Resolution(max(minimum, int(width)), max(minimum, int(height))))

    # --- Serialization ---

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["resolution"] = list(self.resolution)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FormatParameters":
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}
        for flag in known - {"resolution"}:
            if flag in kwargs:
                kwargs[flag] = bool(kwargs[flag])
        return cls(**kwargs)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> "FormatParameters":
        return cls.from_dict(json.loads(text))
