"""The CIE xyY colour space, used for primaries and white points."""

from __future__ import annotations

from dataclasses import dataclass

from prism.matrix import _f32


@dataclass(frozen=True)
class Color:
    """A colour in CIE xyY space, held at single precision."""

    x: float = 0.0
    y: float = 0.0
    yy: float = 0.0

    def __post_init__(self) -> None:
        for name in ("x", "y", "yy"):
            object.__setattr__(self, name, _f32(getattr(self, name)))


D50 = Color(x=0.34567, y=0.35850, yy=1)
D65 = Color(x=0.31271, y=0.32902, yy=1)