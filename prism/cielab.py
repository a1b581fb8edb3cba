"""The CIE Lab colour space."""

from __future__ import annotations

from dataclasses import dataclass

from prism.matrix import _f32


@dataclass(frozen=True)
class Color:
    """A colour in CIE Lab space, held at single precision."""

    l: float = 0.0  # noqa: E741
    a: float = 0.0
    b: float = 0.0

    def __post_init__(self) -> None:
        for name in ("l", "a", "b"):
            object.__setattr__(self, name, _f32(getattr(self, name)))