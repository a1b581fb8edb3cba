"""The Adobe RGB (1998) colour space."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cache

from prism import ciexyy, ciexyz
from prism.linear import (
    RGB,
    normalised_to_9bit,
    normalised_to_16bit,
    rgb_from_encoded,
    rgb_from_linear,
    transform_image_color,
)
from prism.lut import (
    build_8bit_to_linear,
    build_16bit_to_linear,
    build_linear_to_8bit,
    build_linear_to_16bit,
)
from prism.matrix import _f32
from prism.pixel import NRGBA, RGBA, RGBA64, Image

PRIMARY_RED = ciexyy.Color(x=0.64, y=0.33, yy=1)
PRIMARY_GREEN = ciexyy.Color(x=0.21, y=0.71, yy=1)
PRIMARY_BLUE = ciexyy.Color(x=0.15, y=0.06, yy=1)
STANDARD_WHITE_POINT = ciexyy.D65


def _encoded_to_linear(v: float) -> float:
    return _f32(math.pow(v, 563.0 / 256))


def _linear_to_encoded(v: float) -> float:
    return _f32(math.pow(v, 256.0 / 563))


_LINEAR_TO_ENCODED8 = build_linear_to_8bit(_linear_to_encoded)
_ENCODED8_TO_LINEAR = build_8bit_to_linear(_encoded_to_linear)


@cache
def _encoded16_to_linear() -> list[float]:
    return build_16bit_to_linear(_encoded_to_linear)


@cache
def _linear_to_encoded16() -> list[int]:
    return build_linear_to_16bit(_linear_to_encoded)


def _check(v: int, limit: int) -> int:
    if not 0 <= v <= limit:
        raise ValueError(f"encoded value must be in 0..{limit}, got {v!r}")
    return v


def from_8bit(v: int) -> float:
    """Convert an 8-bit encoded value to a normalised linear value."""
    return _ENCODED8_TO_LINEAR[_check(v, 0xFF)]


def from_16bit(v: int) -> float:
    """Convert a 16-bit encoded value to a normalised linear value."""
    return _encoded16_to_linear()[_check(v, 0xFFFF)]


def to_8bit(v: float) -> int:
    """Convert a linear value, clipped to 0.0-1.0, to an 8-bit encoded value."""
    return _LINEAR_TO_ENCODED8[normalised_to_9bit(v)]


def to_16bit(v: float) -> int:
    """Convert a linear value, clipped to 0.0-1.0, to a 16-bit encoded value."""
    return _linear_to_encoded16()[normalised_to_16bit(v)]


def _combine(row: tuple[float, float, float], a: float, b: float, c: float) -> float:
    k0, k1, k2 = row
    return _f32(_f32(_f32(a * k0) + _f32(b * k1)) + _f32(c * k2))


_TO_XYZ = tuple(
    tuple(_f32(k) for k in row)
    for row in (
        (0.5766680793281725, 0.1855619421659935, 0.18819852398084014),
        (0.29734448781899253, 0.6273761097678748, 0.07527940241313279),
        (0.027031317880049893, 0.07069030664147563, 0.9911788223702592),
    )
)

_FROM_XYZ = tuple(
    tuple(_f32(k) for k in row)
    for row in (
        (2.0415913017647322, -0.5650078698012716, -0.34473195659062167),
        (-0.9692242864995342, 1.8759299885141114, 0.04155424903337176),
        (0.013446472278330708, -0.11838142234726094, 1.01533754937275),
    )
)


@dataclass(frozen=True)
class Color(RGB):
    """A linear normalised colour in Adobe RGB (1998) space."""

    def to_nrgba(self, alpha: float) -> NRGBA:
        """Return an encoded 8-bit non-premultiplied colour."""
        return self.to_encoded_nrgba(alpha, to_8bit)

    def to_rgba(self, alpha: float) -> RGBA:
        """Return an encoded 8-bit premultiplied colour."""
        return self.to_encoded_rgba(alpha, to_8bit)

    def to_rgba64(self, alpha: float) -> RGBA64:
        """Return an encoded 16-bit premultiplied colour."""
        return self.to_encoded_rgba64(alpha, to_16bit)

    def to_xyz(self) -> ciexyz.Color:
        """Return the CIE XYZ representation of this colour."""
        return ciexyz.Color(*(_combine(row, self.r, self.g, self.b) for row in _TO_XYZ))


def color_from_encoded_color(c) -> tuple[Color, float]:
    """Decode an Adobe RGB encoded colour; alpha is returned normalised."""
    rgb, alpha = rgb_from_encoded(c, from_16bit)
    return Color(rgb.r, rgb.g, rgb.b), alpha


def color_from_linear(r: float, g: float, b: float) -> Color:
    """Create a colour from a linear normalised RGB triplet."""
    return Color(r, g, b)


def color_from_linear_color(c) -> tuple[Color, float]:
    """Create a colour from a linear colour value; alpha is returned normalised."""
    rgb, alpha = rgb_from_linear(c)
    return Color(rgb.r, rgb.g, rgb.b), alpha


def color_from_nrgba(c: NRGBA) -> tuple[Color, float]:
    """Interpret an 8-bit non-premultiplied colour as Adobe RGB encoded."""
    return Color(from_8bit(c.r), from_8bit(c.g), from_8bit(c.b)), _f32(c.a / 255)


def color_from_rgba(c: RGBA) -> tuple[Color, float]:
    """Interpret an 8-bit premultiplied colour as Adobe RGB encoded."""
    if c.a == 0:
        return Color(), 0.0
    alpha = _f32(c.a / 255)
    return (
        Color(from_8bit(c.r) / alpha, from_8bit(c.g) / alpha, from_8bit(c.b) / alpha),
        alpha,
    )


def color_from_xyz(c: ciexyz.Color) -> Color:
    """Create an Adobe RGB colour from a CIE XYZ colour."""
    return color_from_linear(*(_combine(row, c.x, c.y, c.z) for row in _FROM_XYZ))


def encode_color(c) -> RGBA64:
    """Convert a linear colour value to an Adobe RGB encoded one."""
    col, alpha = color_from_linear_color(c)
    return col.to_rgba64(alpha)


def linearise_color(c) -> RGBA64:
    """Convert an Adobe RGB encoded colour to a linear one."""
    col, alpha = color_from_encoded_color(c)
    return col.to_linear_rgba64(alpha)


def encode_image(dst: Image, src: Image, parallelism: int) -> None:
    """Encode a linear image as Adobe RGB, writing to ``dst`` at its origin."""
    transform_image_color(dst, src, parallelism, encode_color)


def linearise_image(dst: Image, src: Image, parallelism: int) -> None:
    """Linearise an Adobe RGB encoded image, writing to ``dst`` at its origin."""
    transform_image_color(dst, src, parallelism, linearise_color)