"""The CIE XYZ colour space, white point adaptation and RGB primary transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass

from prism import cielab, ciexyy
from prism.matrix import Matrix3, Vector3, _f32

_E = 216.0 / 24389.0
_K = 24389.0 / 27.0
_KE = 8.0


def _component_from_lab(f: float) -> float:
    f3 = math.pow(f, 3)
    if f3 > _E:
        return f3
    return (116 * f - 16) / _K


def _component_to_lab(v: float, wp: float) -> float:
    r = v / wp
    if r > _E:
        return math.pow(r, 1.0 / 3.0)
    return (_K * r + 16) / 116.0


@dataclass(frozen=True)
class Color:
    """A linear normalised colour in CIE XYZ space, held at single precision."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, _f32(getattr(self, name)))

    def to_lab(self, white_point: "Color") -> cielab.Color:
        """Convert to CIE Lab relative to ``white_point``."""
        fx = _component_to_lab(self.x, white_point.x)
        fy = _component_to_lab(self.y, white_point.y)
        fz = _component_to_lab(self.z, white_point.z)
        return cielab.Color(
            l=116 * fy - 16,
            a=500 * (fx - fy),
            b=200 * (fy - fz),
        )

    def to_v(self) -> Vector3:
        """Return this colour as a vector."""
        return Vector3(self.x, self.y, self.z)


D50 = Color(0.9642, 1.0, 0.8251)
D65 = Color(0.95047, 1.0, 1.08883)


def color_from_lab(lab: cielab.Color, white_point: Color) -> Color:
    """Convert a CIE Lab colour to XYZ relative to ``white_point``."""
    fy = (lab.l + 16) / 116
    fx = lab.a / 500 + fy
    fz = fy - lab.b / 200

    xr = _component_from_lab(fx)
    zr = _component_from_lab(fz)

    if lab.l > _KE:
        yr = math.pow((lab.l + 16) / 116, 3)
    else:
        yr = lab.l / _K

    return Color(xr * white_point.x, yr * white_point.y, zr * white_point.z)


def color_from_v(v: Vector3) -> Color:
    """Create a colour from a vector."""
    return Color(v[0], v[1], v[2])


def color_from_xyy(c: ciexyy.Color) -> Color:
    """Convert a CIE xyY colour to XYZ."""
    x = _f32(_f32(c.x * c.yy) / c.y)
    z = _f32(_f32(_f32(_f32(1 - c.x) - c.y) * c.yy) / c.y)
    return Color(x, c.yy, z)


def transform_to_xyz_for_xyy_primaries(
    r: ciexyy.Color, g: ciexyy.Color, b: ciexyy.Color, white_point: ciexyy.Color
) -> Matrix3:
    """Return the column matrix taking RGB in the given primaries to XYZ."""
    m = Matrix3(
        color_from_xyy(r).to_v(),
        color_from_xyy(g).to_v(),
        color_from_xyy(b).to_v(),
    )
    s = m.inverse().mul_v(color_from_xyy(white_point).to_v())
    return Matrix3(*(column.mul_s(scale) for column, scale in zip(m, s)))


def transform_from_xyz_for_xyy_primaries(
    r: ciexyy.Color, g: ciexyy.Color, b: ciexyy.Color, white_point: ciexyy.Color
) -> Matrix3:
    """Return the column matrix taking XYZ to RGB in the given primaries."""
    return transform_to_xyz_for_xyy_primaries(r, g, b, white_point).inverse()


_BRADFORD_FORWARD = Matrix3(
    (0.8951000, -0.7502000, 0.0389000),
    (0.2664000, 1.7135000, -0.0685000),
    (-0.1614000, 0.0367000, 1.0296000),
)

_BRADFORD_INVERSE = _BRADFORD_FORWARD.inverse()


class ChromaticAdaptation(Matrix3):
    """An adaptation between two reference white points in XYZ space."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"ChromaticAdaptation({self[0]!r}, {self[1]!r}, {self[2]!r})"

    def apply(self, c: Color) -> Color:
        """Adapt the colour ``c``."""
        return color_from_v(self.mul_v(c.to_v()))


def adapt_between_xyz_white_points(
    src_white: Color, dst_white: Color
) -> ChromaticAdaptation:
    """Return the adaptation from one XYZ white point to another."""
    src = _BRADFORD_FORWARD.mul_v(src_white.to_v())
    dst = _BRADFORD_FORWARD.mul_v(dst_white.to_v())

    m = Matrix3(
        (dst[0] / src[0], 0, 0),
        (0, dst[1] / src[1], 0),
        (0, 0, dst[2] / src[2]),
    )
    return ChromaticAdaptation(*_BRADFORD_INVERSE.mul_m(m).mul_m(_BRADFORD_FORWARD))


def adapt_between_xyy_white_points(
    src_white: ciexyy.Color, dst_white: ciexyy.Color
) -> ChromaticAdaptation:
    """Return the adaptation from one xyY white point to another."""
    return adapt_between_xyz_white_points(
        color_from_xyy(src_white), color_from_xyy(dst_white)
    )