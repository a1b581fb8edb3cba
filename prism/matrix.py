"""Small fixed-size vector and matrix maths used by the colour transforms."""

from __future__ import annotations

import math
import struct

_F32 = struct.Struct("<f")


def _f32(value: float) -> float:
    """Round a float to the nearest single-precision value."""
    try:
        return _F32.unpack(_F32.pack(value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class Vector3(tuple):
    """A three-element vector of double-precision values."""

    __slots__ = ()

    def __new__(cls, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> "Vector3":
        return super().__new__(cls, (float(x), float(y), float(z)))

    def __getnewargs__(self) -> tuple[float, float, float]:
        return tuple(self)

    def __repr__(self) -> str:
        return f"Vector3({self[0]!r}, {self[1]!r}, {self[2]!r})"

    def mul_s(self, s: float) -> "Vector3":
        """Return this vector scaled by ``s``."""
        return Vector3(self[0] * s, self[1] * s, self[2] * s)


def dot(v1: Vector3, v2: Vector3) -> float:
    """Return the dot product of two vectors."""
    return v1[0] * v2[0] + v1[1] * v2[1] + v1[2] * v2[2]


class Matrix3(tuple):
    """A 3x3 matrix stored as three column vectors."""

    __slots__ = ()

    def __new__(
        cls,
        c0=(0.0, 0.0, 0.0),
        c1=(0.0, 0.0, 0.0),
        c2=(0.0, 0.0, 0.0),
    ) -> "Matrix3":
        return super().__new__(cls, (Vector3(*c0), Vector3(*c1), Vector3(*c2)))

    def __getnewargs__(self) -> tuple[Vector3, Vector3, Vector3]:
        return tuple(self)

    def __repr__(self) -> str:
        return f"Matrix3({self[0]!r}, {self[1]!r}, {self[2]!r})"

    def inverse(self) -> "Matrix3":
        """Return the inverse of this matrix.

        Raises ValueError if the matrix is not invertible.
        """
        m = self
        o = [
            [
                m[1][1] * m[2][2] - m[2][1] * m[1][2],
                -(m[0][1] * m[2][2] - m[2][1] * m[0][2]),
                m[0][1] * m[1][2] - m[1][1] * m[0][2],
            ],
            [
                -(m[1][0] * m[2][2] - m[2][0] * m[1][2]),
                m[0][0] * m[2][2] - m[2][0] * m[0][2],
                -(m[0][0] * m[1][2] - m[1][0] * m[0][2]),
            ],
            [
                m[1][0] * m[2][1] - m[2][0] * m[1][1],
                -(m[0][0] * m[2][1] - m[2][0] * m[0][1]),
                m[0][0] * m[1][1] - m[1][0] * m[0][1],
            ],
        ]

        det = m[0][0] * o[0][0] + m[1][0] * o[0][1] + m[2][0] * o[0][2]
        if det == 0:
            raise ValueError("matrix is non-invertible")

        return Matrix3(*((value / det for value in column) for column in o))

    def mul_m(self, o: "Matrix3") -> "Matrix3":
        """Return the product of this matrix and ``o``."""
        t = self.transpose()
        return Matrix3(
            *((dot(t[0], col), dot(t[1], col), dot(t[2], col)) for col in o)
        )

    def mul_v(self, v: Vector3) -> Vector3:
        """Return the product of this matrix and the vector ``v``."""
        m = self
        return Vector3(
            m[0][0] * v[0] + m[1][0] * v[1] + m[2][0] * v[2],
            m[0][1] * v[0] + m[1][1] * v[1] + m[2][1] * v[2],
            m[0][2] * v[0] + m[1][2] * v[1] + m[2][2] * v[2],
        )

    def transpose(self) -> "Matrix3":
        """Return the transpose of this matrix."""
        m = self
        return Matrix3(
            (m[0][0], m[1][0], m[2][0]),
            (m[0][1], m[1][1], m[2][1]),
            (m[0][2], m[1][2], m[2][2]),
        )