"""Integer colour values and a simple in-memory raster image."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol

_MAX8 = 0xFF
_MAX16 = 0xFFFF


class _Colour(Protocol):
    def rgba(self) -> tuple[int, int, int, int]: ...


def _validate(colour, limit: int) -> None:
    for name in ("r", "g", "b", "a"):
        value = getattr(colour, name)
        if not isinstance(value, int) or not 0 <= value <= limit:
            raise ValueError(
                f"{type(colour).__name__}.{name} must be an integer in 0..{limit}, "
                f"got {value!r}"
            )


@dataclass(frozen=True)
class RGBA:
    """An 8-bit alpha-premultiplied colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        _validate(self, _MAX8)

    def rgba(self) -> tuple[int, int, int, int]:
        """Return 16-bit premultiplied components."""
        return (self.r * 0x101, self.g * 0x101, self.b * 0x101, self.a * 0x101)


@dataclass(frozen=True)
class NRGBA:
    """An 8-bit colour with non-premultiplied alpha."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        _validate(self, _MAX8)

    def rgba(self) -> tuple[int, int, int, int]:
        """Return 16-bit premultiplied components."""
        a = self.a * 0x101
        return (
            self.r * 0x101 * a // _MAX16,
            self.g * 0x101 * a // _MAX16,
            self.b * 0x101 * a // _MAX16,
            a,
        )


@dataclass(frozen=True)
class RGBA64:
    """A 16-bit alpha-premultiplied colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        _validate(self, _MAX16)

    def rgba(self) -> tuple[int, int, int, int]:
        """Return 16-bit premultiplied components."""
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class NRGBA64:
    """A 16-bit colour with non-premultiplied alpha."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        _validate(self, _MAX16)

    def rgba(self) -> tuple[int, int, int, int]:
        """Return 16-bit premultiplied components."""
        a = self.a
        return (self.r * a // _MAX16, self.g * a // _MAX16, self.b * a // _MAX16, a)


def _to_rgba(c: _Colour) -> RGBA:
    if isinstance(c, RGBA):
        return c
    r, g, b, a = c.rgba()
    return RGBA(r >> 8, g >> 8, b >> 8, a >> 8)


def _to_rgba64(c: _Colour) -> RGBA64:
    if isinstance(c, RGBA64):
        return c
    return RGBA64(*c.rgba())


def _to_nrgba(c: _Colour) -> NRGBA:
    if isinstance(c, NRGBA):
        return c
    r, g, b, a = c.rgba()
    if a == _MAX16:
        return NRGBA(r >> 8, g >> 8, b >> 8, _MAX8)
    if a == 0:
        return NRGBA()
    return NRGBA(
        (r * _MAX16 // a) >> 8,
        (g * _MAX16 // a) >> 8,
        (b * _MAX16 // a) >> 8,
        a >> 8,
    )


def _to_nrgba64(c: _Colour) -> NRGBA64:
    if isinstance(c, NRGBA64):
        return c
    r, g, b, a = c.rgba()
    if a == _MAX16:
        return NRGBA64(r, g, b, _MAX16)
    if a == 0:
        return NRGBA64()
    return NRGBA64(r * _MAX16 // a, g * _MAX16 // a, b * _MAX16 // a, a)


class PixelFormat(Enum):
    """The storage format of an image's pixels."""

    RGBA = "rgba"
    NRGBA = "nrgba"
    RGBA64 = "rgba64"
    NRGBA64 = "nrgba64"


_CONVERTERS: dict[PixelFormat, Callable[[_Colour], _Colour]] = {
    PixelFormat.RGBA: _to_rgba,
    PixelFormat.NRGBA: _to_nrgba,
    PixelFormat.RGBA64: _to_rgba64,
    PixelFormat.NRGBA64: _to_nrgba64,
}


@dataclass(frozen=True)
class Rectangle:
    """A half-open rectangle of pixel coordinates."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    def dx(self) -> int:
        """Return the width."""
        return self.max_x - self.min_x

    def dy(self) -> int:
        """Return the height."""
        return self.max_y - self.min_y


class Image:
    """A raster image whose pixels are stored in one pixel format.

    Reading outside the bounds gives the zero colour; writing outside them
    does nothing.
    """

    def __init__(self, pixel_format: PixelFormat, bounds: Rectangle) -> None:
        if bounds.dx() < 0 or bounds.dy() < 0:
            raise ValueError(f"invalid image bounds {bounds!r}")
        self.pixel_format = pixel_format
        self.bounds = bounds
        self._convert = _CONVERTERS[pixel_format]
        self._zero = self._convert(RGBA())
        self._pixels = [self._zero] * (bounds.dx() * bounds.dy())

    def __repr__(self) -> str:
        return f"Image({self.pixel_format}, {self.bounds!r})"

    def _index(self, x: int, y: int) -> int | None:
        b = self.bounds
        if not (b.min_x <= x < b.max_x and b.min_y <= y < b.max_y):
            return None
        return (y - b.min_y) * b.dx() + (x - b.min_x)

    def at(self, x: int, y: int):
        """Return the colour of the pixel at (x, y)."""
        index = self._index(x, y)
        return self._zero if index is None else self._pixels[index]

    def set(self, x: int, y: int, colour: _Colour) -> None:
        """Store ``colour`` at (x, y), converting it to this image's format."""
        index = self._index(x, y)
        if index is not None:
            self._pixels[index] = self._convert(colour)