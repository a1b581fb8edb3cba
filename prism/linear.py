"""Linear normalised RGB values and whole-image colour transforms."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable

from prism.matrix import _f32
from prism.pixel import NRGBA, RGBA, RGBA64, Image

_LUM_R = _f32(0.2126)
_LUM_G = _f32(0.7152)
_LUM_B = _f32(0.0722)


def _scale(v: float, top: int) -> int:
    v = _f32(v)
    if v <= 0:
        return 0
    if v >= 1:
        return top
    return int(_f32(_f32(v * top) + 0.5))


def normalised_to_8bit(v: float) -> int:
    """Clamp and scale a normalised value to the range 0-255."""
    return _scale(v, 255)


def normalised_to_9bit(v: float) -> int:
    """Clamp and scale a normalised value to the range 0-511."""
    return _scale(v, 511)


def normalised_to_16bit(v: float) -> int:
    """Clamp and scale a normalised value to the range 0-65535."""
    return _scale(v, 65535)


def transform_image_color(
    dst: Image,
    src: Image,
    parallelism: int,
    transform_color: Callable[[object], object],
) -> None:
    """Apply ``transform_color`` to every pixel of ``src``, writing to ``dst``.

    Results are written starting at the origin of ``dst``; ``src`` and ``dst``
    may be the same image. Rows are shared out between ``parallelism`` workers.
    """
    bounds = src.bounds
    offset_x = dst.bounds.min_x - bounds.min_x
    offset_y = dst.bounds.min_y - bounds.min_y

    def work(worker_num: int, worker_count: int) -> None:
        for y in range(bounds.min_y + worker_num, bounds.max_y, worker_count):
            for x in range(bounds.min_x, bounds.max_x):
                dst.set(x + offset_x, y + offset_y, transform_color(src.at(x, y)))

    workers = max(1, parallelism)
    if workers == 1:
        work(0, 1)
        return

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(work, n, workers) for n in range(workers)]
        for future in futures:
            future.result()


@dataclass(frozen=True)
class RGB:
    """A linear normalised RGB value in an unspecified colour space."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, _f32(getattr(self, name)))

    def luminance(self) -> float:
        """Return the perceptual luminance of this colour."""
        total = _f32(_f32(_LUM_R * self.r) + _f32(_LUM_G * self.g))
        return _f32(total + _f32(_LUM_B * self.b))

    def to_encoded_nrgba(
        self, alpha: float, trc_encode: Callable[[float], int]
    ) -> NRGBA:
        """Return an encoded 8-bit non-premultiplied colour."""
        return NRGBA(
            trc_encode(self.r),
            trc_encode(self.g),
            trc_encode(self.b),
            normalised_to_8bit(alpha),
        )

    def to_encoded_rgba(self, alpha: float, trc_encode: Callable[[float], int]) -> RGBA:
        """Return an encoded 8-bit premultiplied colour."""
        alpha = _f32(alpha)
        return RGBA(
            trc_encode(_f32(self.r * alpha)),
            trc_encode(_f32(self.g * alpha)),
            trc_encode(_f32(self.b * alpha)),
            normalised_to_8bit(alpha),
        )

    def to_encoded_rgba64(
        self, alpha: float, trc_encode: Callable[[float], int]
    ) -> RGBA64:
        """Return an encoded 16-bit premultiplied colour."""
        alpha = _f32(alpha)
        return RGBA64(
            trc_encode(_f32(self.r * alpha)),
            trc_encode(_f32(self.g * alpha)),
            trc_encode(_f32(self.b * alpha)),
            normalised_to_16bit(alpha),
        )

    def to_linear_rgba64(self, alpha: float) -> RGBA64:
        """Return a linear 16-bit premultiplied colour."""
        alpha = _f32(alpha)
        return RGBA64(
            normalised_to_16bit(_f32(self.r * alpha)),
            normalised_to_16bit(_f32(self.g * alpha)),
            normalised_to_16bit(_f32(self.b * alpha)),
            normalised_to_16bit(alpha),
        )


def rgb_from_encoded(c, trc_decode: Callable[[int], float]) -> tuple[RGB, float]:
    """Decode an encoded colour into linear RGB and a normalised alpha."""
    r, g, b, a = c.rgba()
    if a == 0:
        return RGB(), 0.0

    alpha = _f32(a / 65535)
    return (
        RGB(
            _f32(trc_decode(r)) / alpha,
            _f32(trc_decode(g)) / alpha,
            _f32(trc_decode(b)) / alpha,
        ),
        alpha,
    )


def rgb_from_linear(c) -> tuple[RGB, float]:
    """Convert a linear colour into normalised RGB and a normalised alpha."""
    r, g, b, a = c.rgba()
    if a == 0:
        return RGB(), 0.0

    alpha = float(a)
    return RGB(r / alpha, g / alpha, b / alpha), _f32(alpha / 65535)