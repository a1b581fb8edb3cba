"""Builders for look-up tables between linear and encoded values."""

from __future__ import annotations

from typing import Callable

from prism.linear import normalised_to_8bit, normalised_to_16bit
from prism.matrix import _f32


def build_linear_to_8bit(encode: Callable[[float], float]) -> list[int]:
    """Return a 512-entry table from 9-bit linear values to 8-bit encoded ones."""
    return [normalised_to_8bit(encode(_f32(i / 511))) for i in range(512)]


def build_linear_to_16bit(encode: Callable[[float], float]) -> list[int]:
    """Return a 65536-entry table from 16-bit linear values to encoded ones."""
    return [normalised_to_16bit(encode(_f32(i / 65535))) for i in range(65536)]


def build_8bit_to_linear(linearise: Callable[[float], float]) -> list[float]:
    """Return a 256-entry table from 8-bit encoded values to linear ones."""
    return [_f32(linearise(_f32(i / 255))) for i in range(256)]


def build_16bit_to_linear(linearise: Callable[[float], float]) -> list[float]:
    """Return a 65536-entry table from 16-bit encoded values to linear ones."""
    return [_f32(linearise(_f32(i / 65535))) for i in range(65536)]