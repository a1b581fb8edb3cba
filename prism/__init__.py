"""Colour space conversion, linearisation and chromatic adaptation."""

__version__ = "0.1.0"

__all__ = [
    "adobergb",
    "cielab",
    "ciexyy",
    "ciexyz",
    "linear",
    "lut",
    "matrix",
    "pixel",
]