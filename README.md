# prism

Colour management helpers for working with RGB colour spaces in pure Python.

prism converts colours between encoded and linear forms, between Adobe RGB
(1998) and CIE XYZ, and between CIE XYZ, xyY and Lab. It also generates
RGB↔XYZ transform matrices from primary chromaticities and performs Bradford
chromatic adaptation between white points. Component values of colours are
held at single precision.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `prism.matrix` – `Vector3`, `Matrix3` (three column vectors) and `dot`.
  `Matrix3.inverse()` raises `ValueError` for a non-invertible matrix.
- `prism.ciexyy` – CIE xyY `Color`, with the `D50` and `D65` white points.
- `prism.cielab` – CIE Lab `Color`.
- `prism.ciexyz` – CIE XYZ `Color` (with `to_lab` and `to_v`), `D50` and
  `D65`, `color_from_lab`, `color_from_v`, `color_from_xyy`, the transform
  generators `transform_to_xyz_for_xyy_primaries` and
  `transform_from_xyz_for_xyy_primaries`, and `ChromaticAdaptation` built by
  `adapt_between_xyy_white_points` or `adapt_between_xyz_white_points`.
- `prism.pixel` – integer colour types `RGBA`, `NRGBA` (8-bit) and `RGBA64`,
  `NRGBA64` (16-bit), each with `rgba()` giving 16-bit premultiplied
  components; `PixelFormat`, `Rectangle` and an in-memory `Image` with
  `at(x, y)` and `set(x, y, colour)`.
- `prism.linear` – `normalised_to_8bit`, `normalised_to_9bit`,
  `normalised_to_16bit`, the linear `RGB` type, `rgb_from_encoded`,
  `rgb_from_linear`, and `transform_image_color`, which applies a per-pixel
  function to an image, sharing rows between a number of worker threads.
- `prism.lut` – builders for encoding and decoding look-up tables.
- `prism.adobergb` – Adobe RGB (1998) `Color`, its primaries and white point,
  `from_8bit`/`from_16bit`/`to_8bit`/`to_16bit`, and encoding and
  linearisation of colours (`encode_color`, `linearise_color`) and images
  (`encode_image`, `linearise_image`).

## Examples

Convert an 8-bit Adobe RGB colour to CIE XYZ and then to Lab:

```python
from prism import adobergb, ciexyz
from prism.pixel import NRGBA

colour, alpha = adobergb.color_from_nrgba(NRGBA(200, 120, 40, 255))
xyz = colour.to_xyz()
lab = xyz.to_lab(ciexyz.D65)
print(lab)
```

Adapt a colour from a D50 to a D65 white point:

```python
from prism import ciexyy, ciexyz

adaptation = ciexyz.adapt_between_xyy_white_points(ciexyy.D50, ciexyy.D65)
adapted = adaptation.apply(ciexyz.Color(0.4, 0.3, 0.2))
```

Linearise an Adobe RGB encoded image so it can be resampled or blended
correctly, then encode it again:

```python
from prism import adobergb
from prism.pixel import Image, PixelFormat, Rectangle

src = Image(PixelFormat.NRGBA, Rectangle(0, 0, 4, 4))
linear = Image(PixelFormat.RGBA64, src.bounds)
adobergb.linearise_image(linear, src, 4)

encoded = Image(PixelFormat.RGBA, src.bounds)
adobergb.encode_image(encoded, linear, 4)
```

## What prism does not do

- It does not read or write image files; `Image` lives only in memory and is
  filled pixel by pixel with `set`.
- Adobe RGB (1998) is the only RGB colour space with its own module. Matrices
  for other primaries can be generated with
  `transform_to_xyz_for_xyy_primaries`, but there are no ready-made encoders
  or tone curves for them.
- It has no command-line interface.