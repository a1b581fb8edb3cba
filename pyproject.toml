[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prism"
version = "0.1.0"
description = "Colour space conversions between Adobe RGB (1998), CIE XYZ, xyY and Lab, with linearisation and encoding of in-memory images."
requires-python = ">=3.10"
dependencies = []
keywords = ["colour", "color", "colour space", "adobe rgb", "cie xyz", "cie lab", "chromatic adaptation", "linearisation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["prism"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
