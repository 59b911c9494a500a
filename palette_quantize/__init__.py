# palette_quantize/__init__.py
"""
palette_quantize package.

Purpose:
  Reduce a pixel set or image to a small representative palette with
  modified median cut quantization (MMCQ). See quantize.py for the CLI.

Public API:
  quantize        : pixel set -> palette of 2**levels colours.
  quantize_image  : Pillow image or (H,W,3|4) array -> palette.
  quantize_file   : image path -> palette.
  spread, partition, average : the MMCQ building blocks.
  core_types      : shared aliases and RGB/hex helpers.
  errors          : QuantizeError and its named failure kinds.

Quick start:
  from palette_quantize import quantize_file, rgb_to_hex
  for row in quantize_file("photo.jpg", 3):
      print(rgb_to_hex(row))
"""

__version__ = "0.1.0"

from . import core_types
from . import errors
from . import mmcq
from . import image_io

from .core_types import rgb_to_hex, palette_to_tuples  # noqa: E402,F401
from .errors import (  # noqa: E402,F401
    QuantizeError,
    InvalidLevelsError,
    ImageReadError,
    ImageDecodeError,
)
from .mmcq import spread, partition, average, quantize  # noqa: E402,F401
from .image_io import (  # noqa: E402,F401
    extract_pixels,
    load_image,
    quantize_image,
    quantize_file,
    save_palette_swatch,
)

__all__ = [
    "__version__",
    "core_types",
    "errors",
    "mmcq",
    "image_io",
    "rgb_to_hex",
    "palette_to_tuples",
    "QuantizeError",
    "InvalidLevelsError",
    "ImageReadError",
    "ImageDecodeError",
    "spread",
    "partition",
    "average",
    "quantize",
    "extract_pixels",
    "load_image",
    "quantize_image",
    "quantize_file",
    "save_palette_swatch",
]
