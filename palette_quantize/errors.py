# palette_quantize/errors.py
"""
Failure kinds raised at the package boundary.

The quantizer itself is total on valid input; these cover bad arguments and
the file/decoder layer.
"""


class QuantizeError(Exception):
    """Base class for every error raised by palette_quantize."""


class InvalidLevelsError(QuantizeError, ValueError):
    """Level count is not a non-negative integer."""


class ImageReadError(QuantizeError, OSError):
    """Image file is missing or cannot be read."""


class ImageDecodeError(QuantizeError, ValueError):
    """Image data is corrupt or in an unsupported format."""


__all__ = [
    "QuantizeError",
    "InvalidLevelsError",
    "ImageReadError",
    "ImageDecodeError",
]
