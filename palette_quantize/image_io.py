# palette_quantize/image_io.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from .constants import SWATCH_SIZE
from .core_types import U8Image, U8Pixels, as_u8_pixels
from .errors import ImageDecodeError, ImageReadError
from .mmcq import quantize

"""
Image I/O helpers: Pillow decoding, raster -> pixel set extraction, and
palette swatch output.
"""

RasterLike = Union[Image.Image, U8Image]


def load_image(path: Path) -> Image.Image:
    """
    Open and fully decode an image with Pillow.

    Raises ImageReadError when the file cannot be opened, ImageDecodeError
    when Pillow does not recognise or cannot decode the data.
    """
    path = Path(path)
    try:
        with Image.open(path) as im:
            im.load()
            return im.copy()
    except UnidentifiedImageError as exc:
        raise ImageDecodeError(f"{path}: unsupported image format") from exc
    except (FileNotFoundError, IsADirectoryError, PermissionError) as exc:
        raise ImageReadError(f"{path}: {exc.strerror or exc}") from exc
    except (OSError, SyntaxError, ValueError) as exc:
        # Pillow reports truncated/corrupt payloads as OSError or SyntaxError.
        raise ImageDecodeError(f"{path}: cannot decode image ({exc})") from exc


_HIGH_BIT_MODES = ("I;16", "I;16L", "I;16B", "I;16N", "I")


def _high_bit_grey_to_rgb(im: Image.Image) -> U8Image:
    """16-bit grey (I;16* or I) to 8-bit RGB, keeping the high byte."""
    wide = np.asarray(im).astype(np.int64)
    narrow = (np.clip(wide, 0, 0xFFFF) >> 8).astype(np.uint8)
    return np.repeat(narrow[..., None], 3, axis=-1)


def _raster_rgb_array(image: RasterLike) -> U8Image:
    if isinstance(image, Image.Image):
        if image.mode in _HIGH_BIT_MODES:
            return _high_bit_grey_to_rgb(image)
        im = image if image.mode == "RGB" else image.convert("RGB")
        return np.asarray(im, dtype=np.uint8)

    arr = np.asarray(image)
    if arr.dtype != np.uint8 or arr.ndim != 3 or arr.shape[-1] not in (3, 4):
        raise TypeError("expected a Pillow image or uint8 (H,W,3/4) array")
    return arr[..., :3]


def extract_pixels(image: RasterLike) -> U8Pixels:
    """
    Flatten a raster into an (N,3) pixel set, alpha discarded.

    Scan order is column-major: every y of column x=0, then x=1, and so on.
    """
    rgb = _raster_rgb_array(image)
    flat = np.ascontiguousarray(rgb.transpose(1, 0, 2)).reshape(-1, 3)
    return as_u8_pixels(flat)


def quantize_image(image: RasterLike, levels: int, **kwargs: Any) -> U8Pixels:
    """extract_pixels() then quantize(); kwargs pass through to quantize()."""
    return quantize(extract_pixels(image), levels, **kwargs)


def quantize_file(path: Path, levels: int, **kwargs: Any) -> U8Pixels:
    """load_image() then quantize_image()."""
    return quantize_image(load_image(path), levels, **kwargs)


def save_palette_swatch(
    path: Path, palette: U8Pixels, swatch: int = SWATCH_SIZE
) -> Path:
    """Save the palette as a one-row strip of square swatches. Always PNG."""
    path = Path(path)
    if path.suffix.lower() != ".png":
        path = path.with_suffix(".png")
    colours = as_u8_pixels(palette)
    if colours.shape[0] == 0:
        raise ValueError("cannot render an empty palette")
    side = max(1, int(swatch))
    strip = np.repeat(colours[None, :, :], side, axis=0)
    strip = np.repeat(strip, side, axis=1)
    Image.fromarray(np.ascontiguousarray(strip)).save(path)
    return path


__all__ = [
    "RasterLike",
    "load_image",
    "extract_pixels",
    "quantize_image",
    "quantize_file",
    "save_palette_swatch",
]
