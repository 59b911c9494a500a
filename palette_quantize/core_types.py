# palette_quantize/core_types.py
from __future__ import annotations

"""
Core type aliases and small RGB helpers.
"""

from typing import List, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]
HexStr = str

U8Pixels = NDArray[np.uint8]  # (N, 3) flat pixel set
U8Image = NDArray[np.uint8]  # (H, W, 3|4)

PixelsLike = Union[Sequence[Sequence[int]], NDArray[np.generic]]


# Small helpers


def as_u8_pixels(pixels: PixelsLike) -> U8Pixels:
    """
    Coerce a sequence of RGB(A) triples or an (N,3|4) array to a contiguous
    (N,3) uint8 array. Alpha columns are dropped.
    """
    if isinstance(pixels, np.ndarray) and pixels.dtype == np.uint8:
        arr = pixels
    else:
        arr = np.asarray(pixels)
        if arr.size == 0:
            return np.zeros((0, 3), dtype=np.uint8)
        if not np.issubdtype(arr.dtype, np.integer):
            raise TypeError(f"expected integer channel values, got {arr.dtype}")
        if arr.min() < 0 or arr.max() > 255:
            raise ValueError("channel values must lie in 0..255")
        arr = arr.astype(np.uint8)

    if arr.size == 0:
        return np.zeros((0, 3), dtype=np.uint8)
    if arr.ndim != 2 or arr.shape[1] not in (3, 4):
        raise ValueError(f"expected (N,3) or (N,4) pixels, got shape {arr.shape}")
    return np.ascontiguousarray(arr[:, :3])


def rgb_to_hex(rgb: Sequence[int], upper: bool = True) -> HexStr:
    """RGB triple to '#RRGGBB' ('#rrggbb' with upper=False)."""
    text = f"#{int(rgb[0]):02x}{int(rgb[1]):02x}{int(rgb[2]):02x}"
    return text.upper() if upper else text


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """Parse '#rgb' or '#rrggbb' (case-insensitive) into an RGB tuple."""
    s = hex_str.strip().lower()
    if not s.startswith("#"):
        raise ValueError("hex must start with '#'")
    if len(s) == 4:
        r, g, b = s[1], s[2], s[3]
        s = f"#{r}{r}{g}{g}{b}{b}"
    if len(s) != 7:
        raise ValueError("hex must be '#rrggbb' or '#rgb'")
    return (int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))


def coerce_to_rgb_tuple(value: Union[Sequence[int], NDArray[np.generic]]) -> RGBTuple:
    """Coerce a 3+ length sequence or array row to an (int, int, int) tuple."""
    if len(value) < 3:  # type: ignore[arg-type]
        raise ValueError("sequence too small for RGB")
    return (int(value[0]), int(value[1]), int(value[2]))


def palette_to_tuples(palette: U8Pixels) -> List[RGBTuple]:
    """(P,3) palette array to a list of plain int tuples."""
    return [coerce_to_rgb_tuple(row) for row in palette]


__all__ = [
    "RGBTuple",
    "HexStr",
    "U8Pixels",
    "U8Image",
    "PixelsLike",
    "as_u8_pixels",
    "rgb_to_hex",
    "hex_to_rgb",
    "coerce_to_rgb_tuple",
    "palette_to_tuples",
]
