# palette_quantize/mmcq.py
from __future__ import annotations

"""
Modified median cut quantization (MMCQ).

A pixel set is bisected along the channel with the widest value range, level
after level, and each final bucket is averaged into one palette colour.
Partitions are kept as a flat generation list that doubles every level; no
tree is built.

Pixel sets are (N,3) uint8 arrays. Every function here accepts anything
as_u8_pixels() accepts and never mutates its input.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple

import numpy as np

from .core_types import PixelsLike, RGBTuple, U8Pixels, as_u8_pixels
from .errors import InvalidLevelsError

LevelCallback = Callable[[int, int], None]  # (level, partition count)


def spread(pixels: PixelsLike) -> RGBTuple:
    """Per-channel (max - min) over the set; (0, 0, 0) when empty."""
    px = as_u8_pixels(pixels)
    if px.shape[0] == 0:
        return (0, 0, 0)
    delta = px.max(axis=0) - px.min(axis=0)
    return (int(delta[0]), int(delta[1]), int(delta[2]))


def split_channel(pixels: PixelsLike) -> int:
    """
    Index of the channel with the largest spread.

    Ties go to the earliest channel: red over green, green over blue.
    """
    dr, dg, db = spread(pixels)
    if dr >= dg and dr >= db:
        return 0
    if dg >= db:
        return 1
    return 2


def partition(pixels: PixelsLike) -> Tuple[U8Pixels, U8Pixels]:
    """
    Bisect a pixel set along its widest channel.

    The set is stably sorted ascending on that channel and cut at n // 2, so
    left gets the lower half and a lone pixel lands on the right.
    """
    px = as_u8_pixels(pixels)
    n = px.shape[0]
    if n == 0:
        empty = np.zeros((0, 3), dtype=np.uint8)
        return empty, empty.copy()

    channel = split_channel(px)
    order = np.argsort(px[:, channel], kind="stable")
    ordered = px[order]
    mid = n // 2
    return ordered[:mid], ordered[mid:]


def average(pixels: PixelsLike) -> RGBTuple:
    """Truncating per-channel mean; (0, 0, 0) when empty."""
    px = as_u8_pixels(pixels)
    n = px.shape[0]
    if n == 0:
        return (0, 0, 0)
    totals = px.sum(axis=0, dtype=np.int64)
    mean = totals // n
    return (int(mean[0]), int(mean[1]), int(mean[2]))


def _check_levels(levels: int) -> int:
    if isinstance(levels, bool) or not isinstance(levels, (int, np.integer)):
        raise InvalidLevelsError(f"levels must be an integer, got {levels!r}")
    if levels < 0:
        raise InvalidLevelsError(f"levels must be >= 0, got {levels}")
    return int(levels)


def _split_generation(
    generation: List[U8Pixels], executor: Optional[ThreadPoolExecutor]
) -> List[U8Pixels]:
    """Partition every set of a generation; children stay in parent order."""
    halves = (
        executor.map(partition, generation)
        if executor is not None
        else map(partition, generation)
    )
    nxt: List[U8Pixels] = []
    for left, right in halves:
        nxt.append(left)
        nxt.append(right)
    return nxt


def quantize(
    pixels: PixelsLike,
    levels: int,
    *,
    workers: int = 1,
    on_level: Optional[LevelCallback] = None,
) -> U8Pixels:
    """
    Reduce a pixel set to a palette of exactly 2**levels colours.

    Args:
      pixels   : (N,3|4) uint8 array or sequence of RGB(A) triples; may be empty
      levels   : number of bisection rounds, >= 0
      workers  : threads used to partition each generation; 1 runs inline
      on_level : called as on_level(level, partitions) after every round.
                 Raising from it aborts the run.

    Returns:
      uint8 [2**levels, 3] palette, in generation order (left child first).

    Notes:
      - levels=0 gives [average(pixels)].
      - Empty partitions average to black, so an empty input yields
        2**levels black entries.
    """
    n_levels = _check_levels(levels)
    generation: List[U8Pixels] = [as_u8_pixels(pixels)]

    executor = ThreadPoolExecutor(max_workers=workers) if workers > 1 else None
    try:
        for level in range(1, n_levels + 1):
            generation = _split_generation(generation, executor)
            if on_level is not None:
                on_level(level, len(generation))
    finally:
        if executor is not None:
            executor.shutdown(wait=True)

    out = np.empty((len(generation), 3), dtype=np.uint8)
    for i, part in enumerate(generation):
        out[i] = average(part)
    return out


__all__ = [
    "LevelCallback",
    "spread",
    "split_channel",
    "partition",
    "average",
    "quantize",
]
