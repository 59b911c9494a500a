# palette_quantize/cli.py
"""
Print the dominant colours of an image as '#RRGGBB' lines.

Usage:
  python quantize.py IMAGE [LEVELS] --workers N --swatch OUT.png --lower --debug

Arguments:
  IMAGE  : any Pillow-readable image. Alpha is ignored.
  LEVELS : bisection depth, >= 0 (default 4). The palette has 2**LEVELS colours.

Exit status:
  0 on success, 1 when the image cannot be read or decoded, 2 on bad arguments.
"""

from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import List, Optional, Sequence

from .constants import DEFAULT_LEVELS
from .errors import ImageDecodeError
from .image_io import extract_pixels, load_image, save_palette_swatch
from .mmcq import quantize
from .utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_palette_lines,
    format_seconds_compact,
    key_value_pairs_to_string,
    log,
)

PROG = "quantize"


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid level count: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"level count must be >= 0, got {value}")
    return value


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        image: Path to the input image
        levels: int bisection depth
        workers: threads used per partition level
        swatch: optional Path for a PNG swatch strip
        lower: bool, print lowercase hex
        debug: bool for timings and per-level details
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Reduce an image to 2**LEVELS representative colours (median cut).",
    )
    parser.add_argument("image", type=Path, help="Input image file")
    parser.add_argument(
        "levels",
        nargs="?",
        type=_non_negative_int,
        default=DEFAULT_LEVELS,
        help=f"Bisection depth; palette size is 2**LEVELS (default {DEFAULT_LEVELS})",
    )
    parser.add_argument(
        "--workers", type=_positive_int, default=1, help="Threads per level"
    )
    parser.add_argument(
        "--swatch",
        type=Path,
        default=None,
        help="Also write the palette as a PNG strip",
    )
    parser.add_argument("--lower", action="store_true", help="Lowercase hex output")
    parser.add_argument(
        "--debug", action="store_true", help="Timings and level details"
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> List[str]:
    """Load -> extract -> quantize -> (swatch). Returns the hex lines."""
    t_start = time.perf_counter()
    image = load_image(args.image)
    pixels = extract_pixels(image)
    t_loaded = time.perf_counter()

    if args.debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Loaded", f"{image.width}x{image.height}"),
                    ("Mode", image.mode),
                    ("Pixels", int(pixels.shape[0])),
                    ("Levels", args.levels),
                    ("Workers", args.workers),
                ]
            )
        )

    def _on_level(level: int, partitions: int) -> None:
        elapsed = format_seconds_compact(time.perf_counter() - t_loaded)
        debug_log(
            f"level {level}/{args.levels}: partitions={partitions:,}  t={elapsed}"
        )

    palette = quantize(
        pixels,
        args.levels,
        workers=args.workers,
        on_level=_on_level if args.debug else None,
    )
    t_done = time.perf_counter()

    if args.swatch is not None:
        written = save_palette_swatch(args.swatch, palette)
        if args.debug:
            debug_log(f"wrote swatch {written}")

    if args.debug:
        debug_log(
            f"Total {format_seconds_compact(time.perf_counter() - t_start)}  "
            f"(load={format_seconds_compact(t_loaded - t_start)}, "
            f"quantize={format_seconds_compact(t_done - t_loaded)})"
        )
    return format_palette_lines(palette, upper=not args.lower)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)
    try:
        lines = run(args)
    except (OSError, ImageDecodeError) as exc:
        error(f"{PROG}: {exc}")
        return 1
    for line in lines:
        log(line)
    return 0


__all__ = ["parse_cli_args", "run", "main"]
