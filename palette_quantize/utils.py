# palette_quantize/utils.py
from __future__ import annotations

"""
Shared utilities for palette_quantize.

Timing formatters, palette rendering, and tidy print-based logging used by
the CLI.
"""

import sys
from typing import Any, Iterable, List, Tuple

from .core_types import U8Pixels, rgb_to_hex


#  Time formatting


def format_seconds_compact(seconds: float) -> str:
    """Human-friendly seconds: '<ms>ms', '<s>s', or 'Mm Ss'."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f}ms"
    if seconds < 60.0:
        return f"{seconds:.3f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds - 60 * minutes:.1f}s"


# Palette rendering


def format_palette_lines(palette: U8Pixels, upper: bool = True) -> List[str]:
    """One '#RRGGBB' string per palette row, in palette order."""
    return [rgb_to_hex(row, upper=upper) for row in palette]


# Pretty logging


def format_number_compact(value: Any) -> str:
    """Pretty number: 1,234 for ints, compact floats, on/off for bools."""
    if isinstance(value, bool):
        return "on" if value else "off"
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """Format (name, value) pairs as 'Name: value' blocks separated by sep."""
    return sep.join(
        f"{name}{eq}{format_number_compact(value)}" for name, value in pairs
    )


def enable_line_buffered_stdout() -> None:
    """Enable line-buffered stdout when the stream exposes .reconfigure()."""
    reconfig = getattr(sys.stdout, "reconfigure", None)
    if callable(reconfig):
        try:
            reconfig(line_buffering=True, write_through=True)
        except (OSError, ValueError):
            pass


def log(message: str) -> None:
    """Plain log line."""
    print(message, flush=True)


def debug_log(message: str) -> None:
    """Debug log line, kept off stdout so palette output stays pipeable."""
    print(f"[debug] {message}", file=sys.stderr, flush=True)


def error(message: str) -> None:
    """Error log line to stderr."""
    print(f"[error] {message}", file=sys.stderr, flush=True)


__all__ = [
    "format_seconds_compact",
    "format_palette_lines",
    "format_number_compact",
    "key_value_pairs_to_string",
    "enable_line_buffered_stdout",
    "log",
    "debug_log",
    "error",
]
