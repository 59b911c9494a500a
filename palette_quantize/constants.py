"""
Tunables shared by the image adapter and the CLI.

- DEFAULT_LEVELS: bisection depth used when the CLI is given no level count
- SWATCH_SIZE: edge length in pixels of one colour in a palette swatch PNG
"""
from __future__ import annotations

# 2**4 = 16 colours
DEFAULT_LEVELS: int = 4

SWATCH_SIZE: int = 32

__all__ = ["DEFAULT_LEVELS", "SWATCH_SIZE"]
