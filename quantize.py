#!/usr/bin/env python3
"""
quantize.py
Print the dominant colours of an image as '#RRGGBB' lines (median cut).

Usage:
  python quantize.py IMAGE [LEVELS] --workers N --swatch OUT.png --lower --debug

See palette_quantize.cli for the options and exit codes.
"""

import sys

from palette_quantize.cli import main

if __name__ == "__main__":
    sys.exit(main())
