# palette_quantize/__main__.py
"""Run the CLI with `python -m palette_quantize`."""

import sys

from .cli import main

sys.exit(main())
