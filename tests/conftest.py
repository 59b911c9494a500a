"""Shared fixtures: small Pillow images written into tmp_path."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

# 1x4 strip; column-major scan yields the pixels left to right.
STRIP_PIXELS = [(8, 0, 0), (0, 4, 0), (8, 4, 0), (0, 0, 6)]


@pytest.fixture
def strip_png(tmp_path: Path) -> Path:
    path = tmp_path / "strip.png"
    arr = np.array([STRIP_PIXELS], dtype=np.uint8)
    Image.fromarray(arr).save(path)
    return path


@pytest.fixture
def noise_png(tmp_path: Path) -> Path:
    path = tmp_path / "noise.png"
    rng = np.random.default_rng(42)
    arr = rng.integers(0, 256, size=(16, 16, 3), dtype=np.uint8)
    Image.fromarray(arr).save(path)
    return path


@pytest.fixture
def garbage_file(tmp_path: Path) -> Path:
    path = tmp_path / "garbage.png"
    path.write_bytes(b"definitely not an image")
    return path
