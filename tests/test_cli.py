"""Tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from palette_quantize.cli import main, parse_cli_args
from palette_quantize.constants import DEFAULT_LEVELS


def test_parse_defaults(tmp_path: Path) -> None:
    args = parse_cli_args([str(tmp_path / "a.png")])
    assert args.image == tmp_path / "a.png"
    assert args.levels == DEFAULT_LEVELS == 4
    assert args.workers == 1
    assert args.swatch is None
    assert not args.lower
    assert not args.debug


def test_prints_hex_lines(strip_png: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(strip_png), "1"]) == 0
    out, err = capsys.readouterr()
    assert out.splitlines() == ["#000203", "#080200"]
    assert err == ""


def test_default_level_count(
    noise_png: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main([str(noise_png)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 16
    assert all(len(line) == 7 and line.startswith("#") for line in lines)
    assert all(line == line.upper() for line in lines)


def test_lowercase_and_swatch(
    noise_png: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    swatch = tmp_path / "pal.png"
    assert main([str(noise_png), "2", "--lower", "--swatch", str(swatch)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert all(line == line.lower() for line in lines)
    with Image.open(swatch) as im:
        assert im.size == (4 * 32, 32)


def test_debug_goes_to_stderr(
    strip_png: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main([str(strip_png), "2", "--debug", "--workers", "2"]) == 0
    out, err = capsys.readouterr()
    assert out.splitlines() == ["#000400", "#000006", "#080000", "#080400"]
    assert "[debug] Loaded: 4x1" in err
    assert "level 1/2: partitions=2" in err
    assert "level 2/2: partitions=4" in err


def test_missing_file_exit_status(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main([str(tmp_path / "missing.png")]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("[error] quantize: ")


def test_undecodable_file_exit_status(
    garbage_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main([str(garbage_file)]) == 1
    assert "unsupported image format" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["x.png", "four"],
        ["x.png", "-1"],
        ["x.png", "--workers", "0"],
    ],
    ids=["no-image", "bad-levels", "negative-levels", "zero-workers"],
)
def test_bad_arguments_exit_2(argv, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2
    assert "usage:" in capsys.readouterr().err
