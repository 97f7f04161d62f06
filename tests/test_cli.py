"""Tests for the command-line entry point."""

import pytest
import matplotlib.pyplot as plt
from py_heightmap.cli import build_parser, main


class TestCLI:
    """Test argument handling and output."""

    def test_output_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_defaults_from_settings(self):
        args = build_parser().parse_args(["-o", "map.png"])
        assert args.size == 32
        assert args.samples == 16
        assert args.blur == 1
        assert args.scale == 1.0
        assert args.levels == 4
        assert args.block_step == 8
        assert args.ladders_per_block == 2

    def test_generates_png(self, tmp_path):
        output = tmp_path / "map.png"
        code = main(["--size", "16", "--samples", "8", "--seed", "cli", "-o", str(output)])

        assert code == 0
        assert output.exists()
        assert plt.imread(output).shape[:2] == (16, 16)

    def test_invalid_size(self, tmp_path):
        output = tmp_path / "bad.png"
        code = main(["--size", "10", "-o", str(output)])

        assert code == 2
        assert not output.exists()

    def test_invalid_block_step(self, tmp_path):
        output = tmp_path / "bad.png"
        code = main(["--size", "16", "--block-step", "3", "-o", str(output)])

        assert code == 2
        assert not output.exists()

    def test_size_limit(self, tmp_path, monkeypatch):
        from py_heightmap import cli

        monkeypatch.setattr(cli.settings, "max_size", 8)
        output = tmp_path / "big.png"
        assert main(["--size", "16", "-o", str(output)]) == 2
        assert not output.exists()
