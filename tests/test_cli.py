"""Tests for the command-line interface."""

import os

from pathgeom.cli import main
from pathgeom.svg.parser import parse_path


class TestCli:
    """End-to-end CLI commands."""

    def test_bounds(self, capsys):
        assert main(["bounds", "M0,0 L10,0 L10,10 Z"]) == 0
        assert capsys.readouterr().out.strip() == "0 0 10 10"

    def test_bounds_tight(self, capsys):
        assert main(["bounds", "--tight", "M0,0 C2,10 8,10 10,0"]) == 0
        values = [float(v) for v in capsys.readouterr().out.split()]
        assert abs(values[3] - 7.5) < 1e-3

    def test_bounds_empty(self, capsys):
        assert main(["bounds", ""]) == 1

    def test_invalid_path_exit_code(self, capsys):
        assert main(["bounds", "M0,0 L1"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_transform_fit_flipped(self, capsys):
        assert main(["transform", "M0,0 L1,0 L0,1", "--fit", "10", "0", "0", "10"]) == 0
        out = capsys.readouterr().out.strip()
        assert out == "M10.000,0.000 L0.000,0.000 L10.000,10.000"

    def test_transform_move_uses_config_precision(self, capsys, config_file):
        assert main(["transform", "M0,0 L1,1", "--move", "1", "2", "--config", config_file]) == 0
        assert capsys.readouterr().out.strip() == "M1.0,2.0 L2.0,3.0"

    def test_shape_star(self, capsys):
        assert main(["shape", "star", "0", "0", "10", "5", "5"]) == 0
        path = parse_path(capsys.readouterr().out.strip())
        assert len(path.points) == 10
        assert path.closed

    def test_shape_ellipse(self, capsys):
        assert main(["shape", "ellipse", "0", "0", "10", "10"]) == 0
        assert capsys.readouterr().out.strip().endswith("Z")

    def test_export(self, temp_dir, capsys):
        out = os.path.join(temp_dir, "out", "paths.svg")
        assert main(["export", "M0,0 L10,0", "M5,5 Q8,8 10,5", "--out", out]) == 0
        with open(out, encoding="utf-8") as f:
            content = f.read()
        assert content.count("<path") == 2

    def test_init_config(self, temp_dir, capsys):
        out = os.path.join(temp_dir, "cfg.yaml")
        assert main(["init-config", "--out", out]) == 0
        assert os.path.exists(out)

    def test_no_command(self, capsys):
        assert main([]) == 0
