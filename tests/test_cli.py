"""Tests for the command line renderer."""

import json
import logging

import pytest

from starcollision.cli import main


def _write_scene(tmp_path, scene):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(scene), encoding="utf-8")
    return str(path)


def test_explosion_to_file(tmp_path, explosion_scene, explosion_rows):
    out = tmp_path / "out.csv"
    assert main(["explosion", _write_scene(tmp_path, explosion_scene), "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8").splitlines() == explosion_rows


def test_orbit_to_stdout(tmp_path, capsys, orbit_scene, orbit_rows):
    assert main(["orbit", _write_scene(tmp_path, orbit_scene)]) == 0
    assert capsys.readouterr().out.splitlines() == orbit_rows


def test_missing_scene_file(tmp_path, capsys):
    assert main(["orbit", str(tmp_path / "nope.json")]) == 2
    assert "star-collision:" in capsys.readouterr().err


def test_invalid_scene(tmp_path, capsys, orbit_scene):
    orbit_scene["duration"] = -1
    assert main(["orbit", _write_scene(tmp_path, orbit_scene)]) == 2


def test_degenerate_curve(tmp_path, capsys, explosion_scene):
    explosion_scene["max_length"] = {"points": [{"x": 5, "y": 0, "z": 0}]}
    assert main(["explosion", _write_scene(tmp_path, explosion_scene)]) == 2
    assert "max_length" in capsys.readouterr().err


@pytest.fixture
def root_level():
    root = logging.getLogger()
    saved = root.level
    yield root
    root.setLevel(saved)


@pytest.mark.parametrize("flag, expected", [("DEBUG", logging.DEBUG), ("warning", logging.WARNING)])
def test_log_level_flag(tmp_path, capsys, orbit_scene, root_level, flag, expected):
    assert main(["orbit", _write_scene(tmp_path, orbit_scene), "--log-level", flag]) == 0
    assert root_level.getEffectiveLevel() == expected
