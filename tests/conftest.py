"""Shared fixtures: small scenes whose colors are easy to work out by hand."""

import pytest

from starcollision.geometry import Point3, PolylineCurve


def pt(x, y, z):
    return Point3(x=x, y=y, z=z)


@pytest.fixture
def origin() -> Point3:
    return pt(0, 0, 0)


@pytest.fixture
def torus_line() -> PolylineCurve:
    """Length 10 along X; its X coordinate doubles as torus progress."""
    return PolylineCurve.line(pt(0, 0, 0), pt(10, 0, 0))


@pytest.fixture
def ray_up_line() -> PolylineCurve:
    return PolylineCurve.line(pt(0, 0, 0), pt(0, 0, 10))


@pytest.fixture
def still_curve() -> PolylineCurve:
    """Zero-length curve sitting at the origin."""
    return PolylineCurve(points=[pt(0, 0, 0)])


@pytest.fixture
def explosion_scene() -> dict:
    """Two frames, one LED in the upper ray and one in the torus at frame 1."""
    return {
        "leds": [{"x": 0, "y": 0, "z": 3}, {"x": 8, "y": 0, "z": 0}],
        "fps": 2,
        "duration": 1,
        "origin": {"x": 0, "y": 0, "z": 0},
        "max_length": {"points": [{"x": 0, "y": 0, "z": 0}, {"x": 10, "y": 0, "z": 0}]},
        "radius": 1,
        "path": {"points": [{"x": 0, "y": 0, "z": 0}, {"x": 0, "y": 0, "z": 10}]},
        "path2": {"points": [{"x": 0, "y": 0, "z": 0}]},
    }


@pytest.fixture
def explosion_rows() -> list:
    return [
        "FRAME_ID,R_0,G_0,B_0,R_1,G_1,B_1",
        "0,0,0,0,0,0,0",
        "1,128,64,112,64,80,128",
    ]


@pytest.fixture
def orbit_scene() -> dict:
    """Sphere one steps across three LEDs; sphere two sits far away."""
    return {
        "leds": [{"x": 0, "y": 0, "z": 0}, {"x": 5, "y": 0, "z": 0}, {"x": 10, "y": 0, "z": 0}],
        "fps": 3,
        "duration": 1,
        "radius": 1,
        "path": {"points": [{"x": 0, "y": 0, "z": 0}, {"x": 15, "y": 0, "z": 0}]},
        "path2": {"points": [{"x": 100, "y": 100, "z": 100}]},
    }


@pytest.fixture
def orbit_rows() -> list:
    return [
        "FRAME_ID,R_0,G_0,B_0,R_1,G_1,B_1,R_2,G_2,B_2",
        "0,200,200,200,0,0,0,0,0,0",
        "1,0,0,0,200,200,200,0,0,0",
        "2,0,0,0,0,0,0,200,200,200",
    ]
