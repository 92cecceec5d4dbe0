"""Per-LED color for a single frame.

Complete explosion: a torus shockwave plus an upper and a lower ray burst
growing out of an origin. Regions are tested in a fixed order and the first
hit wins; an LED outside all of them keeps the default color.

Decaying orbit: two spheres travelling along their own paths; any LED inside
either sphere is lit white at a fixed brightness.
"""

import math
from dataclasses import dataclass
from enum import Enum

from starcollision.colorControl import from_hsv
from starcollision.geometry import Point3
from starcollision.pathSampler import PathSamples

TORUS_MINOR_SCALE = 1.85
TORUS_MAJOR_SCALE = 3.3
RAY_REACH = 1.85

DEFAULT_HUE = 210
TORUS_HUE = 390
DEFAULT_INTENSITY = 1.0

ORBIT_BRIGHTNESS = 200


class Region(str, Enum):
    UPPER_RAY = "upper_ray"
    LOWER_RAY = "lower_ray"
    TORUS = "torus"
    NONE = "none"


@dataclass(frozen=True)
class ExplosionFrame:
    """Everything about frame ``f`` that does not depend on the LED."""

    torus: PathSamples
    ray_up: PathSamples
    ray_down: PathSamples
    current_length: float
    current_length_up: float
    current_length_down: float
    up_tip: Point3
    down_tip: Point3

    @property
    def radius_minor(self):
        return TORUS_MINOR_SCALE * self.current_length

    @property
    def radius_major(self):
        return TORUS_MAJOR_SCALE * self.current_length

    @classmethod
    def at(cls, frame, torus, ray_up, ray_down):
        return cls(
            torus=torus,
            ray_up=ray_up,
            ray_down=ray_down,
            # the torus path's X coordinate drives its growth, not arc length
            current_length=torus[frame].x,
            current_length_up=ray_up.travelled(frame),
            current_length_down=ray_down.travelled(frame),
            up_tip=ray_up[frame],
            down_tip=ray_down[frame],
        )


def explosion_region(led: Point3, frame: ExplosionFrame, origin: Point3, radius) -> Region:
    xy_distance = math.hypot(led.x, led.y)
    z_distance = math.hypot(xy_distance, origin.z - led.z)

    if xy_distance < radius and led.z < frame.up_tip.z * RAY_REACH and led.z > frame.ray_up.start.z:
        return Region.UPPER_RAY
    elif xy_distance < radius and led.z > frame.down_tip.z * RAY_REACH and led.z < frame.ray_down.start.z:
        return Region.LOWER_RAY
    elif (
        frame.radius_major - frame.radius_minor < xy_distance < frame.radius_major + frame.radius_minor
        and z_distance < frame.radius_minor
    ):
        return Region.TORUS
    return Region.NONE


def explosion_hsv(region: Region, frame: ExplosionFrame):
    """(hue, intensity) for an LED in ``region``."""
    if region is Region.UPPER_RAY:
        return DEFAULT_HUE, frame.ray_up.progress(frame.current_length_up)
    if region is Region.LOWER_RAY:
        return DEFAULT_HUE, frame.ray_down.progress(frame.current_length_down)
    if region is Region.TORUS:
        return TORUS_HUE, frame.torus.progress(frame.current_length)
    return DEFAULT_HUE, DEFAULT_INTENSITY


def explosion_color(led: Point3, frame: ExplosionFrame, origin: Point3, radius):
    hue, intensity = explosion_hsv(explosion_region(led, frame, origin, radius), frame)
    return from_hsv(hue * (1 + intensity), intensity, 1 - intensity)


def orbit_color(led: Point3, center: Point3, center2: Point3, radius):
    d = center.distance_to(led)
    d2 = center2.distance_to(led)
    brightness = ORBIT_BRIGHTNESS if (d < radius or d2 < radius) else 0
    return brightness, brightness, brightness
