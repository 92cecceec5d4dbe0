import logging
from typing import List, Sequence

from starcollision import frameColorizer
from starcollision.csvEmitter import emit_rows
from starcollision.errors import InputValidationError
from starcollision.geometry import Curve, Point3
from starcollision.pathSampler import sample

logger = logging.getLogger(__name__)


def _frame_count(leds, fps, duration, radius):
    if not leds:
        raise InputValidationError("at least one LED position is required")
    if fps <= 0:
        raise InputValidationError(f"fps must be positive, got {fps}")
    if duration <= 0:
        raise InputValidationError(f"duration must be positive, got {duration}")
    if radius < 0:
        raise InputValidationError(f"radius must not be negative, got {radius}")
    return fps * duration


def complete_explosion(
    leds: Sequence[Point3],
    fps: int,
    duration: int,
    origin: Point3,
    max_length: Curve,
    radius: float,
    path: Curve,
    path2: Curve,
) -> List[str]:
    """Torus shockwave with an upper (``path``) and lower (``path2``) ray burst."""
    frame_count = _frame_count(leds, fps, duration, radius)
    if origin is None:
        raise InputValidationError("origin is required")

    torus = sample(max_length, frame_count, "max_length")
    ray_up = sample(path, frame_count, "path")
    ray_down = sample(path2, frame_count, "path2")
    leds = list(leds)
    logger.info("complete explosion: %d leds, %d frames", len(leds), frame_count)

    def color_for(f):
        frame = frameColorizer.ExplosionFrame.at(f, torus, ray_up, ray_down)
        return lambda i: frameColorizer.explosion_color(leds[i], frame, origin, radius)

    return emit_rows(len(leds), frame_count, color_for)


def decaying_orbit(
    leds: Sequence[Point3],
    fps: int,
    duration: int,
    path: Curve,
    path2: Curve,
    radius: float,
) -> List[str]:
    """Two spheres of light following ``path`` and ``path2``."""
    frame_count = _frame_count(leds, fps, duration, radius)

    pts = sample(path, frame_count, "path")
    pts2 = sample(path2, frame_count, "path2")
    leds = list(leds)
    logger.info("decaying orbit: %d leds, %d frames", len(leds), frame_count)

    def color_for(f):
        center, center2 = pts[f], pts2[f]
        return lambda i: frameColorizer.orbit_color(leds[i], center, center2, radius)

    return emit_rows(len(leds), frame_count, color_for)
