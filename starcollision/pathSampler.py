import logging
from dataclasses import dataclass
from typing import List

from starcollision.errors import DegenerateCurveError, InputValidationError
from starcollision.geometry import Curve, Point3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathSamples:
    """Per-frame points along a curve plus the curve's full length."""

    name: str
    points: List[Point3]
    total_length: float

    def __getitem__(self, frame):
        return self.points[frame]

    def __len__(self):
        return len(self.points)

    @property
    def start(self) -> Point3:
        return self.points[0]

    def travelled(self, frame) -> float:
        """Straight-line distance from the start point to the frame's point."""
        return self.points[0].distance_to(self.points[frame])

    def progress(self, current_length) -> float:
        # 1 - (full - current) / full, kept in this form so results match the
        # reference renders bit for bit
        if self.total_length == 0:
            raise DegenerateCurveError(self.name)
        return 1 - (self.total_length - current_length) / self.total_length


def sample(curve: Curve, frame_count: int, name: str = "curve") -> PathSamples:
    if curve is None:
        raise InputValidationError(f"curve {name!r} is missing")
    if frame_count <= 0:
        raise InputValidationError(f"frame count must be positive, got {frame_count}")

    pts = list(curve.divide_by_count(frame_count, True))
    if not pts:
        raise InputValidationError(f"curve {name!r} produced no points")
    # closed curves hand back n points instead of n + 1
    if len(pts) < frame_count:
        pts.extend([pts[-1]] * (frame_count - len(pts)))
    pts = pts[:frame_count]

    total_length = curve.length()
    logger.debug("sampled %s: %d points, length %.4f", name, len(pts), total_length)
    return PathSamples(name=name, points=pts, total_length=total_length)
