"""Points and curves the renderers consume.

The renderers only ever ask a curve for two things: its total length and
``n + 1`` points splitting it into ``n`` pieces of equal arc length. Any
object with those two methods works; ``PolylineCurve`` is the concrete one
used by the service and the command line.
"""

import math
from typing import List, Protocol

from pydantic import BaseModel, ConfigDict, Field


class Point3(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def of(cls, x, y, z):
        return cls(x=x, y=y, z=z)

    def distance_to(self, other: "Point3") -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2)

    def lerp(self, other: "Point3", t: float) -> "Point3":
        return Point3(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
            z=self.z + (other.z - self.z) * t,
        )


class Curve(Protocol):
    def divide_by_count(self, count: int, include_ends: bool = True) -> List[Point3]: ...

    def length(self) -> float: ...


class PolylineCurve(BaseModel):
    """Open curve made of straight segments between consecutive points."""

    model_config = ConfigDict(frozen=True)

    points: List[Point3] = Field(min_length=1)

    @classmethod
    def line(cls, start, end):
        return cls(points=[start, end])

    def _segment_lengths(self):
        return [a.distance_to(b) for a, b in zip(self.points, self.points[1:])]

    def length(self) -> float:
        return sum(self._segment_lengths())

    def point_at_length(self, s: float) -> Point3:
        if s <= 0.0:
            return self.points[0]
        walked = 0.0
        for (a, b), seg in zip(zip(self.points, self.points[1:]), self._segment_lengths()):
            if seg > 0.0 and walked + seg >= s:
                return a.lerp(b, (s - walked) / seg)
            walked += seg
        return self.points[-1]

    def divide_by_count(self, count: int, include_ends: bool = True) -> List[Point3]:
        if count < 1:
            raise ValueError("count must be at least 1")
        total = self.length()
        pts = [self.point_at_length(total * i / count) for i in range(count + 1)]
        # exact end point instead of an interpolated one
        pts[-1] = self.points[-1]
        if not include_ends:
            pts = pts[1:-1]
        return pts
