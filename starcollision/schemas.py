"""Scene descriptions shared by the HTTP service and the command line."""

from typing import List

from pydantic import BaseModel, Field

from starcollision.geometry import Point3, PolylineCurve


class AnimationRequest(BaseModel):
    leds: List[Point3] = Field(min_length=1)
    fps: int = Field(gt=0)
    duration: int = Field(gt=0)
    radius: float = Field(ge=0)
    path: PolylineCurve
    path2: PolylineCurve


class ExplosionRequest(AnimationRequest):
    origin: Point3
    max_length: PolylineCurve


class OrbitRequest(AnimationRequest):
    pass
