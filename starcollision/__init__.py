from starcollision.animations import complete_explosion, decaying_orbit
from starcollision.colorControl import from_hsv, to_hsv
from starcollision.errors import (
    DegenerateCurveError,
    InputValidationError,
    StarCollisionError,
)
from starcollision.geometry import Point3, PolylineCurve

__all__ = [
    "complete_explosion",
    "decaying_orbit",
    "from_hsv",
    "to_hsv",
    "DegenerateCurveError",
    "InputValidationError",
    "StarCollisionError",
    "Point3",
    "PolylineCurve",
]
