import logging
import math
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ValidationError

from starcollision import config
from starcollision.animations import complete_explosion, decaying_orbit
from starcollision.colorControl import from_hsv, to_hsv
from starcollision.errors import StarCollisionError
from starcollision.schemas import AnimationRequest, ExplosionRequest, OrbitRequest

logger = logging.getLogger(__name__)

config.configure_logging()

app = FastAPI(title="star-collision")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class Command(BaseModel):
    action: str
    payload: Optional[Dict[str, Any]] = None


def _check_frames(req: AnimationRequest):
    frames = req.fps * req.duration
    if frames > config.MAX_FRAME_COUNT:
        raise HTTPException(
            status_code=400,
            detail=f"fps * duration = {frames} exceeds the limit of {config.MAX_FRAME_COUNT} frames",
        )


def _rows_response(rows):
    return {"status": "ok", "frames": len(rows) - 1, "rows": rows}


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/explosion")
def explosion(req: ExplosionRequest):
    _check_frames(req)
    try:
        rows = complete_explosion(
            req.leds, req.fps, req.duration, req.origin, req.max_length, req.radius, req.path, req.path2
        )
    except StarCollisionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _rows_response(rows)


@app.post("/orbit")
def orbit(req: OrbitRequest):
    _check_frames(req)
    try:
        rows = decaying_orbit(req.leds, req.fps, req.duration, req.path, req.path2, req.radius)
    except StarCollisionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _rows_response(rows)


_animations = {
    "complete_explosion": (ExplosionRequest, explosion),
    "decaying_orbit": (OrbitRequest, orbit),
}


@app.post("/command")
def command(cmd: Command):
    if cmd.action not in _animations or cmd.payload is None:
        raise HTTPException(status_code=400, detail=f"Unknown action {cmd.action!r}")

    model, handler = _animations[cmd.action]
    try:
        req = model.model_validate(cmd.payload)
    except ValidationError as e:
        detail = e.errors(include_url=False, include_context=False, include_input=False)
        raise HTTPException(status_code=400, detail=detail)
    logger.info("command %s", cmd.action)
    return handler(req)


def _finite(payload, key):
    x = float(payload[key])
    if not math.isfinite(x):
        raise ValueError(f"{key} must be a finite number, got {x}")
    return x


@app.post("/color")
def color(cmd: Command):
    p = cmd.payload or {}
    try:
        if cmd.action == "from_hsv":
            r, g, b = from_hsv(_finite(p, "h"), _finite(p, "s"), _finite(p, "v"))
            return {"status": "ok", "r": r, "g": g, "b": b}
        if cmd.action == "to_hsv":
            h, s, v = to_hsv(int(p["r"]), int(p["g"]), int(p["b"]))
            return {"status": "ok", "h": h, "s": s, "v": v}
    except (KeyError, TypeError, ValueError, OverflowError) as e:
        raise HTTPException(status_code=400, detail=f"Bad payload for {cmd.action!r}: {e}")

    raise HTTPException(status_code=400, detail=f"Unknown action {cmd.action!r}")
