import logging
import os

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"
LOG_LEVEL = os.getenv("STAR_COLLISION_LOG_LEVEL", "INFO")

DEFAULT_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

ORIGINS = [
    o.strip()
    for o in os.getenv("STAR_COLLISION_ORIGINS", ",".join(DEFAULT_ORIGINS)).split(",")
    if o.strip()
]

# fps * duration ceiling for the HTTP service; 20 minutes at 30 fps
MAX_FRAME_COUNT = int(os.getenv("STAR_COLLISION_MAX_FRAMES", "36000"))


def configure_logging(level=None):
    level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)
