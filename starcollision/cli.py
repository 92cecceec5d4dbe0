"""Render an animation described by a JSON scene file into CSV.

Example::

    star-collision explosion scene.json -o explosion.csv
"""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from starcollision import config
from starcollision.animations import complete_explosion, decaying_orbit
from starcollision.csvEmitter import write_csv
from starcollision.errors import StarCollisionError
from starcollision.schemas import ExplosionRequest, OrbitRequest

logger = logging.getLogger(__name__)


def _render(kind, scene):
    if kind == "explosion":
        req = ExplosionRequest.model_validate(scene)
        return complete_explosion(
            req.leds, req.fps, req.duration, req.origin, req.max_length, req.radius, req.path, req.path2
        )
    req = OrbitRequest.model_validate(scene)
    return decaying_orbit(req.leds, req.fps, req.duration, req.path, req.path2, req.radius)


def build_parser():
    parser = argparse.ArgumentParser(prog="star-collision", description="Render LED tree animations to CSV.")
    parser.add_argument("kind", choices=["explosion", "orbit"])
    parser.add_argument("scene", help="JSON scene file ('-' for stdin)")
    parser.add_argument("-o", "--output", help="CSV file to write (default: stdout)")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    config.configure_logging(args.log_level)

    try:
        if args.scene == "-":
            scene = json.load(sys.stdin)
        else:
            with open(args.scene, encoding="utf-8") as fp:
                scene = json.load(fp)
        rows = _render(args.kind, scene)
    except (OSError, json.JSONDecodeError, ValidationError, StarCollisionError) as e:
        print(f"star-collision: {e}", file=sys.stderr)
        return 2

    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="") as fp:
            write_csv(rows, fp)
        logger.info("wrote %d frames to %s", len(rows) - 1, args.output)
    else:
        write_csv(rows, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
