#!/usr/bin/env python3
"""GEOFRAME - place coordinates inside a reference rectangle.

Prints one "x y" percentage pair per input point.  The frame variant and
planar projection come from GEOFRAME_ROTATION and GEOFRAME_FLAT_PROJECTION.
"""

import argparse
import logging
import sys

from geoframe import config
from geoframe.errors import InvalidArgumentError
from geoframe.mapper import RelativeMapper


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("coords", nargs="+", type=float,
                        help="LON LAT pairs (or X Y pairs with --flat)")
    parser.add_argument("--flat", action="store_true",
                        help="treat inputs as planar x/y instead of lon/lat")
    args = parser.parse_args(argv)
    if len(args.coords) % 2:
        parser.error("coordinates must come in pairs")
    return args


def main(argv=None, out=None) -> int:
    args = parse_args(argv)
    out = out or sys.stdout
    mapper = RelativeMapper()
    pairs = zip(args.coords[0::2], args.coords[1::2])
    try:
        for a, b in pairs:
            if args.flat:
                rel = mapper.get_relative_by_flat({"x": a, "y": b})
            else:
                rel = mapper.get_relative_by_wgs({"longitude": a, "latitude": b})
            print(f"{rel.x:.6f} {rel.y:.6f}", file=out)
    except InvalidArgumentError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    sys.exit(main())
