"""Runtime configuration read from the environment, plus built-in defaults."""

import logging
import os

from .points import GeoCorners, GeoPoint

# Name of the planar system geographic points are projected into.
FLAT_PROJECTION = os.environ.get("GEOFRAME_FLAT_PROJECTION", "GOOGLE")

# Variant picked by RelativeMapper when none is passed explicitly.
ROTATION = os.environ.get("GEOFRAME_ROTATION", "1").strip().lower() in ("1", "true", "yes", "on")


def parse_log_level(value: str) -> str:
    """Return a logging level name, WARNING when ``value`` is not one."""
    name = value.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return "WARNING"


LOG_LEVEL = parse_log_level(os.environ.get("GEOFRAME_LOG_LEVEL", "WARNING"))

# Reference rectangle used until set_borders is called.
DEFAULT_WGS_BORDERS = GeoCorners(
    lt=GeoPoint(longitude=73.119817, latitude=55.098425),
    lb=GeoPoint(longitude=73.171238, latitude=55.033588),
    rb=GeoPoint(longitude=73.294963, latitude=55.065022),
)
