"""Named-system projection: WGS84 lon/lat <-> planar x/y, backed by pyproj."""

import logging
import numbers
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Optional

from pyproj import Transformer

from . import config
from .errors import InvalidArgumentError
from .points import FlatPoint, GeoPoint

logger = logging.getLogger(__name__)

WGS84 = "WGS84"

# Short names accepted in place of full CRS identifiers.
SYSTEM_ALIASES = {
    "WGS84": "EPSG:4326",
    "GOOGLE": "EPSG:3857",
    "EPSG:900913": "EPSG:3857",
}

FLAT_LIMIT = 10 ** 7
LONGITUDE_LIMIT = 180.0
LATITUDE_LIMIT = 360.0


def resolve_system(name: str) -> str:
    """Return the CRS identifier pyproj understands for a system name."""
    return SYSTEM_ALIASES.get(name.upper(), name)


@lru_cache(maxsize=None)
def _transformer(source: str, target: str) -> Transformer:
    logger.debug("building transformer %s -> %s", source, target)
    return Transformer.from_crs(resolve_system(source), resolve_system(target), always_xy=True)


class Projector:
    """Projects (x, y) pairs from one named coordinate system to another.

    Geographic systems take and return (longitude, latitude).
    """

    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        self._transformer = _transformer(source, target)

    def project(self, x: float, y: float) -> tuple[float, float]:
        px, py = self._transformer.transform(x, y)
        return (px, py)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def read_fields(coordinates: Any, names: tuple[str, ...]) -> tuple[float, ...]:
    """Pull numeric fields out of a point object or mapping."""
    if coordinates is None or isinstance(coordinates, (str, bytes, numbers.Number)):
        raise InvalidArgumentError("missing or invalid parameter `coordinates`")
    values = []
    for name in names:
        if isinstance(coordinates, Mapping):
            value = coordinates.get(name)
        else:
            value = getattr(coordinates, name, None)
        if not _is_number(value):
            raise InvalidArgumentError("missing or invalid parameter `coordinates`")
        values.append(value)
    return tuple(values)


def to_wgs(coordinates: Any, projection: Optional[str] = None) -> GeoPoint:
    """Convert a planar point to WGS84 longitude/latitude.

    Both planar coordinates must lie in [0, 10^7).
    """
    x, y = read_fields(coordinates, ("x", "y"))
    if x < 0 or x >= FLAT_LIMIT:
        raise InvalidArgumentError("`coordinates.x` out of bounds")
    if y < 0 or y >= FLAT_LIMIT:
        raise InvalidArgumentError("`coordinates.y` out of bounds")
    projector = Projector(projection or config.FLAT_PROJECTION, WGS84)
    lon, lat = projector.project(x, y)
    return GeoPoint(longitude=lon, latitude=lat)


def to_flat(coordinates: Any, projection: Optional[str] = None) -> FlatPoint:
    """Convert a WGS84 point to planar coordinates.

    Longitude must lie in [-180, 180] and latitude in [-360, 360].
    """
    lon, lat = read_fields(coordinates, ("longitude", "latitude"))
    if lon < -LONGITUDE_LIMIT or lon > LONGITUDE_LIMIT:
        raise InvalidArgumentError("`coordinates.longitude` out of bounds")
    # Latitude is bounded by [-360, 360], not [-90, 90].
    if lat < -LATITUDE_LIMIT or lat > LATITUDE_LIMIT:
        raise InvalidArgumentError("`coordinates.latitude` out of bounds")
    projector = Projector(WGS84, projection or config.FLAT_PROJECTION)
    x, y = projector.project(lon, lat)
    return FlatPoint(x=x, y=y)
