"""Bounding frames: the reference rectangle relative positions are measured in.

Two variants share one interface:

* ``RotatedFrame`` is built from three geographic corners (top-left,
  bottom-left, bottom-right).  The rectangle may be skewed in planar space, so
  every point is rotated until the left edge is vertical before it is scaled.
* ``AxisAlignedFrame`` holds two planar corners and assumes the rectangle is
  already axis-aligned.

Frames are immutable.  Reconfiguring a mapper builds a new frame.
"""

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from shapely.geometry import Point, Polygon, box

from .config import DEFAULT_WGS_BORDERS
from .errors import InvalidArgumentError
from .points import FlatBorders, FlatCorners, FlatPoint, GeoCorners, GeoPoint, RelativePoint
from .projection import read_fields, to_flat

logger = logging.getLogger(__name__)


def _rotate(point: FlatPoint, sin: float, cos: float) -> FlatPoint:
    return FlatPoint(
        x=point.x * cos - point.y * sin,
        y=point.x * sin + point.y * cos,
    )


def _percent(offset: float, extent: float) -> float:
    """offset / extent * 100 with IEEE semantics for a zero extent."""
    if extent == 0:
        if offset == 0 or math.isnan(offset):
            return math.nan
        return math.copysign(math.inf, offset) * math.copysign(1.0, extent)
    return offset / extent * 100


def _corner(borders: Any, name: str) -> Any:
    if isinstance(borders, Mapping):
        value = borders.get(name)
    else:
        value = getattr(borders, name, None)
    if value is None:
        raise InvalidArgumentError("missing or invalid parameter `borders`")
    return value


def _geo_point(value: Any) -> GeoPoint:
    lon, lat = read_fields(value, ("longitude", "latitude"))
    return GeoPoint(longitude=lon, latitude=lat)


def _flat_point(value: Any) -> FlatPoint:
    x, y = read_fields(value, ("x", "y"))
    return FlatPoint(x=x, y=y)


class BoundingFrame(ABC):
    """Maps planar points into the 0-100 space of a reference rectangle."""

    supports_rotation = False

    @abstractmethod
    def normalize(self, point: FlatPoint) -> RelativePoint:
        """Return the position of a planar point in percent of the frame."""

    @abstractmethod
    def denormalize(self, point: RelativePoint) -> FlatPoint:
        """Inverse of normalize."""

    @abstractmethod
    def corners(self) -> list[tuple[float, float]]:
        """Planar corners, starting top-left and going counter-clockwise."""

    def outline(self) -> Polygon:
        """The frame rectangle in planar coordinates."""
        return Polygon(self.corners())

    def contains(self, point: FlatPoint) -> bool:
        """Whether a planar point lies inside the frame or on its edge.

        A frame with non-finite corners contains nothing.
        """
        if not all(math.isfinite(v) for corner in self.corners() for v in corner):
            return False
        return self.outline().covers(Point(point.x, point.y))


@dataclass(frozen=True)
class RotatedFrame(BoundingFrame):
    wgs: GeoCorners
    flat: FlatCorners
    sin: float
    cos: float
    rotated: FlatCorners
    delta: FlatPoint

    supports_rotation = True

    @classmethod
    def from_wgs(cls, borders: Any, projection: Optional[str] = None) -> "RotatedFrame":
        """Build a frame from geographic lt/lb/rb corners.

        The rotation maps the lt->lb edge onto the vertical axis.  If lt and
        lb project to the same planar point that edge has no direction and
        every value derived from it is NaN.
        """
        wgs = GeoCorners(
            lt=_geo_point(_corner(borders, "lt")),
            lb=_geo_point(_corner(borders, "lb")),
            rb=_geo_point(_corner(borders, "rb")),
        )
        flat = FlatCorners(
            lt=to_flat(wgs.lt, projection),
            lb=to_flat(wgs.lb, projection),
            rb=to_flat(wgs.rb, projection),
        )

        dx = flat.lb.x - flat.lt.x
        dy = flat.lt.y - flat.lb.y
        length = math.sqrt(dx * dx + dy * dy)
        if length == 0:
            logger.warning("degenerate frame: lt and lb coincide at (%s, %s)", flat.lt.x, flat.lt.y)
            sin = cos = math.nan
        else:
            sin = -dx / length
            cos = dy / length

        rotated = FlatCorners(
            lt=_rotate(flat.lt, sin, cos),
            lb=_rotate(flat.lb, sin, cos),
            rb=_rotate(flat.rb, sin, cos),
        )
        delta = FlatPoint(
            x=rotated.rb.x - rotated.lt.x,
            y=rotated.lt.y - rotated.rb.y,
        )
        logger.debug("rotated frame sin=%.6f cos=%.6f delta=(%.3f, %.3f)", sin, cos, delta.x, delta.y)
        return cls(wgs=wgs, flat=flat, sin=sin, cos=cos, rotated=rotated, delta=delta)

    def normalize(self, point: FlatPoint) -> RelativePoint:
        rot = _rotate(point, self.sin, self.cos)
        return RelativePoint(
            x=_percent(rot.x - self.rotated.lt.x, self.delta.x),
            y=_percent(rot.y - self.rotated.rb.y, self.delta.y),
        )

    def denormalize(self, point: RelativePoint) -> FlatPoint:
        rx = point.x / 100 * self.delta.x + self.rotated.lt.x
        ry = point.y / 100 * self.delta.y + self.rotated.rb.y
        # rotate back by the opposite angle
        return _rotate(FlatPoint(x=rx, y=ry), -self.sin, self.cos)

    def corners(self) -> list[tuple[float, float]]:
        # the region normalize maps onto [0, 100] x [0, 100]
        points = [self.denormalize(RelativePoint(x=x, y=y))
                  for x, y in ((0, 100), (0, 0), (100, 0), (100, 100))]
        return [(p.x, p.y) for p in points]


@dataclass(frozen=True)
class AxisAlignedFrame(BoundingFrame):
    lt: FlatPoint
    rb: FlatPoint

    @classmethod
    def from_borders(cls, borders: Any) -> "AxisAlignedFrame":
        """Build a frame from ``{"wgs": ..., "flat": {"lt": .., "rb": ..}}``.

        A bare ``{"lt", "rb"}`` pair or a FlatBorders is accepted as the flat
        part.  Geographic corners are not used.
        """
        if isinstance(borders, Mapping) and "flat" in borders:
            borders = borders["flat"]
        return cls(
            lt=_flat_point(_corner(borders, "lt")),
            rb=_flat_point(_corner(borders, "rb")),
        )

    @property
    def delta(self) -> FlatPoint:
        return FlatPoint(x=self.rb.x - self.lt.x, y=self.lt.y - self.rb.y)

    def normalize(self, point: FlatPoint) -> RelativePoint:
        delta = self.delta
        return RelativePoint(
            x=_percent(point.x - self.lt.x, delta.x),
            y=_percent(point.y - self.rb.y, delta.y),
        )

    def denormalize(self, point: RelativePoint) -> FlatPoint:
        delta = self.delta
        return FlatPoint(
            x=point.x / 100 * delta.x + self.lt.x,
            y=point.y / 100 * delta.y + self.rb.y,
        )

    def corners(self) -> list[tuple[float, float]]:
        lt, rb = self.lt, self.rb
        return [(lt.x, lt.y), (lt.x, rb.y), (rb.x, rb.y), (rb.x, lt.y)]

    def outline(self) -> Polygon:
        return box(
            min(self.lt.x, self.rb.x), min(self.lt.y, self.rb.y),
            max(self.lt.x, self.rb.x), max(self.lt.y, self.rb.y),
        )


def default_flat_borders(projection: Optional[str] = None) -> FlatBorders:
    """Planar lt/rb of the built-in reference rectangle."""
    return FlatBorders(
        lt=to_flat(DEFAULT_WGS_BORDERS.lt, projection),
        rb=to_flat(DEFAULT_WGS_BORDERS.rb, projection),
    )


def build_frame(rotation: bool, borders: Any,
                projection: Optional[str] = None) -> BoundingFrame:
    """Create the frame variant selected by ``rotation`` from caller borders."""
    if rotation:
        return RotatedFrame.from_wgs(borders, projection)
    return AxisAlignedFrame.from_borders(borders)


def default_frame(rotation: bool, projection: Optional[str] = None) -> BoundingFrame:
    """The frame variant selected by ``rotation`` over the built-in rectangle."""
    if rotation:
        return RotatedFrame.from_wgs(DEFAULT_WGS_BORDERS, projection)
    return AxisAlignedFrame.from_borders(default_flat_borders(projection))
