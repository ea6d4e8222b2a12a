"""Point and corner value types shared by the projection, frame and mapper."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    longitude: float  # degrees east
    latitude: float   # degrees north


@dataclass(frozen=True)
class FlatPoint:
    x: float  # easting in planar units
    y: float  # northing in planar units


@dataclass(frozen=True)
class RelativePoint:
    """Position inside a bounding frame, in percent.

    (0, 0) is the bottom-left corner and (100, 100) the top-right one.
    Points outside the frame are not clamped.
    """

    x: float
    y: float


@dataclass(frozen=True)
class GeoCorners:
    lt: GeoPoint  # top-left
    lb: GeoPoint  # bottom-left
    rb: GeoPoint  # bottom-right


@dataclass(frozen=True)
class FlatCorners:
    lt: FlatPoint
    lb: FlatPoint
    rb: FlatPoint


@dataclass(frozen=True)
class FlatBorders:
    """Two opposite corners of an axis-aligned planar rectangle."""

    lt: FlatPoint
    rb: FlatPoint
