"""Relative mapper: geographic or planar points -> percent of a bounding frame."""

import logging
from typing import Any, Optional

from . import config
from .frame import BoundingFrame, build_frame, default_frame
from .points import FlatPoint, GeoPoint, RelativePoint
from .projection import read_fields, to_flat, to_wgs

logger = logging.getLogger(__name__)


class RelativeMapper:
    """Places points inside a reference rectangle as 0-100 percentages.

    ``rotation`` picks the frame variant: True for a rotation-corrected frame
    built from three geographic corners, False for an axis-aligned frame built
    from two planar corners.  None reads ``GEOFRAME_ROTATION``.

    The current frame is an immutable snapshot and ``set_borders`` rebinds
    ``frame`` in one assignment, so each read of ``frame`` yields a complete
    snapshot.  Nothing is locked: a call racing with ``set_borders`` may use
    either frame, and callers that reconfigure from another thread must
    synchronize themselves.
    """

    def __init__(self, rotation: Optional[bool] = None, borders: Any = None,
                 projection: Optional[str] = None):
        self.rotation = config.ROTATION if rotation is None else rotation
        self.projection = projection or config.FLAT_PROJECTION
        self.frame: BoundingFrame = default_frame(self.rotation, self.projection)
        if borders is not None:
            self.set_borders(borders)

    @property
    def supports_rotation(self) -> bool:
        return self.frame.supports_rotation

    def set_borders(self, borders: Any) -> None:
        frame = build_frame(self.rotation, borders, self.projection)
        logger.debug("new frame: %r", frame)
        self.frame = frame

    def get_relative_by_wgs(self, point: Any) -> RelativePoint:
        return self.frame.normalize(to_flat(point, self.projection))

    def get_relative_by_flat(self, point: Any) -> RelativePoint:
        x, y = read_fields(point, ("x", "y"))
        return self.frame.normalize(FlatPoint(x=x, y=y))

    def get_flat_by_relative(self, point: Any) -> FlatPoint:
        x, y = read_fields(point, ("x", "y"))
        return self.frame.denormalize(RelativePoint(x=x, y=y))

    def get_wgs_by_relative(self, point: Any) -> GeoPoint:
        return to_wgs(self.get_flat_by_relative(point), self.projection)

    def contains_flat(self, point: Any) -> bool:
        x, y = read_fields(point, ("x", "y"))
        return self.frame.contains(FlatPoint(x=x, y=y))

    def contains_wgs(self, point: Any) -> bool:
        return self.frame.contains(to_flat(point, self.projection))
