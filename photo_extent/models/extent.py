"""Data models for a computed extent.

``ExtentResult`` is the output of the extent tracker: the four
directional extreme points of a point set, each one a member of that
set by identity.  ``ExtentMeasurement`` is the output of the aspect
ratio calculator and keeps every intermediate value of the projection
so that callers can log or audit it.

All angles are unsigned magnitudes; distances are in metres.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from photo_extent.models.angle import Angle, ArityMismatchError
    from photo_extent.models.point import Point


@dataclass(frozen=True, slots=True)
class ExtentResult:
    """The four directional extremes of a point set.

    Attributes:
        north: Point with the greatest latitude.
        south: Point with the least latitude.
        east: Point with the greatest longitude.
        west: Point with the least longitude.
        point_count: Number of points scanned.
        comparison_errors: Arity mismatches met while scanning.  Each
            one made a single comparison indeterminate; the scan carried
            on with the remaining points.
    """

    north: Point
    south: Point
    east: Point
    west: Point
    point_count: int = 1
    comparison_errors: tuple[ArityMismatchError, ...] = field(default=(), compare=False)

    @property
    def bbox(self) -> tuple[float, float, float, float]:
        """Bounding box ``(min_lon, min_lat, max_lon, max_lat)`` in decimal degrees."""
        return (
            self.west.longitude.to_decimal_degrees(),
            self.south.latitude.to_decimal_degrees(),
            self.east.longitude.to_decimal_degrees(),
            self.north.latitude.to_decimal_degrees(),
        )

    @property
    def is_complete(self) -> bool:
        """Whether every comparison in the scan was decidable."""
        return not self.comparison_errors

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict for logging."""
        return {
            "north": self.north.to_dict(),
            "south": self.south.to_dict(),
            "east": self.east.to_dict(),
            "west": self.west.to_dict(),
            "point_count": self.point_count,
            "bbox": list(self.bbox),
            "comparison_errors": [str(e) for e in self.comparison_errors],
        }


@dataclass(frozen=True, slots=True)
class ExtentMeasurement:
    """Linear dimensions of an extent on the reference sphere.

    Attributes:
        latitude_delta: Angular span between north and south.
        longitude_delta: Angular span between east and west.
        reference_latitude: Latitude used for the longitude cosine
            correction (the one closer to the pole).
        width_m: North-south span in metres.
        length_m: East-west span in metres.
        ratio: ``length_m / width_m``.
    """

    latitude_delta: Angle
    longitude_delta: Angle
    reference_latitude: Angle
    width_m: float
    length_m: float
    ratio: float

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict for logging."""
        return {
            "latitude_delta": self.latitude_delta.to_list(),
            "longitude_delta": self.longitude_delta.to_list(),
            "reference_latitude": self.reference_latitude.to_list(),
            "width_m": self.width_m,
            "length_m": self.length_m,
            "ratio": self.ratio,
        }
