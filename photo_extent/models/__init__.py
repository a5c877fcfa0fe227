"""Data models.

Defines the data structures used throughout the engine:
- Angle: Unsigned sexagesimal angle (degrees, minutes, seconds)
- Point: A geotagged photograph position
- ExtentResult: Four directional extremes of a point set
- ExtentMeasurement: Metric dimensions and aspect ratio of an extent
- ExtentReport: Serialisable record of one computation
"""

from photo_extent.models.angle import (
    Angle,
    ArityMismatchError,
    MalformedAngleError,
    coerce_angle,
    require_same_arity,
)
from photo_extent.models.extent import ExtentMeasurement, ExtentResult
from photo_extent.models.point import Point
from photo_extent.models.report import ExtentReport

__all__ = [
    "Angle",
    "ArityMismatchError",
    "ExtentMeasurement",
    "ExtentReport",
    "ExtentResult",
    "MalformedAngleError",
    "Point",
    "coerce_angle",
    "require_same_arity",
]
