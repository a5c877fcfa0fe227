"""Photo Extent: geographic extent and projection engine.

Takes the GPS positions of a set of photographs, finds the bounding
photographs to the north, south, east and west, and derives the metric
dimensions and aspect ratio of the area they cover using degrees,
minutes, seconds arithmetic on a spherical-equirectangular model.
"""

from photo_extent.pipeline import (
    build_extent_report,
    compute_extent,
    compute_extent_and_aspect_ratio,
)

__version__ = "0.1.0"

__all__ = [
    "build_extent_report",
    "compute_extent",
    "compute_extent_and_aspect_ratio",
]
