"""Geographic extent and projection engine.

- extent_tracker: directional extremes of a point set
- sexagesimal: absolute DMS difference with base-60 borrow
- projection: angular deltas to metres on the reference sphere
- aspect_ratio: length/width ratio of the bounding rectangle
"""

from photo_extent.engine.aspect_ratio import DegenerateExtentError, aspect_ratio, measure_extent
from photo_extent.engine.extent_tracker import (
    EmptyInputError,
    MixedHemisphereError,
    compare_angles,
    find_extremes,
    is_greater,
    mixed_hemispheres,
)
from photo_extent.engine.projection import (
    reference_latitude,
    to_meters_latitude,
    to_meters_longitude,
)
from photo_extent.engine.sexagesimal import UnderflowError, absolute_difference, canonical

__all__ = [
    "DegenerateExtentError",
    "EmptyInputError",
    "MixedHemisphereError",
    "UnderflowError",
    "absolute_difference",
    "aspect_ratio",
    "canonical",
    "compare_angles",
    "find_extremes",
    "is_greater",
    "measure_extent",
    "mixed_hemispheres",
    "reference_latitude",
    "to_meters_latitude",
    "to_meters_longitude",
]
