"""Aspect ratio calculator: shape of an extent's bounding rectangle.

width  = north-south span in metres (latitude delta, no scaling)
length = east-west span in metres (longitude delta scaled by the cosine
         of the pole-most of the north/south latitudes)
ratio  = length / width
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from photo_extent.core.config import check_equator_length
from photo_extent.core.constants import EQUATOR_LENGTH_M
from photo_extent.core.exceptions import PermanentError
from photo_extent.engine.projection import (
    reference_latitude,
    to_meters_latitude,
    to_meters_longitude,
)
from photo_extent.engine.sexagesimal import absolute_difference
from photo_extent.models.extent import ExtentMeasurement

if TYPE_CHECKING:
    from photo_extent.models.extent import ExtentResult

logger = logging.getLogger("photo_extent.engine.aspect_ratio")


class DegenerateExtentError(PermanentError):
    """Raised when the extent has zero north-south width."""

    default_stage = "aspect_ratio"
    default_code = "DEGENERATE_EXTENT"


def measure_extent(
    extent: ExtentResult,
    *,
    equator_length_m: float = EQUATOR_LENGTH_M,
) -> ExtentMeasurement:
    """Project an extent onto the reference sphere and compute its ratio.

    Args:
        extent: Output of ``find_extremes``.
        equator_length_m: Equatorial circumference of the reference sphere.

    Returns:
        An ``ExtentMeasurement`` with deltas, metric spans and the ratio.

    Raises:
        ConfigValidationError: If ``equator_length_m`` is not positive.
        DegenerateExtentError: If every point shares one latitude.
        ArityMismatchError: If the extreme points' angles differ in arity.
        UnderflowError: Propagated from the sexagesimal subtraction.
    """
    check_equator_length(equator_length_m)

    latitude_delta = absolute_difference(extent.north.latitude, extent.south.latitude)
    longitude_delta = absolute_difference(extent.east.longitude, extent.west.longitude)
    ref_latitude = reference_latitude(extent.north.latitude, extent.south.latitude)

    width_m = to_meters_latitude(latitude_delta, equator_length_m=equator_length_m)
    length_m = to_meters_longitude(
        longitude_delta,
        ref_latitude,
        equator_length_m=equator_length_m,
    )

    if latitude_delta.is_zero:
        msg = (
            f"Zero-width extent: north '{extent.north.id}' and south '{extent.south.id}' "
            f"share latitude {extent.north.latitude}; aspect ratio is undefined"
        )
        raise DegenerateExtentError(msg)

    ratio = length_m / width_m

    logger.info(
        "Extent measured | width=%.1f m | length=%.1f m | ratio=%.4f | reference_lat=%s",
        width_m,
        length_m,
        ratio,
        ref_latitude,
    )

    return ExtentMeasurement(
        latitude_delta=latitude_delta,
        longitude_delta=longitude_delta,
        reference_latitude=ref_latitude,
        width_m=width_m,
        length_m=length_m,
        ratio=ratio,
    )


def aspect_ratio(
    extent: ExtentResult,
    *,
    equator_length_m: float = EQUATOR_LENGTH_M,
) -> float:
    """Return ``length / width`` of the extent's bounding rectangle.

    Raises:
        DegenerateExtentError: If every point shares one latitude.
    """
    return measure_extent(extent, equator_length_m=equator_length_m).ratio
