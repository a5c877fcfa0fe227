"""Projection converter: angular DMS deltas to metres.

Spherical-equirectangular approximation:

- A degree of latitude has the same length everywhere:
  ``equator_length_m / 360``.
- A degree of longitude is that length scaled by the cosine of a
  reference latitude.

Per-component factors are used instead of converting to decimal degrees
first, so the latitude formula reads
``deg * m_per_deg + min * m_per_min + sec * m_per_sec``.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from photo_extent.core.config import check_equator_length
from photo_extent.core.constants import (
    DEGREES_IN_CIRCLE,
    DMS_ARITY,
    EQUATOR_LENGTH_M,
    MINUTES_IN_CIRCLE,
    SECONDS_IN_CIRCLE,
)
from photo_extent.engine.extent_tracker import is_greater
from photo_extent.models.angle import Angle, ArityMismatchError, coerce_angle

if TYPE_CHECKING:
    from collections.abc import Sequence


def to_meters_latitude(
    delta: Angle | Sequence[float],
    *,
    equator_length_m: float = EQUATOR_LENGTH_M,
) -> float:
    """Convert a latitude delta to a north-south distance in metres.

    Raises:
        ArityMismatchError: If ``delta`` is not a DMS triple.
        ConfigValidationError: If ``equator_length_m`` is not positive.
    """
    check_equator_length(equator_length_m)
    degrees, minutes, seconds = _dms(delta)
    return (
        degrees * equator_length_m / DEGREES_IN_CIRCLE
        + minutes * equator_length_m / MINUTES_IN_CIRCLE
        + seconds * equator_length_m / SECONDS_IN_CIRCLE
    )


def to_meters_longitude(
    delta: Angle | Sequence[float],
    reference_latitude: Angle | Sequence[float],
    *,
    equator_length_m: float = EQUATOR_LENGTH_M,
) -> float:
    """Convert a longitude delta to an east-west distance in metres.

    The distance is the latitude-equivalent distance scaled by
    ``cos(reference_latitude)``.  Pass the latitude closest to the pole
    (see ``reference_latitude``) for a conservative estimate.

    Raises:
        ArityMismatchError: If ``delta`` is not a DMS triple.
        ConfigValidationError: If ``equator_length_m`` is not positive.
    """
    scale = math.cos(coerce_angle(reference_latitude).to_radians())
    return to_meters_latitude(delta, equator_length_m=equator_length_m) * scale


def reference_latitude(
    a: Angle | Sequence[float],
    b: Angle | Sequence[float],
) -> Angle:
    """Return the larger-magnitude (closer to the pole) of two latitudes.

    Raises:
        ArityMismatchError: If the latitudes have different arity.
    """
    left = coerce_angle(a)
    right = coerce_angle(b)
    return right if is_greater(right, left) else left


def _dms(delta: Angle | Sequence[float]) -> tuple[float, float, float]:
    angle = coerce_angle(delta)
    if len(angle) != DMS_ARITY:
        raise ArityMismatchError(
            len(angle),
            DMS_ARITY,
            f"Projection needs a (degrees, minutes, seconds) delta, got {len(angle)} components",
        )
    return angle.degrees, angle.minutes, angle.seconds
