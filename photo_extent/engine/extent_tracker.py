"""Extent tracker: the four directional extremes of a point set.

Angles are ordered lexicographically over their sexagesimal components
(degrees first, then minutes, then seconds); the first component that
differs decides, and equal angles are neither greater nor less.

The tracker is a pure function.  It keeps no state between calls, so
disjoint point sets may be scanned concurrently.

A comparison between angles of different arity cannot be decided.  The
tracker does not abort the scan for it: the comparison is treated as
"no update", logged, and recorded on the returned ``ExtentResult``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from photo_extent.core.exceptions import ValidationError
from photo_extent.models.angle import Angle, ArityMismatchError, coerce_angle, require_same_arity
from photo_extent.models.extent import ExtentResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from photo_extent.models.point import Point

logger = logging.getLogger("photo_extent.engine.extent_tracker")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class EmptyInputError(ValidationError):
    """Raised when an extent is requested for an empty point set."""

    default_stage = "extent_tracker"
    default_code = "EMPTY_INPUT"


class MixedHemisphereError(ValidationError):
    """Raised when a point set mixes hemispheres and the policy is ``"error"``."""

    default_stage = "extent_tracker"
    default_code = "MIXED_HEMISPHERES"


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


def compare_angles(a: Angle | Sequence[float], b: Angle | Sequence[float]) -> int:
    """Compare two angles lexicographically.

    Returns:
        ``1`` if ``a`` is greater, ``-1`` if ``b`` is greater, ``0`` if equal.

    Raises:
        ArityMismatchError: If the angles have different arity.
    """
    left = coerce_angle(a)
    right = coerce_angle(b)
    require_same_arity(left, right)
    for x, y in zip(left, right):
        if x != y:
            return 1 if x > y else -1
    return 0


def is_greater(a: Angle | Sequence[float], b: Angle | Sequence[float]) -> bool:
    """Return whether ``a`` is lexicographically greater than ``b``."""
    return compare_angles(a, b) > 0


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def find_extremes(points: Sequence[Point]) -> ExtentResult:
    """Find the northmost, southmost, eastmost and westmost points.

    The first point is the initial value of all four extremes; each later
    point replaces an extreme only when it is strictly beyond it.

    Args:
        points: Non-empty ordered sequence of points.

    Returns:
        An ``ExtentResult`` whose members are elements of ``points``.

    Raises:
        EmptyInputError: If ``points`` is empty.
    """
    if not points:
        msg = "No points supplied: cannot determine an extent of an empty point set"
        raise EmptyInputError(msg)

    first = points[0]
    north = south = east = west = first
    errors: list[ArityMismatchError] = []

    for point in points[1:]:
        if _beyond(point.latitude, north.latitude, point, errors):
            north = point
        if _beyond(south.latitude, point.latitude, point, errors):
            south = point
        if _beyond(point.longitude, east.longitude, point, errors):
            east = point
        if _beyond(west.longitude, point.longitude, point, errors):
            west = point

    logger.info(
        "Extent computed | points=%d | north=%s | south=%s | east=%s | west=%s | skipped=%d",
        len(points),
        north.id,
        south.id,
        east.id,
        west.id,
        len(errors),
    )

    return ExtentResult(
        north=north,
        south=south,
        east=east,
        west=west,
        point_count=len(points),
        comparison_errors=tuple(errors),
    )


def mixed_hemispheres(points: Sequence[Point]) -> list[str]:
    """Return the axes (``"latitude"``, ``"longitude"``) on which ``points`` mix hemispheres.

    Points with an unknown reference never count towards a mix.
    """
    mixed: list[str] = []
    latitude_refs = {p.latitude_ref for p in points if p.latitude_ref}
    longitude_refs = {p.longitude_ref for p in points if p.longitude_ref}
    if len(latitude_refs) > 1:
        mixed.append("latitude")
    if len(longitude_refs) > 1:
        mixed.append("longitude")
    return mixed


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _beyond(
    candidate: Angle,
    current: Angle,
    point: Point,
    errors: list[ArityMismatchError],
) -> bool:
    """Return ``candidate > current``; an undecidable comparison is ``False``."""
    try:
        return is_greater(candidate, current)
    except ArityMismatchError as exc:
        logger.warning("Comparison skipped | point=%s | reason=%s", point.id, exc)
        errors.append(exc)
        return False
