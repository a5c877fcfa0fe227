"""EXIF GPS rational parsing.

EXIF stores ``GPSLatitude`` / ``GPSLongitude`` as three unsigned
rationals (degrees, minutes, seconds), each ``numerator/denominator``.
Common EXIF readers render the tag as text such as::

    ["40/1","26/1","4632/100"]

This module turns that text into an ``Angle``.  Reading the image file
and locating the tag is the ingestion collaborator's job; nothing here
touches the filesystem.
"""

from __future__ import annotations

import re

from photo_extent.core.constants import DMS_ARITY
from photo_extent.models.angle import Angle, MalformedAngleError
from photo_extent.models.point import Point

# One rational or plain number: "4632/100", "40", "46.32"
_RATIONAL_RE = re.compile(r"^\s*([0-9]+(?:\.[0-9]+)?)\s*(?:/\s*([0-9]+(?:\.[0-9]+)?))?\s*$")
_WRAPPING_CHARS = "[]() \t\n"


def parse_rational(text: str) -> float:
    """Parse ``"n/d"`` (or a bare number) into a float.

    Raises:
        MalformedAngleError: If the text is not a non-negative rational
            or the denominator is zero.
    """
    cleaned = text.strip().strip("\"'")
    match = _RATIONAL_RE.match(cleaned)
    if match is None:
        raise MalformedAngleError("components", text, "not a rational number")

    numerator = float(match.group(1))
    if match.group(2) is None:
        return numerator

    denominator = float(match.group(2))
    if denominator == 0:
        raise MalformedAngleError("components", text, "zero denominator")
    return numerator / denominator


def parse_rational_triple(text: str) -> Angle:
    """Parse an EXIF GPS coordinate tag rendered as text into an ``Angle``.

    Brackets and quotes are optional; parts are comma separated.

    Raises:
        MalformedAngleError: If the text does not hold exactly three
            valid rationals or the resulting angle is out of range.
    """
    body = text.strip().strip(_WRAPPING_CHARS)
    if not body:
        raise MalformedAngleError("components", text, "empty coordinate tag")

    parts = [p for p in body.split(",") if p.strip()]
    if len(parts) != DMS_ARITY:
        raise MalformedAngleError(
            "components",
            text,
            f"expected {DMS_ARITY} rationals, got {len(parts)}",
        )

    return Angle(tuple(parse_rational(p) for p in parts))


def point_from_exif(
    point_id: str,
    latitude_tag: str,
    longitude_tag: str,
    latitude_ref: str = "",
    longitude_ref: str = "",
) -> Point:
    """Build a ``Point`` from the textual EXIF GPS tags of one photograph.

    Args:
        point_id: Photograph identifier (e.g. the file name).
        latitude_tag: Text of ``GPSLatitude``.
        longitude_tag: Text of ``GPSLongitude``.
        latitude_ref: Text of ``GPSLatitudeRef`` (``"N"``/``"S"``).
        longitude_ref: Text of ``GPSLongitudeRef`` (``"E"``/``"W"``).

    Raises:
        MalformedAngleError: If a tag cannot be parsed.
    """
    return Point(
        id=point_id,
        latitude=parse_rational_triple(latitude_tag),
        longitude=parse_rational_triple(longitude_tag),
        latitude_ref=latitude_ref.strip().strip("\"'"),
        longitude_ref=longitude_ref.strip().strip("\"'"),
    )
