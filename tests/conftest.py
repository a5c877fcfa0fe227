"""Shared pytest fixtures for the Photo Extent test suite."""

import pytest

from photo_extent.models.angle import Angle
from photo_extent.models.point import Point

# ---------------------------------------------------------------------------
# Point factories
# ---------------------------------------------------------------------------


def _make_point(
    point_id: str,
    latitude: tuple[float, ...],
    longitude: tuple[float, ...],
    latitude_ref: str = "",
    longitude_ref: str = "",
) -> Point:
    """Build a point from plain component tuples."""
    return Point(
        id=point_id,
        latitude=Angle(latitude),
        longitude=Angle(longitude),
        latitude_ref=latitude_ref,
        longitude_ref=longitude_ref,
    )


@pytest.fixture()
def two_point_set() -> list[Point]:
    """Two photos one degree apart in latitude and longitude (40N-41N, 10E-11E)."""
    return [
        _make_point("a.jpg", (40, 0, 0), (10, 0, 0), "N", "E"),
        _make_point("b.jpg", (41, 0, 0), (11, 0, 0), "N", "E"),
    ]


@pytest.fixture()
def survey_point_set() -> list[Point]:
    """Five photos from a small survey flight (northern/eastern hemisphere).

    Extremes: north=IMG_0003, south=IMG_0005, east=IMG_0004, west=IMG_0002.
    """
    return [
        _make_point("IMG_0001.jpg", (46, 36, 20.5), (7, 30, 10.0), "N", "E"),
        _make_point("IMG_0002.jpg", (46, 36, 25.0), (7, 29, 58.25), "N", "E"),
        _make_point("IMG_0003.jpg", (46, 37, 1.75), (7, 30, 5.5), "N", "E"),
        _make_point("IMG_0004.jpg", (46, 36, 40.0), (7, 31, 2.0), "N", "E"),
        _make_point("IMG_0005.jpg", (46, 35, 59.0), (7, 30, 30.0), "N", "E"),
    ]
