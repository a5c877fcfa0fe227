"""Tests for the Point model."""

from __future__ import annotations

import pytest

from photo_extent.models.angle import Angle, MalformedAngleError
from photo_extent.models.point import Point


class TestPoint:
    """Construction, normalisation, and serialisation."""

    def test_tuples_are_coerced(self) -> None:
        point = Point(id="a.jpg", latitude=(40, 0, 0), longitude=(10, 0, 0))  # type: ignore[arg-type]
        assert isinstance(point.latitude, Angle)
        assert point.longitude == Angle((10, 0, 0))

    def test_refs_default_empty(self) -> None:
        point = Point(id="a.jpg", latitude=Angle((1, 0, 0)), longitude=Angle((2, 0, 0)))
        assert point.latitude_ref == ""
        assert point.longitude_ref == ""

    def test_refs_normalised(self) -> None:
        point = Point(
            id="a.jpg",
            latitude=Angle((1, 0, 0)),
            longitude=Angle((2, 0, 0)),
            latitude_ref=" s ",
            longitude_ref="w",
        )
        assert point.latitude_ref == "S"
        assert point.longitude_ref == "W"

    def test_invalid_ref(self) -> None:
        with pytest.raises(MalformedAngleError):
            Point(
                id="a.jpg",
                latitude=Angle((1, 0, 0)),
                longitude=Angle((2, 0, 0)),
                longitude_ref="N",
            )

    def test_immutable(self) -> None:
        point = Point(id="a.jpg", latitude=Angle((1, 0, 0)), longitude=Angle((2, 0, 0)))
        with pytest.raises(AttributeError):
            point.id = "b.jpg"  # type: ignore[misc]

    def test_identity_equality(self) -> None:
        a = Point(id="a.jpg", latitude=Angle((1, 0, 0)), longitude=Angle((2, 0, 0)))
        b = Point(id="a.jpg", latitude=Angle((1, 0, 0)), longitude=Angle((2, 0, 0)))
        assert a == a
        assert a != b


class TestPointSerialisation:
    """Point.to_dict() / Point.from_dict()."""

    def test_to_dict(self) -> None:
        point = Point(
            id="a.jpg",
            latitude=Angle((40, 26, 46.5)),
            longitude=Angle((79, 58, 56)),
            latitude_ref="N",
            longitude_ref="W",
        )
        assert point.to_dict() == {
            "id": "a.jpg",
            "latitude": [40.0, 26.0, 46.5],
            "longitude": [79.0, 58.0, 56.0],
            "latitude_ref": "N",
            "longitude_ref": "W",
        }

    def test_from_dict(self) -> None:
        point = Point.from_dict(
            {"id": "a.jpg", "latitude": [40, 26, 46.5], "longitude": [79, 58, 56], "latitude_ref": "N"}
        )
        assert point.latitude == Angle((40, 26, 46.5))
        assert point.latitude_ref == "N"
        assert point.longitude_ref == ""

    def test_from_dict_preserves_fields(self) -> None:
        source = Point(
            id="a.jpg",
            latitude=Angle((1, 2, 3)),
            longitude=Angle((4, 5, 6)),
            latitude_ref="S",
        )
        assert Point.from_dict(source.to_dict()).to_dict() == source.to_dict()

    def test_from_dict_rejects_non_list(self) -> None:
        with pytest.raises(TypeError, match="latitude must be a list"):
            Point.from_dict({"id": "a.jpg", "latitude": "40 0 0", "longitude": [1, 0, 0]})

    def test_from_dict_missing_coordinates(self) -> None:
        with pytest.raises(MalformedAngleError, match="empty"):
            Point.from_dict({"id": "a.jpg"})
