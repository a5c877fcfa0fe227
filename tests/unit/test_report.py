"""Tests for the pydantic extent report.

Covers:
- Construction from an ExtentResult and ExtentMeasurement
- JSON serialisation with the ``$schema`` alias
- Skipped comparisons carried into the report
"""

from __future__ import annotations

import json

import pytest

from photo_extent.engine.aspect_ratio import measure_extent
from photo_extent.engine.extent_tracker import find_extremes
from photo_extent.models.angle import Angle
from photo_extent.models.point import Point
from photo_extent.models.report import SCHEMA_VERSION, ExtentReport, ExtremePoint


def _report(points: list[Point], **kwargs: str) -> ExtentReport:
    extent = find_extremes(points)
    return ExtentReport.from_extent(
        extent,
        measure_extent(extent),
        equator_length_m=40_000_000.0,
        **kwargs,
    )


class TestExtentReport:
    """Report construction and serialisation."""

    def test_extreme_points(self, two_point_set: list[Point]) -> None:
        report = _report(two_point_set)
        assert report.north == ExtremePoint(
            id="b.jpg",
            latitude=[41.0, 0.0, 0.0],
            longitude=[11.0, 0.0, 0.0],
            latitude_ref="N",
            longitude_ref="E",
        )
        assert report.west.id == "a.jpg"

    def test_bounding_box(self, two_point_set: list[Point]) -> None:
        assert _report(two_point_set).bounding_box == pytest.approx([10.0, 40.0, 11.0, 41.0])

    def test_dimensions(self, two_point_set: list[Point]) -> None:
        dims = _report(two_point_set).dimensions
        assert dims.latitude_delta == [1.0, 0.0, 0.0]
        assert dims.reference_latitude == [41.0, 0.0, 0.0]
        assert dims.width_m == pytest.approx(40_000_000 / 360)

    def test_default_timestamp(self, two_point_set: list[Point]) -> None:
        assert _report(two_point_set).timestamp

    def test_explicit_timestamp(self, two_point_set: list[Point]) -> None:
        report = _report(two_point_set, timestamp="2026-10-19T12:00:00+00:00", run_id="abc")
        assert report.timestamp == "2026-10-19T12:00:00+00:00"
        assert report.run_id == "abc"

    def test_json_uses_schema_alias(self, two_point_set: list[Point]) -> None:
        data = json.loads(_report(two_point_set).to_json())
        assert data["$schema"] == SCHEMA_VERSION
        assert "schema_version" not in data
        assert data["north"]["id"] == "b.jpg"

    def test_to_dict(self, two_point_set: list[Point]) -> None:
        data = _report(two_point_set).to_dict()
        assert data["$schema"] == SCHEMA_VERSION
        assert data["point_count"] == 2

    def test_json_round_trip(self, two_point_set: list[Point]) -> None:
        report = _report(two_point_set, timestamp="2026-10-19T12:00:00+00:00")
        assert ExtentReport.model_validate_json(report.to_json()) == report

    def test_skipped_comparisons(self) -> None:
        points = [
            Point(id="p1.jpg", latitude=Angle((40, 0, 0)), longitude=Angle((10, 0, 0))),
            Point(id="p2.jpg", latitude=Angle((41, 0)), longitude=Angle((10, 30, 0))),
            Point(id="p3.jpg", latitude=Angle((42, 0, 0)), longitude=Angle((11, 0, 0))),
        ]
        report = _report(points)
        assert len(report.skipped_comparisons) == 2
        assert "Different length of coordinate" in report.skipped_comparisons[0]
