"""Pydantic extent report.

The report is the serialisable record of one extent computation: which
photographs bound the set, the angular spans between them, and the
metric dimensions derived from those spans.  Hosts write it next to the
photo folder or attach it to their own logs.

Explicit units throughout: angles as ``[degrees, minutes, seconds]``
lists, distances in metres, bounding box in unsigned decimal degrees.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from photo_extent.models.extent import ExtentMeasurement, ExtentResult
    from photo_extent.models.point import Point

# Schema version for forward compatibility
SCHEMA_VERSION = "photo-extent-v1"


class ExtremePoint(BaseModel):
    """One of the four bounding photographs.

    Attributes:
        id: Photograph identifier.
        latitude: Latitude as ``[degrees, minutes, seconds]``.
        longitude: Longitude as ``[degrees, minutes, seconds]``.
        latitude_ref: ``"N"``, ``"S"`` or ``""``.
        longitude_ref: ``"E"``, ``"W"`` or ``""``.
    """

    id: str
    latitude: list[float] = Field(default_factory=list)
    longitude: list[float] = Field(default_factory=list)
    latitude_ref: str = ""
    longitude_ref: str = ""

    @classmethod
    def from_point(cls, point: Point) -> ExtremePoint:
        return cls(
            id=point.id,
            latitude=point.latitude.to_list(),
            longitude=point.longitude.to_list(),
            latitude_ref=point.latitude_ref,
            longitude_ref=point.longitude_ref,
        )


class DimensionsSection(BaseModel):
    """Metric section of the report.

    Attributes:
        latitude_delta: North-south angular span ``[d, m, s]``.
        longitude_delta: East-west angular span ``[d, m, s]``.
        reference_latitude: Latitude used for the cosine correction.
        width_m: North-south span in metres.
        length_m: East-west span in metres.
        aspect_ratio: ``length_m / width_m``.
        equator_length_m: Circumference of the reference sphere.
    """

    latitude_delta: list[float] = Field(default_factory=list)
    longitude_delta: list[float] = Field(default_factory=list)
    reference_latitude: list[float] = Field(default_factory=list)
    width_m: float = 0.0
    length_m: float = 0.0
    aspect_ratio: float = 0.0
    equator_length_m: float = 0.0


class ExtentReport(BaseModel):
    """Top-level report of one extent computation."""

    schema_version: str = Field(default=SCHEMA_VERSION, alias="$schema")
    run_id: str = ""
    timestamp: str = ""
    point_count: int = 0
    north: ExtremePoint
    south: ExtremePoint
    east: ExtremePoint
    west: ExtremePoint
    bounding_box: list[float] = Field(default_factory=list)
    dimensions: DimensionsSection = Field(default_factory=DimensionsSection)
    skipped_comparisons: list[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @classmethod
    def from_extent(
        cls,
        extent: ExtentResult,
        measurement: ExtentMeasurement,
        *,
        equator_length_m: float,
        run_id: str = "",
        timestamp: str = "",
    ) -> ExtentReport:
        """Build a report from the tracker and calculator outputs.

        Args:
            extent: Output of ``find_extremes``.
            measurement: Output of ``measure_extent`` for the same extent.
            equator_length_m: Sphere circumference used for the measurement.
            run_id: Caller-supplied identifier of this computation.
            timestamp: ISO 8601 timestamp.  If empty, uses the current
                UTC time.
        """
        if not timestamp:
            timestamp = datetime.now(UTC).isoformat()

        return cls(
            run_id=run_id,
            timestamp=timestamp,
            point_count=extent.point_count,
            north=ExtremePoint.from_point(extent.north),
            south=ExtremePoint.from_point(extent.south),
            east=ExtremePoint.from_point(extent.east),
            west=ExtremePoint.from_point(extent.west),
            bounding_box=list(extent.bbox),
            dimensions=DimensionsSection(
                latitude_delta=measurement.latitude_delta.to_list(),
                longitude_delta=measurement.longitude_delta.to_list(),
                reference_latitude=measurement.reference_latitude.to_list(),
                width_m=measurement.width_m,
                length_m=measurement.length_m,
                aspect_ratio=measurement.ratio,
                equator_length_m=equator_length_m,
            ),
            skipped_comparisons=[str(e) for e in extent.comparison_errors],
        )

    def to_json(self, *, indent: int = 2) -> str:
        """Serialise to a JSON string using the ``$schema`` alias."""
        return self.model_dump_json(indent=indent, by_alias=True)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict."""
        return self.model_dump(by_alias=True)  # type: ignore[return-value]
