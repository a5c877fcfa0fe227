"""Ingestion record contract.

The ingestion collaborator (whatever reads photographs and their EXIF
metadata) hands the engine one record per photograph:

    {"id": "IMG_0042.jpg",
     "latitude": [40, 26, 46.32], "latitude_ref": "N",
     "longitude": [79, 58, 56.0], "longitude_ref": "W"}

``PointRecord`` validates the record shape at this boundary; schema
violations become ``RecordContractError`` so that drift between the
collaborator and the engine fails loudly instead of producing a bogus
extent.  DMS range checks stay with ``Angle`` and surface as
``MalformedAngleError``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import AliasChoices, BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from photo_extent.core.exceptions import ContractError
from photo_extent.models.angle import Angle
from photo_extent.models.point import Point

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger("photo_extent.ingest.records")


class RecordContractError(ContractError):
    """Raised when an ingestion record does not match ``PointRecord``.

    Attributes:
        index: Zero-based position of the offending record.
    """

    default_stage = "ingest"
    default_code = "RECORD_CONTRACT_VIOLATION"

    def __init__(self, message: str = "", *, index: int = -1, **kwargs: object) -> None:
        self.index = index
        super().__init__(message, **kwargs)


class PointRecord(BaseModel):
    """One photograph's position as produced by the ingestion collaborator.

    ``filename`` is accepted as an alias of ``id``.
    """

    id: str = Field(min_length=1, validation_alias=AliasChoices("id", "filename"))
    latitude: list[float] = Field(min_length=1)
    longitude: list[float] = Field(min_length=1)
    latitude_ref: str = ""
    longitude_ref: str = ""

    def to_point(self) -> Point:
        """Build a ``Point``.

        Raises:
            MalformedAngleError: If a coordinate is out of DMS range.
        """
        return Point(
            id=self.id,
            latitude=Angle(tuple(self.latitude)),
            longitude=Angle(tuple(self.longitude)),
            latitude_ref=self.latitude_ref,
            longitude_ref=self.longitude_ref,
        )


def points_from_records(records: Iterable[PointRecord | dict[str, Any]]) -> list[Point]:
    """Convert ingestion records into points, preserving order.

    Args:
        records: ``PointRecord`` instances or plain dicts of the same shape.

    Returns:
        One ``Point`` per record.

    Raises:
        RecordContractError: If a record does not match the schema.
        MalformedAngleError: If a coordinate is out of DMS range.
    """
    points: list[Point] = []
    for index, raw in enumerate(records):
        if isinstance(raw, PointRecord):
            record = raw
        else:
            try:
                record = PointRecord.model_validate(raw)
            except PydanticValidationError as exc:
                msg = (
                    f"Record {index} does not match the point contract: "
                    f"{exc.error_count()} error(s)"
                )
                raise RecordContractError(msg, index=index) from exc
        points.append(record.to_point())

    logger.debug("Records ingested | count=%d", len(points))
    return points
