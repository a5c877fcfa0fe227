"""Ingestion boundary.

Turns already-extracted photograph metadata into validated points:
- records: pydantic contract for ``{id, latitude, longitude}`` records
- exif: EXIF GPS rational tag text to angles
"""

from photo_extent.ingest.exif import parse_rational, parse_rational_triple, point_from_exif
from photo_extent.ingest.records import PointRecord, RecordContractError, points_from_records

__all__ = [
    "PointRecord",
    "RecordContractError",
    "parse_rational",
    "parse_rational_triple",
    "point_from_exif",
    "points_from_records",
]
