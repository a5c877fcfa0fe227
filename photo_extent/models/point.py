"""Data model for a geotagged point.

A Point is one photograph reduced to its position: an identifier
(usually the file name) plus unsigned latitude and longitude angles and
the hemisphere references read alongside them.  Points are created by
the ingestion boundary and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from photo_extent.core.constants import LATITUDE_REFS, LONGITUDE_REFS
from photo_extent.models.angle import Angle, MalformedAngleError, coerce_angle


@dataclass(frozen=True, slots=True, eq=False)
class Point:
    """A single geotagged photograph position.

    Points compare by identity: two photographs taken at the same spot
    are still two distinct members of a point set.

    Attributes:
        id: Identifier of the source photograph (e.g. ``"IMG_0042.jpg"``).
        latitude: Unsigned latitude magnitude.
        longitude: Unsigned longitude magnitude.
        latitude_ref: ``"N"``, ``"S"``, or ``""`` when unknown.
        longitude_ref: ``"E"``, ``"W"``, or ``""`` when unknown.
    """

    id: str
    latitude: Angle
    longitude: Angle
    latitude_ref: str = ""
    longitude_ref: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "latitude", coerce_angle(self.latitude))
        object.__setattr__(self, "longitude", coerce_angle(self.longitude))
        latitude_ref = _normalise_ref(self.latitude_ref, LATITUDE_REFS, "latitude_ref")
        longitude_ref = _normalise_ref(self.longitude_ref, LONGITUDE_REFS, "longitude_ref")
        object.__setattr__(self, "latitude_ref", latitude_ref)
        object.__setattr__(self, "longitude_ref", longitude_ref)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict for logging or transport."""
        return {
            "id": self.id,
            "latitude": self.latitude.to_list(),
            "longitude": self.longitude.to_list(),
            "latitude_ref": self.latitude_ref,
            "longitude_ref": self.longitude_ref,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Point:
        """Deserialise from a plain dict.

        Raises:
            TypeError: If coordinate values are not lists or tuples.
            MalformedAngleError: If a coordinate is not a valid angle.
        """
        latitude_raw = data.get("latitude", [])
        if not isinstance(latitude_raw, (list, tuple)):
            msg = f"latitude must be a list, got {type(latitude_raw).__name__}"
            raise TypeError(msg)

        longitude_raw = data.get("longitude", [])
        if not isinstance(longitude_raw, (list, tuple)):
            msg = f"longitude must be a list, got {type(longitude_raw).__name__}"
            raise TypeError(msg)

        return cls(
            id=str(data.get("id", "")),
            latitude=Angle(tuple(latitude_raw)),
            longitude=Angle(tuple(longitude_raw)),
            latitude_ref=str(data.get("latitude_ref", "")),
            longitude_ref=str(data.get("longitude_ref", "")),
        )


def _normalise_ref(value: str, allowed: frozenset[str], field_name: str) -> str:
    ref = str(value or "").strip().upper()
    if ref and ref not in allowed:
        raise MalformedAngleError(field_name, value, f"must be one of {sorted(allowed)} or empty")
    return ref
