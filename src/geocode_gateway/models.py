"""
Core data models for geocoding queries and results.

These immutable, frozen dataclasses serve as the contract between
the validator, the translator and the gateway. They live for the
duration of a single request.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Optional, Tuple

from .errors import InvalidQueryError


DEFAULT_LIMIT = 10
MIN_LIMIT = 1
MAX_LIMIT = 50
DEFAULT_LOCALE = "en"

PHOTON_COPYRIGHTS: Tuple[str, ...] = ("OpenStreetMap", "Photon")

OUT_OF_RANGE_REASON = "Coordinates out of range. Lat: [-90, 90], Lon: [-180, 180]"


def clamp_limit(limit: int) -> int:
    """Clamp a requested result count into [MIN_LIMIT, MAX_LIMIT]."""
    return max(MIN_LIMIT, min(int(limit), MAX_LIMIT))


def is_valid_coordinate(lat: float, lon: float) -> bool:
    """True when lat/lon are finite and inside the WGS84 ranges."""
    try:
        lat, lon = float(lat), float(lon)
    except (TypeError, ValueError, OverflowError):
        return False
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return False
    return -90 <= lat <= 90 and -180 <= lon <= 180


class QueryMode(StrEnum):
    """Direction of a geocoding lookup."""
    FORWARD = "forward"
    REVERSE = "reverse"


@dataclass(frozen=True)
class GeoPoint:
    """A WGS84 coordinate pair."""
    lat: float
    lon: float

    @classmethod
    def from_coordinates(cls, lat: float, lon: float) -> "GeoPoint":
        """
        Build a point after range validation.

        Raises:
            InvalidQueryError: if either value is non-finite or out of range
        """
        if not is_valid_coordinate(lat, lon):
            raise InvalidQueryError(OUT_OF_RANGE_REASON)
        return cls(lat=float(lat), lon=float(lon))

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lon": self.lon}


@dataclass(frozen=True)
class GeocodingQuery:
    """
    A validated geocoding request.

    Forward queries carry `text`, reverse queries carry `point`.
    `limit` is always inside [MIN_LIMIT, MAX_LIMIT] once the
    validator has produced the query.
    """
    mode: QueryMode
    text: Optional[str] = None
    point: Optional[GeoPoint] = None
    limit: int = DEFAULT_LIMIT
    locale: str = DEFAULT_LOCALE

    @property
    def is_reverse(self) -> bool:
        return self.mode is QueryMode.REVERSE

    def is_valid(self) -> bool:
        """Check the mode/payload invariant."""
        if self.is_reverse:
            return self.point is not None
        return bool(self.text and self.text.strip())


@dataclass(frozen=True)
class CanonicalEntry:
    """
    One provider-independent search hit.

    Fields missing from the provider payload stay None; they are
    never defaulted to empty strings.
    """
    point: GeoPoint
    name: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    street: Optional[str] = None
    house_number: Optional[str] = None
    postcode: Optional[str] = None
    osm_id: Optional[int] = None
    osm_type: Optional[str] = None
    osm_key: Optional[str] = None
    osm_value: Optional[str] = None
    extent: Optional[Tuple[float, float, float, float]] = None  # minLon, maxLat, maxLon, minLat

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict, leaving out absent fields."""
        data: dict[str, Any] = {
            "point": self.point.to_dict(),
            "name": self.name,
            "country": self.country,
            "city": self.city,
            "state": self.state,
            "street": self.street,
            "housenumber": self.house_number,
            "postcode": self.postcode,
            "osm_id": self.osm_id,
            "osm_type": self.osm_type,
            "osm_key": self.osm_key,
            "osm_value": self.osm_value,
            "extent": list(self.extent) if self.extent is not None else None,
        }
        return {k: v for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class CanonicalResponse:
    """The translated result list for one request, in provider order."""
    locale: str
    copyrights: Tuple[str, ...] = PHOTON_COPYRIGHTS
    entries: Tuple[CanonicalEntry, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.entries)

    def to_dict(self) -> dict[str, Any]:
        return {
            "locale": self.locale,
            "copyrights": list(self.copyrights),
            "hits": [entry.to_dict() for entry in self.entries],
        }
