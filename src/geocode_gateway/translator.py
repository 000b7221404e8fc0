"""
Translate Photon GeoJSON responses into canonical results.

Photon API response format:
{
  "features": [
    {
      "geometry": {"coordinates": [lon, lat]},
      "properties": {
        "name": "...", "country": "...", "city": "...", "state": "...",
        "street": "...", "housenumber": "...", "postcode": "...",
        "osm_id": ..., "osm_type": "...", "osm_key": "...", "osm_value": "...",
        "extent": [minLon, maxLat, maxLon, minLat]
      }
    }
  ]
}

Features with a broken shape are skipped, while a body that is not
JSON at all raises ResponseParseError. The two paths stay separate.
"""

from __future__ import annotations

import json
import logging
import math
from itertools import islice
from typing import Any, Iterator, Optional, Tuple

from .errors import ResponseParseError
from .models import (
    PHOTON_COPYRIGHTS,
    CanonicalEntry,
    CanonicalResponse,
    GeoPoint,
    clamp_limit,
    is_valid_coordinate,
)

logger = logging.getLogger(__name__)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a coordinate
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def get_string(properties: dict[str, Any], key: str) -> Optional[str]:
    """Null-safe scalar lookup: missing or null yields None, never ""."""
    value = properties.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return None


def parse_osm_id(value: Any) -> Optional[int]:
    """Parse an OSM id from an int, integral float or numeric string."""
    if value is None or isinstance(value, bool):
        return None
    parsed: Optional[int] = None
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        parsed = int(value) if math.isfinite(value) else None
    elif isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            try:
                as_float = float(value.strip())
            except ValueError:
                return None
            parsed = int(as_float) if math.isfinite(as_float) else None
    if parsed is None or not INT64_MIN <= parsed <= INT64_MAX:
        return None
    return parsed


def parse_extent(value: Any) -> Optional[Tuple[float, float, float, float]]:
    """Keep the extent only when it is exactly four numbers, in provider order."""
    if not isinstance(value, list) or len(value) != 4:
        return None
    if not all(_is_number(v) for v in value):
        return None
    try:
        min_lon, max_lat, max_lon, min_lat = (float(v) for v in value)
    except OverflowError:
        return None
    if not all(math.isfinite(v) for v in (min_lon, max_lat, max_lon, min_lat)):
        return None
    return (min_lon, max_lat, max_lon, min_lat)


class PhotonTranslator:
    """Parses Photon bodies into CanonicalResponse objects."""

    copyrights: Tuple[str, ...] = PHOTON_COPYRIGHTS

    def translate(self, body: str, limit: int, locale: str) -> CanonicalResponse:
        """
        Parse a provider body.

        Args:
            body: Raw JSON text from the provider
            limit: Maximum number of entries to keep
            locale: Locale echoed back in the response

        Returns:
            CanonicalResponse with at most `limit` entries in provider order

        Raises:
            ResponseParseError if the body is not valid JSON
        """
        try:
            root = json.loads(body, parse_constant=_reject_constant)
        except (TypeError, ValueError) as e:
            raise ResponseParseError(e, body_snippet=str(body)[:200]) from e

        features = root.get("features") if isinstance(root, dict) else None
        if not isinstance(features, list):
            logger.warning("Invalid Photon response format: missing features array")
            return CanonicalResponse(locale=locale, copyrights=self.copyrights)

        entries = tuple(islice(self._iter_entries(features), clamp_limit(limit)))
        logger.debug(f"Translated {len(entries)} entries from {len(features)} features")
        return CanonicalResponse(locale=locale, copyrights=self.copyrights, entries=entries)

    def _iter_entries(self, features: list[Any]) -> Iterator[CanonicalEntry]:
        for feature in features:
            entry = self.parse_feature(feature)
            if entry is not None:
                yield entry

    def parse_feature(self, feature: Any) -> Optional[CanonicalEntry]:
        """Map one feature, or return None when its shape is unusable."""
        if not isinstance(feature, dict):
            return None
        geometry = feature.get("geometry")
        properties = feature.get("properties")
        if not isinstance(geometry, dict) or not isinstance(properties, dict):
            return None

        coordinates = geometry.get("coordinates")
        if not isinstance(coordinates, list) or len(coordinates) < 2:
            return None
        lon, lat = coordinates[0], coordinates[1]
        if not (_is_number(lat) and _is_number(lon)) or not is_valid_coordinate(lat, lon):
            return None

        return CanonicalEntry(
            point=GeoPoint(lat=float(lat), lon=float(lon)),
            name=get_string(properties, "name"),
            country=get_string(properties, "country"),
            city=get_string(properties, "city"),
            state=get_string(properties, "state"),
            street=get_string(properties, "street"),
            house_number=get_string(properties, "housenumber"),
            postcode=get_string(properties, "postcode"),
            osm_id=parse_osm_id(properties.get("osm_id")),
            osm_type=get_string(properties, "osm_type"),
            osm_key=get_string(properties, "osm_key"),
            osm_value=get_string(properties, "osm_value"),
            extent=parse_extent(properties.get("extent")),
        )
