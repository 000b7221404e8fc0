"""
Query validation: turn raw request parameters into a GeocodingQuery.

Every rejection raises InvalidQueryError whose reason is shown to the
caller verbatim, so the messages below are part of the public contract.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional, Union

from .errors import InvalidQueryError
from .models import (
    DEFAULT_LIMIT,
    DEFAULT_LOCALE,
    GeoPoint,
    GeocodingQuery,
    QueryMode,
    clamp_limit,
)

MISSING_QUERY_REASON = "Query parameter 'q' is required for forward geocoding"
MISSING_POINT_REASON = "Point parameter is required for reverse geocoding"
POINT_FORMAT_REASON = "Invalid point format. Expected: lat,lon"

_DECIMAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_bool(value: Union[bool, str, None]) -> bool:
    """Only a case-insensitive "true" counts as true."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


def parse_limit(value: Union[int, str, None]) -> int:
    """Parse and clamp the result limit. Out-of-range values are capped, not rejected."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return DEFAULT_LIMIT
    if isinstance(value, bool):
        raise InvalidQueryError(f"Invalid limit: {value}")
    if isinstance(value, str) and not _INTEGER_RE.fullmatch(value.strip()):
        raise InvalidQueryError(f"Invalid limit: {value}")
    try:
        parsed = int(value.strip()) if isinstance(value, str) else int(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidQueryError(f"Invalid limit: {value}") from None
    return clamp_limit(parsed)


def parse_point(point: Optional[str]) -> GeoPoint:
    """
    Parse a "lat,lon" string into a range-checked GeoPoint.

    Raises:
        InvalidQueryError: missing point, wrong token count, non-numeric
            token or out-of-range value, each with its own reason
    """
    if point is None or not str(point).strip():
        raise InvalidQueryError(MISSING_POINT_REASON)

    tokens = str(point).split(",")
    if len(tokens) != 2:
        raise InvalidQueryError(POINT_FORMAT_REASON)

    lat_token, lon_token = tokens[0].strip(), tokens[1].strip()
    if not (_DECIMAL_RE.fullmatch(lat_token) and _DECIMAL_RE.fullmatch(lon_token)):
        raise InvalidQueryError(f"Invalid coordinates: {point}")
    lat, lon = float(lat_token), float(lon_token)

    # exponents like 1e999 overflow to inf
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidQueryError(f"Invalid coordinates: {point}")

    return GeoPoint.from_coordinates(lat, lon)


def parse_query(
    q: Optional[str] = None,
    reverse: Union[bool, str, None] = False,
    point: Optional[str] = None,
    limit: Union[int, str, None] = None,
    locale: Optional[str] = None,
) -> GeocodingQuery:
    """
    Validate raw parameters into a GeocodingQuery.

    Args:
        q: Free-text place description (forward mode)
        reverse: Reverse mode flag; bool or query-string text
        point: "lat,lon" (reverse mode)
        limit: Maximum results, clamped into [1, 50]
        locale: Result language, passed through unmodified; None means "en"

    Returns:
        GeocodingQuery

    Raises:
        InvalidQueryError with a human-readable reason
    """
    locale = locale if locale is not None else DEFAULT_LOCALE

    if parse_bool(reverse):
        geo_point = parse_point(point)
        return GeocodingQuery(
            mode=QueryMode.REVERSE,
            point=geo_point,
            limit=parse_limit(limit),
            locale=locale,
        )

    if q is None or not str(q).strip():
        raise InvalidQueryError(MISSING_QUERY_REASON)

    return GeocodingQuery(
        mode=QueryMode.FORWARD,
        text=str(q),
        limit=parse_limit(limit),
        locale=locale,
    )


def parse_params(params: Mapping[str, Any]) -> GeocodingQuery:
    """Validate a mapping of already-parsed query-string parameters."""
    return parse_query(
        q=params.get("q"),
        reverse=params.get("reverse"),
        point=params.get("point"),
        limit=params.get("limit"),
        locale=params.get("locale"),
    )
