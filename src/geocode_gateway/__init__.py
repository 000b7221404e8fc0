"""
Geocoding gateway for a Photon-compatible provider.

- Models: Data structures (GeocodingQuery, GeoPoint, CanonicalEntry, ...)
- Base classes: Upstream client interface
- Validation: Raw parameters to GeocodingQuery
- URLs: Provider URL construction for forward and reverse lookups
- Translator: Provider JSON to canonical results
- Classifier: Failures to error kinds and status codes
- Gateway: Orchestrates the above for one request
"""

__version__ = "0.1.0"

from .errors import (
    GeocodingGatewayError,
    InvalidQueryError,
    UpstreamUnavailableError,
    UpstreamStatusError,
    ResponseParseError,
)

from .models import (
    QueryMode,
    GeoPoint,
    GeocodingQuery,
    CanonicalEntry,
    CanonicalResponse,
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MIN_LIMIT,
    DEFAULT_LOCALE,
    PHOTON_COPYRIGHTS,
)

from .base import (
    UpstreamClient,
    UpstreamResponse,
)

from .client import HttpUpstreamClient
from .settings import GatewaySettings, settings
from .validation import parse_query, parse_params
from .urls import build_url, reverse_base_url
from .translator import PhotonTranslator
from .classifier import ErrorKind, ErrorResponse, classify
from .gateway import GeocodeGateway, GatewayResult

__all__ = [
    "__version__",
    # Errors
    "GeocodingGatewayError",
    "InvalidQueryError",
    "UpstreamUnavailableError",
    "UpstreamStatusError",
    "ResponseParseError",
    # Models
    "QueryMode",
    "GeoPoint",
    "GeocodingQuery",
    "CanonicalEntry",
    "CanonicalResponse",
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "MIN_LIMIT",
    "DEFAULT_LOCALE",
    "PHOTON_COPYRIGHTS",
    # Upstream
    "UpstreamClient",
    "UpstreamResponse",
    "HttpUpstreamClient",
    # Config
    "GatewaySettings",
    "settings",
    # Pipeline
    "parse_query",
    "parse_params",
    "build_url",
    "reverse_base_url",
    "PhotonTranslator",
    "ErrorKind",
    "ErrorResponse",
    "classify",
    "GeocodeGateway",
    "GatewayResult",
]
