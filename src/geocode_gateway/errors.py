from __future__ import annotations

from typing import Optional


class GeocodingGatewayError(Exception):
    """Base class for every failure the gateway knows how to classify."""


class InvalidQueryError(GeocodingGatewayError, ValueError):
    """The caller's parameters were rejected before any network call."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class UpstreamUnavailableError(GeocodingGatewayError):
    """The provider could not be reached (timeout, DNS, refused connection)."""

    def __init__(self, url: str, cause: Optional[BaseException] = None):
        self.url = url
        self.cause = cause
        msg = f"Geocoding service unreachable at {url}"
        if cause is not None:
            msg = f"{msg}: {cause}"
        super().__init__(msg)


class UpstreamStatusError(GeocodingGatewayError):
    """The provider answered with a status other than 200."""

    def __init__(self, status_code: int, url: str, body_snippet: str = ""):
        self.status_code = status_code
        self.url = url
        self.body_snippet = body_snippet
        super().__init__(f"Geocoding service returned error: {status_code}")


class ResponseParseError(GeocodingGatewayError):
    """The provider body was not valid JSON."""

    def __init__(self, cause: Optional[BaseException] = None, body_snippet: str = ""):
        self.cause = cause
        self.body_snippet = body_snippet
        msg = "Geocoding service returned a body that is not valid JSON"
        if cause is not None:
            msg = f"{msg}: {cause}"
        super().__init__(msg)
