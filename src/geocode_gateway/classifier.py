"""
Error classification: map any failure to an externally visible kind,
status code and message.
"""

from dataclasses import dataclass
from enum import StrEnum

from .errors import (
    InvalidQueryError,
    ResponseParseError,
    UpstreamStatusError,
    UpstreamUnavailableError,
)


class ErrorKind(StrEnum):
    """Kinds of failure surfaced to callers."""
    INVALID_QUERY = "invalid_query"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UPSTREAM_ERROR = "upstream_error"
    PARSE_ERROR = "parse_error"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ErrorResponse:
    """A classified failure, ready to be served."""
    kind: ErrorKind
    status_code: int
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message}


def classify(error: BaseException) -> ErrorResponse:
    """
    Classify a failure. Never raises; unknown failures become INTERNAL.

    Args:
        error: Exception raised while handling a request

    Returns:
        ErrorResponse with kind, status and user-facing message
    """
    if isinstance(error, InvalidQueryError):
        return ErrorResponse(ErrorKind.INVALID_QUERY, 400, error.reason)
    if isinstance(error, UpstreamUnavailableError):
        return ErrorResponse(ErrorKind.UPSTREAM_UNAVAILABLE, 500, "Geocoding service unavailable")
    if isinstance(error, UpstreamStatusError):
        return ErrorResponse(
            ErrorKind.UPSTREAM_ERROR,
            502,
            f"Geocoding service returned error: {error.status_code}",
        )
    if isinstance(error, ResponseParseError):
        return ErrorResponse(ErrorKind.PARSE_ERROR, 500, "Invalid response from geocoding service")
    return ErrorResponse(ErrorKind.INTERNAL, 500, f"Internal server error: {error}")
