from __future__ import annotations

import pytest

from geocode_gateway.classifier import ErrorKind, classify
from geocode_gateway.errors import (
    InvalidQueryError,
    ResponseParseError,
    UpstreamStatusError,
    UpstreamUnavailableError,
)


@pytest.mark.parametrize(
    "error, kind, status",
    [
        (InvalidQueryError("bad"), ErrorKind.INVALID_QUERY, 400),
        (UpstreamUnavailableError("http://x", ConnectionError("refused")), ErrorKind.UPSTREAM_UNAVAILABLE, 500),
        (UpstreamStatusError(503, "http://x"), ErrorKind.UPSTREAM_ERROR, 502),
        (ResponseParseError(ValueError("Expecting value")), ErrorKind.PARSE_ERROR, 500),
        (RuntimeError("boom"), ErrorKind.INTERNAL, 500),
        (KeyError("features"), ErrorKind.INTERNAL, 500),
    ],
)
def test_classify_kind_and_status(error, kind, status):
    classified = classify(error)

    assert classified.kind is kind
    assert classified.status_code == status


def test_invalid_query_carries_reason():
    classified = classify(InvalidQueryError("Invalid point format. Expected: lat,lon"))
    assert classified.to_dict() == {"error": "Invalid point format. Expected: lat,lon"}


def test_upstream_error_message_includes_status():
    assert classify(UpstreamStatusError(404, "http://x")).message == "Geocoding service returned error: 404"


def test_generic_messages_do_not_leak_details():
    unavailable = classify(UpstreamUnavailableError("http://secret-host", OSError("dns failure")))
    parse = classify(ResponseParseError(ValueError("line 1 column 1")))

    assert "secret-host" not in unavailable.message
    assert "column" not in parse.message


def test_internal_message_includes_description():
    assert classify(RuntimeError("boom")).message == "Internal server error: boom"
