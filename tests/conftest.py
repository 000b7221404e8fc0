from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Optional

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


from geocode_gateway.base import UpstreamClient, UpstreamResponse


class FakeUpstreamClient(UpstreamClient):
    """Records fetched URLs and replays a canned response or error."""

    def __init__(self, response: Optional[UpstreamResponse] = None, error: Optional[BaseException] = None):
        self.response = response or UpstreamResponse(200, json.dumps({"features": []}))
        self.error = error
        self.urls: list[str] = []

    def fetch(self, url: str) -> UpstreamResponse:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.response


def make_feature(lon: float = 13.4, lat: float = 52.5, **properties: Any) -> dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [lon, lat]},
        "properties": properties,
    }


@pytest.fixture
def full_properties() -> dict[str, Any]:
    return {
        "name": "Berlin",
        "country": "Germany",
        "city": "Berlin",
        "state": "Berlin",
        "street": "Unter den Linden",
        "housenumber": "77",
        "postcode": "10117",
        "osm_id": 240109189,
        "osm_type": "N",
        "osm_key": "place",
        "osm_value": "city",
        "extent": [13.088, 52.675, 13.761, 52.338],
    }


@pytest.fixture
def fake_client_factory():
    def factory(body: Any = None, status: int = 200, error: Optional[BaseException] = None):
        if body is None:
            body = {"features": []}
        text = body if isinstance(body, str) else json.dumps(body)
        return FakeUpstreamClient(UpstreamResponse(status, text), error=error)
    return factory
