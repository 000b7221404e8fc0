from __future__ import annotations

import json

from geocode_gateway import cli
from geocode_gateway.gateway import GeocodeGateway

from conftest import FakeUpstreamClient, make_feature
from geocode_gateway.base import UpstreamResponse


def _patch_gateway(monkeypatch, client):
    original = GeocodeGateway.from_settings

    def from_settings(settings, **kwargs):
        return original(settings, client=client)

    monkeypatch.setattr(GeocodeGateway, "from_settings", staticmethod(from_settings))


def test_cli_forward_prints_json(monkeypatch, capsys):
    body = json.dumps({"features": [make_feature(name="Berlin")]})
    client = FakeUpstreamClient(UpstreamResponse(200, body))
    _patch_gateway(monkeypatch, client)

    exit_code = cli.main(["Berlin", "Mitte", "--limit", "2", "--service-url", "http://photon.test/api"])

    out = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert out["hits"][0]["name"] == "Berlin"
    assert client.urls == ["http://photon.test/api/?q=Berlin+Mitte&limit=2&lang=en"]


def test_cli_invalid_reverse_exits_nonzero(monkeypatch, capsys):
    client = FakeUpstreamClient()
    _patch_gateway(monkeypatch, client)

    exit_code = cli.main(["--reverse", "--point", "north,south"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert json.loads(captured.out) == {"error": "Invalid coordinates: north,south"}
    assert "invalid_query" in captured.err
    assert client.urls == []
