"""
Tests for mensar.client
"""

from datetime import date
from urllib.parse import parse_qs, urlparse

import pytest
import requests

from mensar.client import CookpitClient
from mensar.errors import DeserializationError, TransportError


class FakeResponse:
    def __init__(self, payload=None, status_code=200, body_is_json=True):
        self.payload = payload
        self.status_code = status_code
        self.body_is_json = body_is_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if not self.body_is_json:
            raise ValueError("Expecting value")
        return self.payload


def test_urls_carry_query_parameters(config):
    client = CookpitClient(config)

    facilities = urlparse(client.facilities_url("de"))
    rotas = urlparse(client.weekly_rotas_url("en", date(2024, 1, 3)))

    assert facilities.path == "/v1/facilities"
    assert parse_qs(facilities.query) == {
        "client-id": ["ethz-wcms"],
        "lang": ["de"],
        "rs-first": ["0"],
        "rs-size": ["50"],
    }
    assert rotas.path == "/v1/weeklyrotas"
    assert parse_qs(rotas.query)["valid-after"] == ["2024-01-03"]
    assert parse_qs(rotas.query)["lang"] == ["en"]


def test_fetch_facilities_with_injected_transport(config, catalog_payload):
    seen = []

    def fetch_json(url):
        seen.append(url)
        return catalog_payload

    facilities = CookpitClient(config, fetch_json=fetch_json).fetch_facilities("en")

    assert [f.facility_name for f in facilities] == ["Polyterrasse", "Polybahn", "Clausiusbar"]
    assert seen == [CookpitClient(config).facilities_url("en")]


def test_fetch_weekly_rotas(config, rotas_payload):
    client = CookpitClient(config, fetch_json=lambda url: rotas_payload)

    rotas = client.fetch_weekly_rotas("en", date(2024, 1, 3))

    assert [r.weekly_rota_id for r in rotas] == [100]


def test_schema_mismatch_raises_deserialization_error(config):
    payload = {"facility-array": [{"facility-name": "Polyterrasse"}]}
    client = CookpitClient(config, fetch_json=lambda url: payload)

    with pytest.raises(DeserializationError):
        client.fetch_facilities("en")


def test_non_object_body_raises_deserialization_error(config):
    client = CookpitClient(config, fetch_json=lambda url: ["unexpected"])

    with pytest.raises(DeserializationError):
        client.fetch_weekly_rotas("en", date(2024, 1, 3))


def test_http_transport_decodes_json(config, catalog_payload, monkeypatch):
    calls = []

    def fake_get(self, url, timeout=None):
        calls.append((url, timeout))
        return FakeResponse(catalog_payload)

    monkeypatch.setattr(requests.Session, "get", fake_get)
    client = CookpitClient(config)

    facilities = client.fetch_facilities("en")
    client.close()

    assert len(facilities) == 3
    assert calls == [(client.facilities_url("en"), 30.0)]


def test_http_error_status_raises_transport_error(config, monkeypatch):
    monkeypatch.setattr(
        requests.Session, "get", lambda self, url, timeout=None: FakeResponse(status_code=503)
    )

    with pytest.raises(TransportError):
        CookpitClient(config).fetch_facilities("en")


def test_connection_failure_raises_transport_error(config, monkeypatch):
    def refuse(self, url, timeout=None):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests.Session, "get", refuse)

    with pytest.raises(TransportError):
        CookpitClient(config).fetch_facilities("en")


def test_invalid_json_body_raises_deserialization_error(config, monkeypatch):
    monkeypatch.setattr(
        requests.Session,
        "get",
        lambda self, url, timeout=None: FakeResponse(body_is_json=False),
    )

    with pytest.raises(DeserializationError):
        CookpitClient(config).fetch_facilities("en")
