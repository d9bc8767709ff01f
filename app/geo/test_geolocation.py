import httpx
import pytest

from app.errors import LocationError
from app.geo.geolocation import client_ip_from_headers, geo_lookup

GEO_URL = "http://ip-api.com/json/{ip}"


def fake_response(status_code=200, json_data=None):
    request = httpx.Request("GET", "http://ip-api.com/json/203.0.113.7")
    return httpx.Response(status_code, json=json_data, request=request)


def test_client_ip_prefers_forwarded_for():
    assert client_ip_from_headers("203.0.113.7, 10.0.0.1", "10.0.0.2") == "203.0.113.7"


def test_client_ip_falls_back_to_peer():
    assert client_ip_from_headers(None, "10.0.0.2") == "10.0.0.2"
    assert client_ip_from_headers(" , ", "10.0.0.2") == "10.0.0.2"
    assert client_ip_from_headers(None, None) is None


def test_geo_lookup(monkeypatch):
    requested = []

    def fake_httpx_get(url, timeout=None):
        requested.append(url)
        return fake_response(
            json_data={
                "status": "success",
                "country": "Australia",
                "city": "Sydney",
                "lat": -33.87,
                "lon": 151.21,
            }
        )

    monkeypatch.setattr("app.geo.geolocation.httpx.get", fake_httpx_get)
    location = geo_lookup("203.0.113.7", url=GEO_URL, timeout=3)

    assert requested == ["http://ip-api.com/json/203.0.113.7"]
    assert location.city == "Sydney"
    assert location.country_name == "Australia"
    assert location.latitude == -33.87


def test_geo_lookup_without_ip():
    with pytest.raises(LocationError):
        geo_lookup(None, url=GEO_URL, timeout=3)


def test_geo_lookup_no_result(monkeypatch):
    monkeypatch.setattr(
        "app.geo.geolocation.httpx.get",
        lambda url, timeout=None: fake_response(
            json_data={"status": "fail", "message": "private range"}
        ),
    )
    with pytest.raises(LocationError):
        geo_lookup("10.0.0.1", url=GEO_URL, timeout=3)


def test_geo_lookup_bad_status(monkeypatch):
    monkeypatch.setattr(
        "app.geo.geolocation.httpx.get",
        lambda url, timeout=None: fake_response(status_code=429, json_data={}),
    )
    with pytest.raises(LocationError):
        geo_lookup("203.0.113.7", url=GEO_URL, timeout=3)


def test_geo_lookup_network_failure(monkeypatch):
    def fake_httpx_get(url, timeout=None):
        raise httpx.ConnectTimeout("timed out")

    monkeypatch.setattr("app.geo.geolocation.httpx.get", fake_httpx_get)
    with pytest.raises(LocationError):
        geo_lookup("203.0.113.7", url=GEO_URL, timeout=3)


def test_geo_lookup_bad_payload(monkeypatch):
    monkeypatch.setattr(
        "app.geo.geolocation.httpx.get",
        lambda url, timeout=None: fake_response(json_data={"status": "success", "city": "X"}),
    )
    with pytest.raises(LocationError):
        geo_lookup("203.0.113.7", url=GEO_URL, timeout=3)
