"""Tests for the FastAPI application in :mod:`app.main`."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.main import app
from clearfind.analyzer import analyze_page
from clearfind.errors import ScanError


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_health(client: TestClient) -> None:
    """Given the API When health is requested Then ok is returned."""

    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.parametrize("payload", [{}, {"url": "example.com"}, {"url": "ftp://example.com"}, {"url": 12}])
def test_scan_rejects_invalid_urls(client: TestClient, payload: dict) -> None:
    """Given a missing or malformed URL When scanning Then a 400 error body is returned."""

    response = client.post("/api/scan", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Provide a valid http(s) URL"}


def test_scan_returns_result(client: TestClient, monkeypatch: pytest.MonkeyPatch, fetched_at) -> None:
    """Given a non-HTML page When scanning Then a 200 response carries the degraded result."""

    def fake_scan(url: str, *, config=None):
        return analyze_page(url, "not html", 401, fetched_at)

    monkeypatch.setattr("app.main.scan_url", fake_scan)

    response = client.post("/api/scan", json={"url": "https://example.com/private"})

    assert response.status_code == 200
    body = response.json()
    assert body["url"] == "https://example.com/private"
    assert body["summary"] == {"issues": 1, "oks": 0, "infos": 0}
    assert body["seo"]["findings"][0]["id"] == "seo.html"
    assert body["aeo"] == {"findings": []}
    assert body["meta"]["httpStatus"] == 401


def test_scan_failure_maps_to_500(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an acquisition failure When scanning Then a generic 500 error body is returned."""

    def fake_scan(url: str, *, config=None):
        raise ScanError(url, "connection refused")

    monkeypatch.setattr("app.main.scan_url", fake_scan)

    response = client.post("/api/scan", json={"url": "https://example.com"})

    assert response.status_code == 500
    assert response.json() == {"error": "Scan failed. Try a different URL."}


def test_unexpected_failure_maps_to_500(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unexpected internal error When scanning Then no partial result is returned."""

    def fake_scan(url: str, *, config=None):
        raise RuntimeError("parser exploded")

    monkeypatch.setattr("app.main.scan_url", fake_scan)

    response = client.post("/api/scan", json={"url": "https://example.com"})

    assert response.status_code == 500
    assert response.json() == {"error": "Scan failed. Try a different URL."}
