"""Tests for the app-wide error handlers and service endpoints in main.py."""

from __future__ import annotations

from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from app.database import get_db


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "running"
    assert client.get("/health").json() == {"status": "healthy"}


def test_security_headers(client):
    resp = client.get("/health")
    assert resp.headers["Cross-Origin-Opener-Policy"] == "same-origin-allow-popups"


def test_validation_error_shape(client):
    resp = client.post("/api/auth/login", json={"username": "davidwilson"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["message"] == "Invalid input data"
    assert body["errors"][0]["loc"] == ["body", "password"]


def test_malformed_json_body(client):
    resp = client.post(
        "/api/auth/login",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400


def test_unexpected_error_returns_generic_500(app):
    broken = MagicMock()
    broken.get_user.side_effect = RuntimeError("store unavailable")
    app.dependency_overrides[get_db] = lambda: broken

    with TestClient(app, raise_server_exceptions=False) as c:
        resp = c.get("/api/user/1")

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Server error"}
