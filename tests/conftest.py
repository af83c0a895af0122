"""Shared fixtures: a fresh store per test and a TestClient wired to it."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.auth.utils import get_password_hash
from app.database import get_db
from app.models import UserRole
from app.seed import seed_sample_data
from app.storage import MemStorage

CLIENT_PASSWORD = "client-secret"
ADMIN_PASSWORD = "admin-secret"


@pytest.fixture()
def storage():
    store = MemStorage()
    yield store
    store.close()


@pytest.fixture()
def seeded_storage(storage):
    seed_sample_data(storage)
    return storage


@pytest.fixture()
def app(seeded_storage):
    from main import app as _app

    _app.dependency_overrides[get_db] = lambda: seeded_storage
    yield _app
    _app.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


# ── Users ─────────────────────────────────────────────────────────────────


@pytest.fixture()
def client_user(client):
    """A client account registered through the API."""
    resp = client.post("/api/auth/register", json={
        "username": "priya",
        "password": CLIENT_PASSWORD,
        "email": "priya@example.com",
        "full_name": "Priya Sharma",
    })
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture()
def lawyer(seeded_storage):
    return seeded_storage.get_user_by_username("davidwilson")


def _token(client, username, password):
    resp = client.post("/api/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200
    return resp.json()["access_token"]


@pytest.fixture()
def client_headers(client, client_user):
    return {"Authorization": f"Bearer {_token(client, 'priya', CLIENT_PASSWORD)}"}


@pytest.fixture()
def admin_headers(client, seeded_storage):
    # Admins cannot self-register
    seeded_storage.create_user({
        "username": "admin",
        "password": get_password_hash(ADMIN_PASSWORD),
        "email": "admin@example.com",
        "full_name": "Site Admin",
        "role": UserRole.ADMIN,
    })
    return {"Authorization": f"Bearer {_token(client, 'admin', ADMIN_PASSWORD)}"}
