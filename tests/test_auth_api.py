"""Tests for app/auth and app/users: registration, login and profiles."""

from __future__ import annotations

from datetime import timedelta

from app.auth.utils import create_access_token
from app.seed import DEMO_LAWYER_PASSWORD
from conftest import CLIENT_PASSWORD


# ── Register ──────────────────────────────────────────────────────────────


class TestRegister:
    def test_register_client(self, client_user):
        assert client_user["id"] == 3
        assert client_user["username"] == "priya"
        assert client_user["role"] == "client"
        assert client_user["is_verified"] is False
        assert "password" not in client_user

    def test_password_is_hashed(self, client_user, seeded_storage):
        stored = seeded_storage.get_user(client_user["id"])
        assert stored.password != CLIENT_PASSWORD

    def test_register_lawyer_profile(self, client):
        resp = client.post("/api/auth/register", json={
            "username": "meera",
            "password": "lawyer-secret",
            "email": "meera@example.com",
            "full_name": "Meera Iyer",
            "role": "lawyer",
            "specialization": "Tax Law",
            "experience": 4,
            "rate_per_hour": 90,
        })
        assert resp.status_code == 201
        body = resp.json()
        assert body["role"] == "lawyer"
        assert body["specialization"] == "Tax Law"

    def test_duplicate_username(self, client, client_user):
        resp = client.post("/api/auth/register", json={
            "username": "priya",
            "password": "another-secret",
            "email": "someone@example.com",
            "full_name": "Someone Else",
        })
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Username already exists"

    def test_duplicate_email(self, client, client_user):
        resp = client.post("/api/auth/register", json={
            "username": "priya2",
            "password": "another-secret",
            "email": "priya@example.com",
            "full_name": "Someone Else",
        })
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Email already exists"

    def test_admin_role_rejected(self, client):
        resp = client.post("/api/auth/register", json={
            "username": "mallory",
            "password": "mallory-secret",
            "email": "mallory@example.com",
            "full_name": "Mallory",
            "role": "admin",
        })
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid input data"

    def test_invalid_email(self, client):
        resp = client.post("/api/auth/register", json={
            "username": "bademail",
            "password": "secret123",
            "email": "not-an-email",
            "full_name": "Bad Email",
        })
        assert resp.status_code == 400
        assert resp.json()["errors"]


# ── Login ─────────────────────────────────────────────────────────────────


class TestLogin:
    def test_login_seeded_lawyer(self, client):
        resp = client.post("/api/auth/login", json={
            "username": "davidwilson",
            "password": DEMO_LAWYER_PASSWORD,
        })
        assert resp.status_code == 200
        body = resp.json()
        assert body["user"]["username"] == "davidwilson"
        assert body["session"] == {"user_id": 1, "username": "davidwilson", "role": "lawyer"}
        assert body["token_type"] == "bearer"
        assert body["access_token"]

    def test_wrong_password(self, client):
        resp = client.post("/api/auth/login", json={"username": "davidwilson", "password": "nope"})
        assert resp.status_code == 401
        assert resp.json()["detail"] == "Invalid credentials"

    def test_unknown_user(self, client):
        resp = client.post("/api/auth/login", json={"username": "ghost", "password": "nope"})
        assert resp.status_code == 401

    def test_logout(self, client):
        resp = client.post("/api/auth/logout")
        assert resp.status_code == 200


# ── Current user ──────────────────────────────────────────────────────────


class TestCurrentUser:
    def test_me(self, client, client_headers):
        resp = client.get("/api/auth/me", headers=client_headers)
        assert resp.status_code == 200
        assert resp.json()["username"] == "priya"

    def test_me_without_token(self, client):
        assert client.get("/api/auth/me").status_code == 401

    def test_me_with_garbage_token(self, client):
        resp = client.get("/api/auth/me", headers={"Authorization": "Bearer not.a.token"})
        assert resp.status_code == 401

    def test_me_with_expired_token(self, client):
        token = create_access_token({"sub": "davidwilson"}, expires_delta=timedelta(minutes=-5))
        resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401

    def test_me_for_unknown_subject(self, client):
        token = create_access_token({"sub": "ghost"})
        resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401


# ── Profiles ──────────────────────────────────────────────────────────────


class TestProfiles:
    def test_get_user(self, client):
        resp = client.get("/api/user/2")
        assert resp.status_code == 200
        body = resp.json()
        assert body["username"] == "sarahchen"
        assert "password" not in body

    def test_get_missing_user(self, client):
        resp = client.get("/api/user/999")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "User not found"

    def test_partial_update(self, client, client_user):
        resp = client.patch(f"/api/user/{client_user['id']}", json={"phone_number": "+919800000000"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["phone_number"] == "+919800000000"
        assert body["email"] == "priya@example.com"
        assert body["created_at"] == client_user["created_at"]

    def test_update_to_taken_email(self, client, client_user):
        resp = client.patch(
            f"/api/user/{client_user['id']}", json={"email": "david.wilson@example.com"}
        )
        assert resp.status_code == 400

    def test_update_missing_user(self, client):
        resp = client.patch("/api/user/999", json={"bio": "x"})
        assert resp.status_code == 404

    def test_cannot_null_required_field(self, client, client_user):
        resp = client.patch(f"/api/user/{client_user['id']}", json={"full_name": None})
        assert resp.status_code == 400
