"""Tests for app/payments and app/services/payment_service.py."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import stripe

from app.services.payment_service import (
    PaymentNotConfiguredError, PaymentProcessorError, PaymentService,
    get_payment_service, to_minor_units
)


@pytest.fixture()
def consultation(client, client_user, lawyer):
    resp = client.post("/api/consultations", json={
        "client_id": client_user["id"],
        "lawyer_id": lawyer.id,
        "schedule_date": "2024-05-01T10:00:00",
        "duration": 60,
        "fee": 150,
        "status": "pending-payment",
    })
    return resp.json()


@pytest.fixture()
def payment(client, consultation):
    resp = client.post("/api/payments", json={
        "client_id": consultation["client_id"],
        "lawyer_id": consultation["lawyer_id"],
        "consultation_id": consultation["id"],
        "amount": 150,
        "payment_method": "card",
    })
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture()
def stripe_service(app):
    service = PaymentService(api_key="sk_test_123", currency="inr")
    app.dependency_overrides[get_payment_service] = lambda: service
    return service


# ── Payment records ───────────────────────────────────────────────────────


class TestPaymentRecords:
    def test_record(self, payment):
        assert payment["status"] == "pending"
        assert payment["amount"] == 150
        assert payment["transaction_id"] is None

    def test_unknown_consultation(self, client, consultation):
        resp = client.post("/api/payments", json={
            "client_id": consultation["client_id"],
            "lawyer_id": consultation["lawyer_id"],
            "consultation_id": 999,
            "amount": 150,
        })
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Consultation not found"

    def test_lawyer_must_be_lawyer(self, client, client_user):
        resp = client.post("/api/payments", json={
            "client_id": client_user["id"],
            "lawyer_id": client_user["id"],
            "amount": 150,
        })
        assert resp.status_code == 404

    def test_amount_must_be_positive(self, client, client_user, lawyer):
        resp = client.post("/api/payments", json={
            "client_id": client_user["id"],
            "lawyer_id": lawyer.id,
            "amount": 0,
        })
        assert resp.status_code == 400

    def test_list_and_get(self, client, payment):
        by_client = client.get("/api/payments", params={"clientId": payment["client_id"]}).json()
        by_lawyer = client.get("/api/payments", params={"lawyerId": payment["lawyer_id"]}).json()
        assert [p["id"] for p in by_client] == [payment["id"]]
        assert [p["id"] for p in by_lawyer] == [payment["id"]]
        assert client.get(f"/api/payments/{payment['id']}").json() == payment
        assert client.get("/api/payments/999").status_code == 404
        assert client.get("/api/payments").status_code == 400

    def test_complete_payment(self, client, payment):
        resp = client.patch(f"/api/payments/{payment['id']}", json={
            "status": "completed",
            "transaction_id": "pi_123",
        })
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "completed"
        assert body["transaction_id"] == "pi_123"
        assert body["payment_method"] == "card"

    def test_update_missing_payment(self, client):
        assert client.patch("/api/payments/999", json={"status": "failed"}).status_code == 404


# ── Payment intents ───────────────────────────────────────────────────────


class TestPaymentIntent:
    def test_create_intent(self, client, stripe_service):
        intent = MagicMock(id="pi_123", client_secret="pi_123_secret_abc")
        with patch("stripe.PaymentIntent.create", return_value=intent) as create:
            resp = client.post("/api/create-payment-intent", json={"amount": 150.5})

        assert resp.status_code == 200
        assert resp.json() == {"client_secret": "pi_123_secret_abc"}
        kwargs = create.call_args.kwargs
        assert kwargs["amount"] == 15050
        assert kwargs["currency"] == "inr"
        assert kwargs["api_key"] == "sk_test_123"

    def test_stripe_error(self, client, stripe_service):
        with patch("stripe.PaymentIntent.create", side_effect=stripe.StripeError("Your card was declined")):
            resp = client.post("/api/create-payment-intent", json={"amount": 100})
        assert resp.status_code == 502
        assert resp.json()["detail"].startswith("Error creating payment intent:")

    def test_not_configured(self, client, app):
        app.dependency_overrides[get_payment_service] = lambda: PaymentService(api_key="")
        resp = client.post("/api/create-payment-intent", json={"amount": 100})
        assert resp.status_code == 500
        assert "not configured" in resp.json()["detail"]

    def test_amount_required(self, client, stripe_service):
        assert client.post("/api/create-payment-intent", json={}).status_code == 400


# ── Service ───────────────────────────────────────────────────────────────


class TestPaymentService:
    def test_minor_units(self):
        assert to_minor_units(150) == 15000
        assert to_minor_units(19.99) == 1999

    def test_unconfigured_service_raises(self):
        service = PaymentService(api_key="")
        assert service.configured is False
        with pytest.raises(PaymentNotConfiguredError):
            service.create_payment_intent(10)

    def test_processor_error_wrapped(self):
        service = PaymentService(api_key="sk_test_123")
        with patch("stripe.PaymentIntent.create", side_effect=stripe.StripeError("boom")):
            with pytest.raises(PaymentProcessorError):
                service.create_payment_intent(10)
