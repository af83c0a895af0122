"""Tests for the legal aid eligibility check."""

from __future__ import annotations

import pytest

from app.services.eligibility_service import INCOME_THRESHOLDS, check_eligibility

APPLICATION = {
    "marital_status": "single",
    "annual_income": 120000,
    "case_type": "Domestic Violence",
    "has_representation": False,
    "has_tried_other_means": True,
}


def test_eligible_applicant():
    result = check_eligibility(**APPLICATION)
    assert result == {
        "eligible": True,
        "income_threshold": 150000,
        "case_type_eligible": True,
        "reasons": [],
    }


@pytest.mark.parametrize("status", ["single", "married", "family"])
def test_income_at_threshold_is_allowed(status):
    result = check_eligibility(**{
        **APPLICATION,
        "marital_status": status,
        "annual_income": INCOME_THRESHOLDS[status],
    })
    assert result["eligible"] is True


def test_every_failed_rule_reported():
    result = check_eligibility(
        marital_status="married",
        annual_income=500000,
        case_type="Corporate Merger",
        has_representation=True,
        has_tried_other_means=False,
    )
    assert result["eligible"] is False
    assert result["case_type_eligible"] is False
    assert len(result["reasons"]) == 4


def test_criteria_endpoint(client):
    resp = client.get("/api/legal-aid/criteria")
    assert resp.status_code == 200
    body = resp.json()
    assert body["income_thresholds"]["family"] == 250000
    assert "Criminal Defense" in body["eligible_case_types"]


def test_eligibility_endpoint(client):
    resp = client.post("/api/legal-aid/eligibility", json={**APPLICATION, "annual_income": 180000})
    assert resp.status_code == 200
    body = resp.json()
    assert body["eligible"] is False
    assert body["income_threshold"] == 150000
    assert body["reasons"] == ["Annual income exceeds the limit of 150000 for single applicants"]


def test_eligibility_rejects_unknown_status(client):
    resp = client.post("/api/legal-aid/eligibility", json={**APPLICATION, "marital_status": "widowed"})
    assert resp.status_code == 400
