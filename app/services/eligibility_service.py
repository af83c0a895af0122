"""Preliminary legal-aid eligibility check.

Final eligibility is always decided by the legal services authority; this
only tells an applicant whether applying is worthwhile.
"""
from typing import Dict, List

# Annual household income limits in INR
INCOME_THRESHOLDS: Dict[str, int] = {
    "single": 150000,
    "married": 200000,
    "family": 250000,
}

ELIGIBLE_CASE_TYPES: List[str] = [
    "Criminal Defense",
    "Domestic Violence",
    "Housing Eviction",
    "Employment Discrimination",
    "Consumer Protection",
    "Government Benefits",
    "Landlord-Tenant Disputes",
    "Family Law Matters",
    "Civil Rights Violations",
]


def check_eligibility(
    marital_status: str,
    annual_income: int,
    case_type: str,
    has_representation: bool,
    has_tried_other_means: bool,
) -> dict:
    """Apply the income, case-type and representation rules.

    Returns a dict with ``eligible``, the applicable ``income_threshold`` and
    a ``reasons`` list naming every rule the applicant failed.
    """
    threshold = INCOME_THRESHOLDS.get(marital_status, 0)
    reasons = []

    if annual_income > threshold:
        reasons.append(f"Annual income exceeds the limit of {threshold} for {marital_status} applicants")
    if case_type not in ELIGIBLE_CASE_TYPES:
        reasons.append(f"'{case_type}' cases have limited eligibility for legal aid")
    if has_representation:
        reasons.append("Applicant already has legal representation")
    if not has_tried_other_means:
        reasons.append("Applicant has not yet tried to resolve the issue through other means")

    return {
        "eligible": not reasons,
        "income_threshold": threshold,
        "case_type_eligible": case_type in ELIGIBLE_CASE_TYPES,
        "reasons": reasons,
    }
