from fastapi import APIRouter
import logging

from app.legalaid.schemas import EligibilityRequest, EligibilityResponse, EligibilityCriteria
from app.services.eligibility_service import (
    ELIGIBLE_CASE_TYPES, INCOME_THRESHOLDS, check_eligibility
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/legal-aid", tags=["Legal Aid"])


@router.get("/criteria", response_model=EligibilityCriteria)
def get_criteria():
    return {
        "income_thresholds": INCOME_THRESHOLDS,
        "eligible_case_types": ELIGIBLE_CASE_TYPES
    }


@router.post("/eligibility", response_model=EligibilityResponse)
def check_legal_aid_eligibility(application: EligibilityRequest):
    result = check_eligibility(
        marital_status=application.marital_status,
        annual_income=application.annual_income,
        case_type=application.case_type,
        has_representation=application.has_representation,
        has_tried_other_means=application.has_tried_other_means,
    )
    logger.info(f"Legal aid check for '{application.case_type}': eligible={result['eligible']}")
    return result
