from pydantic import BaseModel, Field
from typing import Dict, List, Literal, Optional

class EligibilityRequest(BaseModel):
    marital_status: Literal["single", "married", "family"]
    annual_income: int = Field(..., ge=0, description="Annual income in INR")
    case_type: str = Field(..., min_length=1)
    case_description: Optional[str] = None
    has_representation: bool
    has_tried_other_means: bool

class EligibilityResponse(BaseModel):
    eligible: bool
    income_threshold: int
    case_type_eligible: bool
    reasons: List[str]

class EligibilityCriteria(BaseModel):
    income_thresholds: Dict[str, int]
    eligible_case_types: List[str]
