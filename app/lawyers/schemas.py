from pydantic import BaseModel, Field
from typing import Optional


class LawyerFilter(BaseModel):
    """Conjunctive lawyer search; a missing clause accepts every lawyer."""
    specialization: Optional[str] = None
    experience: Optional[int] = Field(None, ge=0, description="Minimum years of experience")
    min_price: Optional[int] = Field(None, ge=0, description="Minimum hourly rate")
    max_price: Optional[int] = Field(None, ge=0, description="Maximum hourly rate")
