from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from app.database import get_db
from app.auth.schemas import UserResponse
from app.lawyers.schemas import LawyerFilter

router = APIRouter(prefix="/api/lawyers", tags=["Lawyers"])


@router.get("", response_model=List[UserResponse])
def list_lawyers(
    specialization: Optional[str] = None,
    experience: Optional[int] = Query(None, ge=0),
    min_price: Optional[int] = Query(None, ge=0, alias="minPrice"),
    max_price: Optional[int] = Query(None, ge=0, alias="maxPrice"),
    db=Depends(get_db)
):
    """List lawyers, optionally filtered by specialization, experience and hourly rate."""
    filters = LawyerFilter(
        specialization=specialization or None,
        experience=experience,
        min_price=min_price,
        max_price=max_price
    )
    return db.get_filtered_lawyers(filters)
