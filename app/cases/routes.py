from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional
from datetime import datetime
import logging
import uuid

from app.database import get_db
from app.models import UserRole
from app.cases.schemas import (
    CaseCreate, CaseUpdate, CaseResponse, CaseDetailResponse,
    CaseEventCreate, CaseEventResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cases", tags=["Cases"])

# =====================================================
# CASE OPERATIONS
# =====================================================

def generate_case_number() -> str:
    """Generate a unique case number."""
    timestamp = datetime.now().strftime("%Y%m%d")
    unique_id = str(uuid.uuid4())[:8].upper()
    return f"CASE-{timestamp}-{unique_id}"

@router.get("", response_model=List[CaseResponse])
def list_cases(
    client_id: Optional[int] = Query(None, alias="clientId"),
    lawyer_id: Optional[int] = Query(None, alias="lawyerId"),
    db=Depends(get_db)
):
    """List cases for a client or for a lawyer."""
    if client_id is not None:
        return db.get_cases_by_client_id(client_id)
    if lawyer_id is not None:
        return db.get_cases_by_lawyer_id(lawyer_id)
    raise HTTPException(status_code=400, detail="Either clientId or lawyerId must be provided")

@router.get("/{case_number}", response_model=CaseDetailResponse)
def get_case_by_number(case_number: str, db=Depends(get_db)):
    """Get a case and its timeline by case number."""
    case = db.get_case_by_number(case_number)
    if not case:
        raise HTTPException(status_code=404, detail="Case not found")

    response = CaseDetailResponse.from_orm(case)
    response.events = [CaseEventResponse.from_orm(e) for e in db.get_case_events(case.id)]
    return response

@router.post("", response_model=CaseResponse, status_code=status.HTTP_201_CREATED)
def create_case(case_data: CaseCreate, db=Depends(get_db)):
    """Open a new case."""
    # Verify client exists
    if not db.get_user(case_data.client_id):
        raise HTTPException(status_code=404, detail="Client not found")

    # Verify lawyer exists
    if case_data.lawyer_id is not None:
        lawyer = db.get_user(case_data.lawyer_id)
        if not lawyer or lawyer.role != UserRole.LAWYER:
            raise HTTPException(status_code=404, detail="Lawyer not found")

    fields = case_data.dict()
    fields["case_number"] = case_data.case_number or generate_case_number()

    if db.get_case_by_number(fields["case_number"]):
        raise HTTPException(status_code=400, detail="Case number already exists")

    case = db.create_case(fields)
    logger.info(f"Opened case {case.case_number} for client {case.client_id}")
    return case

@router.patch("/{case_id}", response_model=CaseResponse)
def update_case(case_id: int, case_update: CaseUpdate, db=Depends(get_db)):
    """Update a case."""
    update_data = case_update.dict(exclude_unset=True)

    if update_data.get("lawyer_id") is not None:
        lawyer = db.get_user(update_data["lawyer_id"])
        if not lawyer or lawyer.role != UserRole.LAWYER:
            raise HTTPException(status_code=404, detail="Lawyer not found")

    case = db.update_case(case_id, update_data)
    if not case:
        raise HTTPException(status_code=404, detail="Case not found")
    return case

# =====================================================
# CASE EVENTS (TIMELINE)
# =====================================================

@router.get("/{case_id}/events", response_model=List[CaseEventResponse])
def get_case_events(case_id: int, db=Depends(get_db)):
    """Get the timeline of a case."""
    return db.get_case_events(case_id)

@router.post("/{case_id}/events", response_model=CaseEventResponse, status_code=status.HTTP_201_CREATED)
def create_case_event(case_id: int, event_data: CaseEventCreate, db=Depends(get_db)):
    """Add an event to a case timeline."""
    # Verify case exists
    if not db.get_case(case_id):
        raise HTTPException(status_code=404, detail="Case not found")

    return db.create_case_event({**event_data.dict(), "case_id": case_id})
