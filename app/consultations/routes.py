from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional
import logging

from app.database import get_db
from app.models import UserRole
from app.consultations.schemas import ConsultationCreate, ConsultationUpdate, ConsultationResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/consultations", tags=["Consultations"])


@router.get("", response_model=List[ConsultationResponse])
def list_consultations(
    client_id: Optional[int] = Query(None, alias="clientId"),
    lawyer_id: Optional[int] = Query(None, alias="lawyerId"),
    db=Depends(get_db)
):
    if client_id is not None:
        return db.get_consultations_by_client_id(client_id)
    if lawyer_id is not None:
        return db.get_consultations_by_lawyer_id(lawyer_id)
    raise HTTPException(status_code=400, detail="Either clientId or lawyerId must be provided")


@router.get("/{consultation_id}", response_model=ConsultationResponse)
def get_consultation(consultation_id: int, db=Depends(get_db)):
    consultation = db.get_consultation(consultation_id)
    if not consultation:
        raise HTTPException(status_code=404, detail="Consultation not found")
    return consultation


@router.post("", response_model=ConsultationResponse, status_code=status.HTTP_201_CREATED)
def book_consultation(consultation_data: ConsultationCreate, db=Depends(get_db)):
    """Book a consultation with a lawyer."""
    if not db.get_user(consultation_data.client_id):
        raise HTTPException(status_code=404, detail="Client not found")

    lawyer = db.get_user(consultation_data.lawyer_id)
    if not lawyer or lawyer.role != UserRole.LAWYER:
        raise HTTPException(status_code=404, detail="Lawyer not found")

    consultation = db.create_consultation(consultation_data.dict())
    logger.info(
        f"Consultation {consultation.id} booked: client {consultation.client_id} "
        f"with lawyer {consultation.lawyer_id}"
    )
    return consultation


@router.patch("/{consultation_id}", response_model=ConsultationResponse)
def update_consultation(consultation_id: int, consultation_update: ConsultationUpdate, db=Depends(get_db)):
    consultation = db.update_consultation(consultation_id, consultation_update.dict(exclude_unset=True))
    if not consultation:
        raise HTTPException(status_code=404, detail="Consultation not found")
    return consultation
