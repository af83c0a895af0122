from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from app.models import ConsultationStatus

class ConsultationCreate(BaseModel):
    client_id: int
    lawyer_id: int
    schedule_date: datetime
    duration: int = Field(..., gt=0, description="Length in minutes")
    fee: int = Field(..., ge=0)
    status: ConsultationStatus = ConsultationStatus.PENDING
    notes: Optional[str] = None
    meeting_link: Optional[str] = None

class ConsultationUpdate(BaseModel):
    schedule_date: Optional[datetime] = None
    duration: Optional[int] = Field(None, gt=0)
    fee: Optional[int] = Field(None, ge=0)
    status: Optional[ConsultationStatus] = None
    notes: Optional[str] = None
    meeting_link: Optional[str] = None

class ConsultationResponse(BaseModel):
    id: int
    client_id: int
    lawyer_id: int
    schedule_date: datetime
    duration: int
    fee: int
    status: ConsultationStatus
    notes: Optional[str] = None
    meeting_link: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
