from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from app.models import CaseStatus, CaseEventStatus

# Base schemas
class CaseBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    case_type: str = Field(..., min_length=1, max_length=100)
    filed_date: datetime
    court: Optional[str] = None
    judge: Optional[str] = None

class CaseCreate(CaseBase):
    # Generated when omitted
    case_number: Optional[str] = Field(None, min_length=1, max_length=100)
    status: CaseStatus = CaseStatus.ACTIVE
    client_id: int
    lawyer_id: Optional[int] = None

class CaseUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    status: Optional[CaseStatus] = None
    case_type: Optional[str] = Field(None, min_length=1, max_length=100)
    filed_date: Optional[datetime] = None
    lawyer_id: Optional[int] = None
    court: Optional[str] = None
    judge: Optional[str] = None

class CaseResponse(CaseBase):
    id: int
    case_number: str
    status: CaseStatus
    client_id: int
    lawyer_id: Optional[int] = None
    created_at: datetime

    class Config:
        from_attributes = True

# Case event (timeline) schemas
class CaseEventCreate(BaseModel):
    event_date: datetime
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    status: CaseEventStatus

class CaseEventResponse(BaseModel):
    id: int
    case_id: int
    event_date: datetime
    title: str
    description: Optional[str] = None
    status: CaseEventStatus
    created_at: datetime

    class Config:
        from_attributes = True

class CaseDetailResponse(CaseResponse):
    events: List[CaseEventResponse] = []
