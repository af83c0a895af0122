from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from app.models import PaymentStatus

class PaymentCreate(BaseModel):
    client_id: int
    lawyer_id: int
    consultation_id: Optional[int] = None
    amount: int = Field(..., gt=0)
    status: PaymentStatus = PaymentStatus.PENDING
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None

class PaymentUpdate(BaseModel):
    status: Optional[PaymentStatus] = None
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None

class PaymentResponse(BaseModel):
    id: int
    client_id: int
    lawyer_id: int
    consultation_id: Optional[int] = None
    amount: int
    status: PaymentStatus
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True

class PaymentIntentRequest(BaseModel):
    amount: float = Field(..., gt=0, description="Amount in major units, e.g. rupees")

class PaymentIntentResponse(BaseModel):
    client_secret: str
