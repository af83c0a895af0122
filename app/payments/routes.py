from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional

from app.database import get_db
from app.models import UserRole
from app.payments.schemas import (
    PaymentCreate, PaymentUpdate, PaymentResponse,
    PaymentIntentRequest, PaymentIntentResponse
)
from app.services.payment_service import (
    PaymentNotConfiguredError, PaymentProcessorError, get_payment_service
)

router = APIRouter(prefix="/api", tags=["Payments"])


@router.post("/payments", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
def record_payment(payment_data: PaymentCreate, db=Depends(get_db)):
    """Record the outcome of a fee payment."""
    if not db.get_user(payment_data.client_id):
        raise HTTPException(status_code=404, detail="Client not found")

    lawyer = db.get_user(payment_data.lawyer_id)
    if not lawyer or lawyer.role != UserRole.LAWYER:
        raise HTTPException(status_code=404, detail="Lawyer not found")

    if payment_data.consultation_id is not None and not db.get_consultation(payment_data.consultation_id):
        raise HTTPException(status_code=404, detail="Consultation not found")

    return db.create_payment(payment_data.dict())


@router.get("/payments", response_model=List[PaymentResponse])
def list_payments(
    client_id: Optional[int] = Query(None, alias="clientId"),
    lawyer_id: Optional[int] = Query(None, alias="lawyerId"),
    db=Depends(get_db)
):
    if client_id is not None:
        return db.get_payments_by_client_id(client_id)
    if lawyer_id is not None:
        return db.get_payments_by_lawyer_id(lawyer_id)
    raise HTTPException(status_code=400, detail="Either clientId or lawyerId must be provided")


@router.get("/payments/{payment_id}", response_model=PaymentResponse)
def get_payment(payment_id: int, db=Depends(get_db)):
    payment = db.get_payment(payment_id)
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment


@router.patch("/payments/{payment_id}", response_model=PaymentResponse)
def update_payment(payment_id: int, payment_update: PaymentUpdate, db=Depends(get_db)):
    payment = db.update_payment(payment_id, payment_update.dict(exclude_unset=True))
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
def create_payment_intent(request: PaymentIntentRequest, payments=Depends(get_payment_service)):
    """Start a Stripe card payment; the client confirms it with the returned secret."""
    try:
        client_secret = payments.create_payment_intent(request.amount)
    except PaymentNotConfiguredError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except PaymentProcessorError as e:
        raise HTTPException(status_code=502, detail=f"Error creating payment intent: {str(e)}")
    return {"client_secret": client_secret}
