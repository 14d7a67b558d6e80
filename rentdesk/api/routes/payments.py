"""
Payment Routes
Rent payments are append-only: list and record
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from rentdesk.database import get_db
from rentdesk.schemas.common import CreatedResponse
from rentdesk.schemas.payment import PaymentCreate, PaymentDetail
from rentdesk.services import payment_service

router = APIRouter()


@router.get("", response_model=List[PaymentDetail])
def list_payments(db: Session = Depends(get_db)):
    """Get all payments with tenant and property names, newest payment date first"""
    return payment_service.list_payments(db)


@router.post("", response_model=CreatedResponse)
def create_payment(
    payment_in: PaymentCreate,
    db: Session = Depends(get_db)
):
    """Record a payment against an existing lease"""
    payment = payment_service.create_payment(db, payment_in)
    return CreatedResponse(id=payment.id)
