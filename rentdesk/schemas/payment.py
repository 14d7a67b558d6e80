"""
Payment Schemas
"""
from pydantic import BaseModel, Field, field_validator

from rentdesk.models.payment import PaymentStatus
from rentdesk.schemas.common import validate_iso_date


class PaymentCreate(BaseModel):
    lease_id: int
    amount: float = Field(..., gt=0)
    payment_date: str
    status: PaymentStatus = PaymentStatus.PAID

    @field_validator("payment_date")
    @classmethod
    def payment_date_is_iso(cls, v: str) -> str:
        return validate_iso_date(v)


class PaymentResponse(BaseModel):
    id: int
    lease_id: int
    amount: float
    payment_date: str
    status: str

    class Config:
        from_attributes = True


class PaymentDetail(PaymentResponse):
    """Payment joined through its lease to the tenant and property"""
    first_name: str
    last_name: str
    property_name: str
