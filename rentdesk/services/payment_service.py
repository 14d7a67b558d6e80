"""
Payment queries
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from rentdesk.models.lease import Lease
from rentdesk.models.payment import Payment
from rentdesk.models.property import Property
from rentdesk.models.tenant import Tenant
from rentdesk.schemas.payment import PaymentCreate, PaymentDetail, PaymentResponse
from rentdesk.services.lease_service import get_lease

logger = logging.getLogger(__name__)


def list_payments(db: Session) -> List[PaymentDetail]:
    """
    Payments joined through lease -> tenant and lease -> property, newest
    payment_date first. Rows with a broken parent chain drop out of the
    INNER joins silently.
    """
    rows = db.query(
            Payment,
            Tenant.first_name,
            Tenant.last_name,
            Property.name.label("property_name"),
        )\
        .join(Lease, Payment.lease_id == Lease.id)\
        .join(Tenant, Lease.tenant_id == Tenant.id)\
        .join(Property, Lease.property_id == Property.id)\
        .order_by(Payment.payment_date.desc(), Payment.id.desc())\
        .all()

    return [
        PaymentDetail(
            **PaymentResponse.model_validate(payment).model_dump(),
            first_name=first_name,
            last_name=last_name,
            property_name=property_name,
        )
        for payment, first_name, last_name, property_name in rows
    ]


def create_payment(db: Session, payment_in: PaymentCreate) -> Payment:
    get_lease(db, payment_in.lease_id)

    payment = Payment(
        lease_id=payment_in.lease_id,
        amount=payment_in.amount,
        payment_date=payment_in.payment_date,
        status=payment_in.status.value,
    )
    db.add(payment)
    db.commit()
    db.refresh(payment)
    logger.info(f"[PAYMENT] Recorded {payment.id}: {payment.amount} on lease {payment.lease_id}")
    return payment
