"""
Payment Model
One rent payment event attributed to a lease
"""
from enum import Enum

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentdesk.db.base import Base


class PaymentStatus(str, Enum):
    """Payment status enum"""
    PAID = "Paid"
    PENDING = "Pending"
    LATE = "Late"


class Payment(Base):
    """Rent payment record"""
    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    lease_id: Mapped[int] = mapped_column(Integer, ForeignKey("leases.id"), nullable=False)

    amount: Mapped[float] = mapped_column(Float, nullable=False)
    payment_date: Mapped[str] = mapped_column(String, nullable=False)  # YYYY-MM-DD
    status: Mapped[str] = mapped_column(
        String, default=PaymentStatus.PAID.value, server_default=PaymentStatus.PAID.value
    )

    # Relationships
    lease = relationship("Lease", back_populates="payments")
