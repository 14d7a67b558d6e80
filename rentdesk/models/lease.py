"""
Lease Model
Binds one tenant to one property for a date range
"""
from enum import Enum
from typing import List

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentdesk.db.base import Base


class LeaseStatus(str, Enum):
    ACTIVE = "Active"
    EXPIRED = "Expired"
    TERMINATED = "Terminated"


class Lease(Base):
    __tablename__ = "leases"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    property_id: Mapped[int] = mapped_column(Integer, ForeignKey("properties.id"), nullable=False)
    tenant_id: Mapped[int] = mapped_column(Integer, ForeignKey("tenants.id"), nullable=False)

    # Calendar dates kept as YYYY-MM-DD strings
    start_date: Mapped[str] = mapped_column(String, nullable=False)
    end_date: Mapped[str] = mapped_column(String, nullable=False)

    monthly_rent: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[str] = mapped_column(
        String, default=LeaseStatus.ACTIVE.value, server_default=LeaseStatus.ACTIVE.value
    )

    # Relationships
    property = relationship("Property", back_populates="leases")
    tenant = relationship("Tenant", back_populates="leases")
    payments: Mapped[List["Payment"]] = relationship("Payment", back_populates="lease")
