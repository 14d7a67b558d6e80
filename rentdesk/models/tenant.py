"""
Tenant Model - a person, optionally assigned to a property
"""
from typing import List, Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentdesk.db.base import Base


class Tenant(Base):
    __tablename__ = "tenants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    first_name: Mapped[str] = mapped_column(String, nullable=False)
    last_name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    # Unassigned tenants have no property
    property_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("properties.id"), nullable=True
    )

    # Relationships
    property = relationship("Property", back_populates="tenants")
    leases: Mapped[List["Lease"]] = relationship("Lease", back_populates="tenant")

    def __repr__(self):
        return f"<Tenant {self.id} {self.email}>"
