from enum import Enum
from typing import List

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentdesk.db.base import Base


class PropertyStatus(str, Enum):
    AVAILABLE = "Available"
    OCCUPIED = "Occupied"


class Property(Base):
    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String, nullable=False)
    address: Mapped[str] = mapped_column(String, nullable=False)
    type: Mapped[str] = mapped_column(String, nullable=False)  # Apartment, Single Family, ...
    rent_amount: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[str] = mapped_column(
        String, default=PropertyStatus.AVAILABLE.value, server_default=PropertyStatus.AVAILABLE.value
    )

    # Relationships
    tenants: Mapped[List["Tenant"]] = relationship("Tenant", back_populates="property")
    leases: Mapped[List["Lease"]] = relationship("Lease", back_populates="property")
    maintenance_requests: Mapped[List["MaintenanceRequest"]] = relationship(
        "MaintenanceRequest", back_populates="property"
    )

    def __repr__(self):
        return f"<Property {self.id} {self.name!r} {self.status}>"
