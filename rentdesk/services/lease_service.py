"""
Lease queries - leases joined to their tenant and property.
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from rentdesk.core.exceptions import NotFoundError
from rentdesk.models.lease import Lease, LeaseStatus
from rentdesk.models.property import Property
from rentdesk.models.tenant import Tenant
from rentdesk.schemas.lease import LeaseCreate, LeaseDetail, LeaseResponse
from rentdesk.services.property_service import get_property

logger = logging.getLogger(__name__)


def list_leases(db: Session) -> List[LeaseDetail]:
    """INNER joins: a lease whose tenant or property is missing is left out."""
    rows = db.query(
            Lease,
            Tenant.first_name,
            Tenant.last_name,
            Property.name.label("property_name"),
        )\
        .join(Tenant, Lease.tenant_id == Tenant.id)\
        .join(Property, Lease.property_id == Property.id)\
        .order_by(Lease.start_date.desc(), Lease.id.desc())\
        .all()

    return [
        LeaseDetail(
            **LeaseResponse.model_validate(lease).model_dump(),
            first_name=first_name,
            last_name=last_name,
            property_name=property_name,
        )
        for lease, first_name, last_name, property_name in rows
    ]


def get_lease(db: Session, lease_id: int) -> Lease:
    lease = db.get(Lease, lease_id)
    if lease is None:
        raise NotFoundError("Lease", lease_id)
    return lease


def create_lease(db: Session, lease_in: LeaseCreate) -> Lease:
    get_property(db, lease_in.property_id)
    if db.get(Tenant, lease_in.tenant_id) is None:
        raise NotFoundError("Tenant", lease_in.tenant_id)

    lease = Lease(**lease_in.model_dump(), status=LeaseStatus.ACTIVE.value)
    db.add(lease)
    db.commit()
    db.refresh(lease)
    logger.info(f"[LEASE] Created {lease.id} for tenant {lease.tenant_id} at property {lease.property_id}")
    return lease
