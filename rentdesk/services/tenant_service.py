"""
Tenant queries - tenants projected with the name of their (optional) property.
"""
import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from rentdesk.models.property import Property
from rentdesk.models.tenant import Tenant
from rentdesk.schemas.tenant import TenantCreate, TenantResponse, TenantWithProperty
from rentdesk.services.property_service import get_property

logger = logging.getLogger(__name__)


def list_tenants(db: Session) -> List[TenantWithProperty]:
    """Every tenant LEFT joined to its property; unassigned tenants get property_name None."""
    rows = db.query(Tenant, Property.name.label("property_name"))\
        .outerjoin(Property, Tenant.property_id == Property.id)\
        .order_by(Tenant.id)\
        .all()

    return [
        TenantWithProperty(
            **TenantResponse.model_validate(tenant).model_dump(),
            property_name=property_name,
        )
        for tenant, property_name in rows
    ]


def create_tenant(db: Session, tenant_in: TenantCreate) -> Tenant:
    """
    Insert a tenant. A duplicate email violates the unique constraint: the
    session is rolled back and the IntegrityError propagates.
    """
    if tenant_in.property_id is not None:
        get_property(db, tenant_in.property_id)

    tenant = Tenant(**tenant_in.model_dump())
    db.add(tenant)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"[TENANT] Rejected insert for {tenant_in.email}: constraint violation")
        raise
    db.refresh(tenant)
    logger.info(f"[TENANT] Created {tenant.id}: {tenant.email}")
    return tenant
