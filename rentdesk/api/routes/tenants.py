"""
Tenant Routes
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from rentdesk.database import get_db
from rentdesk.schemas.common import CreatedResponse
from rentdesk.schemas.tenant import TenantCreate, TenantWithProperty
from rentdesk.services import tenant_service

router = APIRouter()


@router.get("", response_model=List[TenantWithProperty])
def list_tenants(db: Session = Depends(get_db)):
    """Get all tenants with the name of their assigned property"""
    return tenant_service.list_tenants(db)


@router.post("", response_model=CreatedResponse)
def create_tenant(
    tenant_in: TenantCreate,
    db: Session = Depends(get_db)
):
    """Register a tenant. Emails are unique across tenants."""
    tenant = tenant_service.create_tenant(db, tenant_in)
    return CreatedResponse(id=tenant.id)
