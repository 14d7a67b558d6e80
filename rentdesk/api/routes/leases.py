from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from rentdesk.database import get_db
from rentdesk.schemas.common import CreatedResponse
from rentdesk.schemas.lease import LeaseCreate, LeaseDetail
from rentdesk.services import lease_service

router = APIRouter()


@router.get("", response_model=List[LeaseDetail])
def list_leases(db: Session = Depends(get_db)):
    return lease_service.list_leases(db)


@router.post("", response_model=CreatedResponse)
def create_lease(
    lease_in: LeaseCreate,
    db: Session = Depends(get_db)
):
    """Bind a tenant to a property for a date range"""
    lease = lease_service.create_lease(db, lease_in)
    return CreatedResponse(id=lease.id)
