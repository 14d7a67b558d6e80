from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from rentdesk.database import get_db
from rentdesk.schemas.common import CreatedResponse
from rentdesk.schemas.maintenance import MaintenanceCreate, MaintenanceDetail
from rentdesk.services import maintenance_service

router = APIRouter()


@router.get("", response_model=List[MaintenanceDetail])
def list_maintenance(db: Session = Depends(get_db)):
    """Get all maintenance requests, newest first"""
    return maintenance_service.list_maintenance(db)


@router.post("", response_model=CreatedResponse)
def create_maintenance(
    request_in: MaintenanceCreate,
    db: Session = Depends(get_db)
):
    """Open a maintenance request against a property"""
    request = maintenance_service.create_maintenance(db, request_in)
    return CreatedResponse(id=request.id)
