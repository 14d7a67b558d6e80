from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from rentdesk.database import get_db
from rentdesk.schemas.common import CreatedResponse
from rentdesk.schemas.property import PropertyCreate, PropertyResponse
from rentdesk.services import property_service

router = APIRouter()


@router.get("", response_model=List[PropertyResponse])
def list_properties(db: Session = Depends(get_db)):
    """Get all properties"""
    return property_service.list_properties(db)


@router.post("", response_model=CreatedResponse)
def create_property(
    property_in: PropertyCreate,
    db: Session = Depends(get_db)
):
    """Create a new property - status starts as Available"""
    property = property_service.create_property(db, property_in)
    return CreatedResponse(id=property.id)
