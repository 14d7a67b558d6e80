import logging
from typing import List

from sqlalchemy.orm import Session

from rentdesk.core.exceptions import NotFoundError
from rentdesk.models.property import Property, PropertyStatus
from rentdesk.schemas.property import PropertyCreate

logger = logging.getLogger(__name__)


def list_properties(db: Session) -> List[Property]:
    return db.query(Property).all()


def get_property(db: Session, property_id: int) -> Property:
    property = db.get(Property, property_id)
    if property is None:
        raise NotFoundError("Property", property_id)
    return property


def create_property(db: Session, property_in: PropertyCreate) -> Property:
    property = Property(**property_in.model_dump(), status=PropertyStatus.AVAILABLE.value)
    db.add(property)
    db.commit()
    db.refresh(property)
    logger.info(f"[PROPERTY] Created {property.id}: {property.name}")
    return property
