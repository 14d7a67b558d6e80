import logging
from typing import List

from sqlalchemy.orm import Session

from rentdesk.models.maintenance import MaintenanceRequest, MaintenanceStatus
from rentdesk.models.property import Property
from rentdesk.schemas.maintenance import MaintenanceCreate, MaintenanceDetail, MaintenanceResponse
from rentdesk.services.property_service import get_property

logger = logging.getLogger(__name__)


def list_maintenance(db: Session) -> List[MaintenanceDetail]:
    """Newest requests first, each with its property name."""
    rows = db.query(MaintenanceRequest, Property.name.label("property_name"))\
        .join(Property, MaintenanceRequest.property_id == Property.id)\
        .order_by(MaintenanceRequest.created_at.desc(), MaintenanceRequest.id.desc())\
        .all()

    return [
        MaintenanceDetail(
            **MaintenanceResponse.model_validate(request).model_dump(),
            property_name=property_name,
        )
        for request, property_name in rows
    ]


def create_maintenance(db: Session, request_in: MaintenanceCreate) -> MaintenanceRequest:
    get_property(db, request_in.property_id)

    request = MaintenanceRequest(
        property_id=request_in.property_id,
        description=request_in.description,
        priority=request_in.priority.value,
        status=MaintenanceStatus.OPEN.value,
    )
    db.add(request)
    db.commit()
    db.refresh(request)
    logger.info(f"[MAINTENANCE] Opened {request.id} ({request.priority}) for property {request.property_id}")
    return request
