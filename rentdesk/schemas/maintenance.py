from datetime import datetime

from pydantic import BaseModel, Field

from rentdesk.models.maintenance import MaintenancePriority


class MaintenanceCreate(BaseModel):
    property_id: int
    description: str = Field(..., min_length=1, max_length=2000)
    priority: MaintenancePriority


class MaintenanceResponse(BaseModel):
    id: int
    property_id: int
    description: str
    priority: str
    status: str
    created_at: datetime

    class Config:
        from_attributes = True


class MaintenanceDetail(MaintenanceResponse):
    property_name: str
