"""
Lease Schemas
"""
from pydantic import BaseModel, Field, field_validator, model_validator

from rentdesk.schemas.common import validate_iso_date


class LeaseCreate(BaseModel):
    property_id: int
    tenant_id: int
    start_date: str
    end_date: str
    monthly_rent: float = Field(..., ge=0)

    @field_validator("start_date", "end_date")
    @classmethod
    def dates_are_iso(cls, v: str) -> str:
        return validate_iso_date(v)

    @model_validator(mode="after")
    def end_not_before_start(self):
        # ISO dates compare correctly as strings
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class LeaseResponse(BaseModel):
    id: int
    property_id: int
    tenant_id: int
    start_date: str
    end_date: str
    monthly_rent: float
    status: str

    class Config:
        from_attributes = True


class LeaseDetail(LeaseResponse):
    first_name: str
    last_name: str
    property_name: str
