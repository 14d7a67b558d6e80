"""
Tenant Pydantic Schemas - API Request/Response Models
"""
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class TenantBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    property_id: Optional[int] = None


class TenantCreate(TenantBase):
    @field_validator("email")
    @classmethod
    def email_has_at(cls, v: str) -> str:
        v = v.strip()
        local, _, domain = v.partition("@")
        if not local or not domain:
            raise ValueError("must be an email address")
        return v


class TenantResponse(TenantBase):
    id: int

    class Config:
        from_attributes = True


class TenantWithProperty(TenantResponse):
    """Tenant row plus the name of its property (None when unassigned)"""
    property_name: Optional[str] = None
