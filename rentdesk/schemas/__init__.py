from rentdesk.schemas.common import CreatedResponse
from rentdesk.schemas.property import PropertyCreate, PropertyResponse
from rentdesk.schemas.tenant import TenantCreate, TenantResponse, TenantWithProperty
from rentdesk.schemas.lease import LeaseCreate, LeaseResponse, LeaseDetail
from rentdesk.schemas.payment import PaymentCreate, PaymentResponse, PaymentDetail
from rentdesk.schemas.maintenance import MaintenanceCreate, MaintenanceResponse, MaintenanceDetail
from rentdesk.schemas.stats import DashboardStats

__all__ = [
    "CreatedResponse",
    "PropertyCreate",
    "PropertyResponse",
    "TenantCreate",
    "TenantResponse",
    "TenantWithProperty",
    "LeaseCreate",
    "LeaseResponse",
    "LeaseDetail",
    "PaymentCreate",
    "PaymentResponse",
    "PaymentDetail",
    "MaintenanceCreate",
    "MaintenanceResponse",
    "MaintenanceDetail",
    "DashboardStats",
]
