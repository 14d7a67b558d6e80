# Import all models in dependency order so relationships resolve
from rentdesk.models.property import Property, PropertyStatus
from rentdesk.models.tenant import Tenant
from rentdesk.models.lease import Lease, LeaseStatus
from rentdesk.models.payment import Payment, PaymentStatus
from rentdesk.models.maintenance import MaintenanceRequest, MaintenancePriority, MaintenanceStatus

__all__ = [
    "Property",
    "PropertyStatus",
    "Tenant",
    "Lease",
    "LeaseStatus",
    "Payment",
    "PaymentStatus",
    "MaintenanceRequest",
    "MaintenancePriority",
    "MaintenanceStatus",
]
