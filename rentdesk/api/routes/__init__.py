from rentdesk.api.routes.stats import router as stats_router
from rentdesk.api.routes.properties import router as properties_router
from rentdesk.api.routes.tenants import router as tenants_router
from rentdesk.api.routes.leases import router as leases_router
from rentdesk.api.routes.payments import router as payments_router
from rentdesk.api.routes.maintenance import router as maintenance_router

__all__ = [
    "stats_router",
    "properties_router",
    "tenants_router",
    "leases_router",
    "payments_router",
    "maintenance_router",
]
