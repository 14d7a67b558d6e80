"""
Dashboard statistics - aggregate queries over properties, payments and maintenance.
"""
import math
import logging
from typing import Union

from sqlalchemy import func
from sqlalchemy.orm import Session

from rentdesk.models.property import Property, PropertyStatus
from rentdesk.models.payment import Payment
from rentdesk.models.maintenance import MaintenanceRequest, MaintenanceStatus
from rentdesk.schemas.stats import DashboardStats

logger = logging.getLogger(__name__)


def occupancy_rate(occupied: int, total: int) -> int:
    """
    Percentage of occupied properties, rounded half up to a whole number.
    Zero properties gives 0 rather than a division error.
    """
    if not total:
        return 0
    return int(math.floor(occupied * 100 / total + 0.5))


def _as_number(value) -> Union[int, float]:
    """Whole amounts go out as ints (3700, not 3700.0)."""
    value = float(value or 0)
    return int(value) if value.is_integer() else value


def get_dashboard_stats(db: Session) -> DashboardStats:
    total_properties = db.query(func.count(Property.id)).scalar() or 0

    occupied_properties = db.query(func.count(Property.id))\
        .filter(Property.status == PropertyStatus.OCCUPIED.value)\
        .scalar() or 0

    total_revenue = db.query(func.coalesce(func.sum(Payment.amount), 0)).scalar() or 0

    open_maintenance = db.query(func.count(MaintenanceRequest.id))\
        .filter(MaintenanceRequest.status == MaintenanceStatus.OPEN.value)\
        .scalar() or 0

    stats = DashboardStats(
        total_properties=total_properties,
        occupancy_rate=occupancy_rate(occupied_properties, total_properties),
        total_revenue=_as_number(total_revenue),
        open_maintenance=open_maintenance,
    )
    logger.debug(f"[STATS] {stats}")
    return stats
