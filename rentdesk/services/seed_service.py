"""
Seed Service - fixed demo data written once into an empty store.
"""
import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from rentdesk.models.property import Property, PropertyStatus
from rentdesk.models.tenant import Tenant
from rentdesk.models.lease import Lease
from rentdesk.models.payment import Payment

logger = logging.getLogger(__name__)


def _seed_rows():
    sunset_101 = Property(
        name="Sunset Apartments - Unit 101",
        address="123 Solar Way, Phoenix, AZ",
        type="Apartment",
        rent_amount=1200,
        status=PropertyStatus.OCCUPIED.value,
    )
    sunset_102 = Property(
        name="Sunset Apartments - Unit 102",
        address="123 Solar Way, Phoenix, AZ",
        type="Apartment",
        rent_amount=1250,
        status=PropertyStatus.AVAILABLE.value,
    )
    oak_ridge = Property(
        name="Oak Ridge House",
        address="456 Forest Dr, Portland, OR",
        type="Single Family",
        rent_amount=2500,
        status=PropertyStatus.OCCUPIED.value,
    )

    john = Tenant(
        first_name="John", last_name="Doe",
        email="john@example.com", phone="555-0101",
        property=sunset_101,
    )
    jane = Tenant(
        first_name="Jane", last_name="Smith",
        email="jane@example.com", phone="555-0202",
        property=oak_ridge,
    )

    john_lease = Lease(
        property=sunset_101, tenant=john,
        start_date="2024-01-01", end_date="2024-12-31", monthly_rent=1200,
    )
    jane_lease = Lease(
        property=oak_ridge, tenant=jane,
        start_date="2024-02-01", end_date="2025-01-31", monthly_rent=2500,
    )

    payments = [
        Payment(lease=john_lease, amount=1200, payment_date="2024-02-01"),
        Payment(lease=jane_lease, amount=2500, payment_date="2024-02-05"),
    ]

    return [sunset_101, sunset_102, oak_ridge, john, jane, john_lease, jane_lease, *payments]


def seed_if_empty(db: Session) -> bool:
    """
    Insert the demo set when there are no properties yet.

    Runs as one commit; returns True if rows were written, False when the
    store already holds at least one property. Errors roll back and propagate.
    """
    property_count = db.query(func.count(Property.id)).scalar() or 0
    if property_count > 0:
        logger.info(f"[SEED] Skipped - store already has {property_count} properties")
        return False

    try:
        db.add_all(_seed_rows())
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("[SEED] Seeding failed")
        raise

    logger.info("[SEED] Inserted 3 properties, 2 tenants, 2 leases, 2 payments")
    return True
