from fastapi.testclient import TestClient

from rentdesk.main import create_app
from rentdesk.models import Lease, MaintenanceRequest, Payment, Property, Tenant
from rentdesk.services.seed_service import seed_if_empty


def _counts(db):
    return (
        db.query(Property).count(),
        db.query(Tenant).count(),
        db.query(Lease).count(),
        db.query(Payment).count(),
        db.query(MaintenanceRequest).count(),
    )


def test_seed_writes_fixed_set(db):
    assert seed_if_empty(db) is True
    assert _counts(db) == (3, 2, 2, 2, 0)

    occupied = {p.name for p in db.query(Property).filter(Property.status == "Occupied")}
    assert occupied == {"Sunset Apartments - Unit 101", "Oak Ridge House"}


def test_seed_is_idempotent(db):
    assert seed_if_empty(db) is True
    assert seed_if_empty(db) is False
    assert _counts(db) == (3, 2, 2, 2, 0)


def test_seed_skipped_when_any_property_exists(db):
    db.add(Property(name="Existing", address="1 Main St", type="Condo", rent_amount=900))
    db.commit()

    assert seed_if_empty(db) is False
    assert _counts(db) == (1, 0, 0, 0, 0)


def test_seed_payments_belong_to_matching_leases(db):
    seed_if_empty(db)
    pairs = {
        (p.lease.tenant.email, p.lease.property.name, p.amount)
        for p in db.query(Payment)
    }
    assert pairs == {
        ("john@example.com", "Sunset Apartments - Unit 101", 1200),
        ("jane@example.com", "Oak Ridge House", 2500),
    }


def test_startup_seeds_once(settings, client):
    # client fixture already started the app once against this store
    with TestClient(create_app(settings)) as second_client:
        properties = second_client.get("/api/properties").json()
    assert len(properties) == 3
