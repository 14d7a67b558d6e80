import pytest
from sqlalchemy.exc import IntegrityError

from rentdesk.models import Tenant
from rentdesk.schemas.tenant import TenantCreate
from rentdesk.services.seed_service import seed_if_empty
from rentdesk.services.tenant_service import create_tenant, list_tenants


def test_list_tenants_joins_property_name(client):
    response = client.get("/api/tenants")
    assert response.status_code == 200
    by_name = {(t["first_name"], t["last_name"]): t for t in response.json()}

    assert by_name[("John", "Doe")]["property_name"] == "Sunset Apartments - Unit 101"
    assert by_name[("Jane", "Smith")]["property_name"] == "Oak Ridge House"
    assert by_name[("Jane", "Smith")]["email"] == "jane@example.com"


def test_unassigned_tenant_has_no_property_name(client):
    response = client.post("/api/tenants", json={
        "first_name": "Sam",
        "last_name": "Rivera",
        "email": "sam@example.com",
    })
    assert response.status_code == 200
    new_id = response.json()["id"]

    tenant = next(t for t in client.get("/api/tenants").json() if t["id"] == new_id)
    assert tenant["property_id"] is None
    assert tenant["property_name"] is None
    assert tenant["phone"] is None


def test_create_tenant_unknown_property(client):
    response = client.post("/api/tenants", json={
        "first_name": "Lee",
        "last_name": "Park",
        "email": "lee@example.com",
        "property_id": 999,
    })
    assert response.status_code == 404
    assert response.json()["success"] is False
    assert len(client.get("/api/tenants").json()) == 2


def test_create_tenant_rejects_bad_email(client):
    response = client.post("/api/tenants", json={
        "first_name": "No",
        "last_name": "Email",
        "email": "not-an-email",
    })
    assert response.status_code == 422


def test_duplicate_email_is_a_constraint_violation(db):
    seed_if_empty(db)

    with pytest.raises(IntegrityError):
        create_tenant(db, TenantCreate(
            first_name="Johnny", last_name="Doe", email="john@example.com",
        ))

    assert db.query(Tenant).count() == 2
    assert db.query(Tenant).filter(Tenant.email == "john@example.com").count() == 1
    # session stays usable after the rollback
    assert len(list_tenants(db)) == 2


def test_duplicate_email_over_http_is_server_error(client):
    response = client.post("/api/tenants", json={
        "first_name": "Janet",
        "last_name": "Smith",
        "email": "jane@example.com",
    })
    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["detail"] == "Internal server error"
    assert len(client.get("/api/tenants").json()) == 2
