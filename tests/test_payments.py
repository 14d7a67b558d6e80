import pytest
from sqlalchemy.exc import IntegrityError

from rentdesk.database import Database
from rentdesk.models import Lease, Payment
from rentdesk.services.payment_service import list_payments
from rentdesk.services.seed_service import seed_if_empty


def test_list_payments_newest_first(client):
    response = client.get("/api/payments")
    assert response.status_code == 200
    payments = response.json()

    assert [p["payment_date"] for p in payments] == ["2024-02-05", "2024-02-01"]

    jane, john = payments
    assert (jane["first_name"], jane["last_name"]) == ("Jane", "Smith")
    assert jane["property_name"] == "Oak Ridge House"
    assert jane["amount"] == 2500
    assert jane["status"] == "Paid"
    assert (john["first_name"], john["property_name"]) == ("John", "Sunset Apartments - Unit 101")
    assert john["amount"] == 1200


def test_record_payment(client):
    response = client.post("/api/payments", json={
        "lease_id": 1,
        "amount": 1200,
        "payment_date": "2024-03-01",
    })
    assert response.status_code == 200
    new_id = response.json()["id"]

    payments = client.get("/api/payments").json()
    assert payments[0]["id"] == new_id
    assert payments[0]["status"] == "Paid"
    assert client.get("/api/stats").json()["totalRevenue"] == 4900


def test_record_payment_unknown_lease(client):
    response = client.post("/api/payments", json={
        "lease_id": 42,
        "amount": 500,
        "payment_date": "2024-03-01",
    })
    assert response.status_code == 404
    assert len(client.get("/api/payments").json()) == 2


def test_record_payment_rejects_bad_date(client):
    for bad_date in ("03/01/2024", "2024-3-1", "20240301", "2024-W09-5", "2024-02-30"):
        response = client.post("/api/payments", json={
            "lease_id": 1,
            "amount": 500,
            "payment_date": bad_date,
        })
        assert response.status_code == 422

    assert [p["payment_date"] for p in client.get("/api/payments").json()] == ["2024-02-05", "2024-02-01"]


def test_payment_with_broken_chain_is_left_out(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'loose.db'}", enforce_foreign_keys=False)
    database.open()
    database.init_schema()
    try:
        for db in database.session():
            seed_if_empty(db)
            db.add(Payment(lease_id=999, amount=300, payment_date="2024-04-01"))
            db.commit()

            assert db.query(Payment).count() == 3
            assert [p.payment_date for p in list_payments(db)] == ["2024-02-05", "2024-02-01"]
    finally:
        database.close()


def test_storage_enforces_lease_reference(db):
    seed_if_empty(db)
    db.add(Payment(lease_id=999, amount=300, payment_date="2024-04-01"))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()
    assert db.query(Payment).count() == 2
    assert db.query(Lease).count() == 2
