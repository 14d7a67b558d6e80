import pytest

from rentdesk.services.stats_service import occupancy_rate


@pytest.mark.parametrize("occupied", [0, 1, 7])
def test_occupancy_rate_zero_properties(occupied):
    assert occupancy_rate(occupied, 0) == 0


@pytest.mark.parametrize(
    "occupied,total,expected",
    [
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),
        (0, 4, 0),
        (3, 3, 100),
    ],
)
def test_occupancy_rate_rounds_half_up(occupied, total, expected):
    assert occupancy_rate(occupied, total) == expected


def test_stats_on_empty_store(empty_client):
    response = empty_client.get("/api/stats")
    assert response.status_code == 200
    data = response.json()
    assert data == {
        "totalProperties": 0,
        "occupancyRate": 0,
        "totalRevenue": 0,
        "openMaintenance": 0,
    }
    assert data["totalRevenue"] is not None


def test_stats_on_seed_data(client):
    response = client.get("/api/stats")
    assert response.status_code == 200
    assert response.json() == {
        "totalProperties": 3,
        "occupancyRate": 67,
        "totalRevenue": 3700,
        "openMaintenance": 0,
    }


def test_stats_follow_writes(client):
    client.post("/api/properties", json={
        "name": "Lakeview Loft",
        "address": "9 Shore Rd, Madison, WI",
        "type": "Loft",
        "rent_amount": 1800,
    })
    client.post("/api/maintenance", json={
        "property_id": 1,
        "description": "Dripping kitchen faucet",
        "priority": "Low",
    })

    data = client.get("/api/stats").json()
    assert data["totalProperties"] == 4
    assert data["occupancyRate"] == 50
    assert data["openMaintenance"] == 1
    assert data["totalRevenue"] == 3700


def test_whole_revenue_is_an_integer_on_the_wire(client):
    data = client.get("/api/stats").json()
    assert data["totalRevenue"] == 3700
    assert isinstance(data["totalRevenue"], int)


def test_empty_revenue_is_integer_zero(empty_client):
    data = empty_client.get("/api/stats").json()
    assert data["totalRevenue"] == 0
    assert isinstance(data["totalRevenue"], int)


def test_fractional_revenue_keeps_cents(client):
    client.post("/api/payments", json={
        "lease_id": 1,
        "amount": 0.5,
        "payment_date": "2024-03-01",
    })
    data = client.get("/api/stats").json()
    assert data["totalRevenue"] == 3700.5
