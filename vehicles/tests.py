import json

import pytest

from vehicles.models import Vehicle, VehicleStatus

pytestmark = pytest.mark.django_db


def post_json(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type="application/json")


# =========================
# model / queryset
# =========================
@pytest.mark.parametrize("capacity, label", [
    (1, "Small"), (1000, "Small"), (1001, "Medium"), (5000, "Medium"),
    (15000, "Large"), (15001, "Heavy Duty"), (50000, "Heavy Duty"),
])
def test_vehicle_type_bands(make_vehicle, capacity, label):
    assert make_vehicle(capacity_kg=capacity).vehicle_type == label


def test_can_handle_capacity(make_vehicle):
    v = make_vehicle(capacity_kg=3000)
    assert v.can_handle_capacity(3000)
    assert not v.can_handle_capacity(3001)

    v.status = VehicleStatus.MAINTENANCE
    assert not v.can_handle_capacity(10)


def test_active_by_min_capacity_orders_by_size_then_arrival(make_vehicle):
    make_vehicle(name="c", capacity_kg=8000)
    make_vehicle(name="a1", capacity_kg=2000)
    make_vehicle(name="x", capacity_kg=9000, status=VehicleStatus.RETIRED)
    make_vehicle(name="a2", capacity_kg=2000)
    make_vehicle(name="tiny", capacity_kg=100)

    names = list(Vehicle.objects.active_by_min_capacity(1500).values_list("name", flat=True))

    assert names == ["a1", "a2", "c"]


# =========================
# POST /api/vehicles
# =========================
def test_add_vehicle(client):
    resp = post_json(client, "/api/vehicles", {"name": "Test Truck", "capacityKg": 5000, "tyres": 6})

    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["name"] == "Test Truck"
    assert data["capacityKg"] == 5000
    assert data["tyres"] == 6
    assert data["status"] == "active"
    assert Vehicle.objects.filter(pk=data["id"]).exists()


def test_add_vehicle_trims_name(client):
    resp = post_json(client, "/api/vehicles", {"name": "  Van  ", "capacityKg": 800, "tyres": 4})

    assert resp.json()["data"]["name"] == "Van"


def test_add_vehicle_boundaries(client):
    ok = post_json(client, "/api/vehicles", {"name": "Boundary", "capacityKg": 50000, "tyres": 18})
    assert ok.status_code == 201

    too_big = post_json(client, "/api/vehicles", {"name": "Boundary", "capacityKg": 50001, "tyres": 19})
    assert too_big.status_code == 400
    errors = too_big.json()["error"]["details"]["validationErrors"]
    assert set(errors) == {"capacityKg", "tyres"}


@pytest.mark.parametrize("payload", [
    {"capacityKg": 5000, "tyres": 6},
    {"name": "Test", "capacityKg": -100, "tyres": 6},
    {"name": "Test", "capacityKg": 5000, "tyres": 1},
    {"name": "Test", "capacityKg": 5000, "tyres": 20},
    {"name": "", "capacityKg": 5000, "tyres": 6},
    {"name": "T", "capacityKg": 5000, "tyres": 6},
])
def test_add_vehicle_rejects_bad_shape(client, payload):
    resp = post_json(client, "/api/vehicles", payload)

    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert not Vehicle.objects.exists()


# =========================
# GET /api/vehicles/available
# =========================
def test_available_search(client, make_vehicle, make_booking, hours_from_now):
    busy = make_vehicle(name="busy", capacity_kg=1000)
    make_vehicle(name="free", capacity_kg=6000)
    make_booking(busy, hours_from_now(2), hours=4)

    resp = client.get("/api/vehicles/available", {
        "capacityRequired": 500,
        "fromPincode": "110001",
        "toPincode": "110005",
        "startTime": hours_from_now(3).isoformat(),
    })

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Found 1 available vehicles"
    [hit] = body["data"]
    assert hit["name"] == "free"
    assert hit["estimatedRideDurationHours"] == 4
    assert hit["route"] == {"from": "110001", "to": "110005"}


def test_available_search_without_capacity_match(client, make_vehicle, hours_from_now):
    make_vehicle(capacity_kg=1000)

    resp = client.get("/api/vehicles/available", {
        "capacityRequired": 2000,
        "fromPincode": "110001",
        "toPincode": "110005",
        "startTime": hours_from_now(3).isoformat(),
    })

    assert resp.status_code == 200
    assert resp.json()["data"] == []
    assert resp.json()["message"] == "No vehicles found with required capacity"


@pytest.mark.parametrize("override", [
    {"capacityRequired": 0},
    {"capacityRequired": 50001},
    {"fromPincode": "1100"},
    {"toPincode": "11000a"},
    {"startTime": "2000-01-01T00:00:00Z"},
    {"startTime": ""},
])
def test_available_search_rejects_bad_query(client, hours_from_now, override):
    params = {
        "capacityRequired": 500,
        "fromPincode": "110001",
        "toPincode": "110005",
        "startTime": hours_from_now(3).isoformat(),
    }
    params.update(override)

    assert client.get("/api/vehicles/available", params).status_code == 400


# =========================
# GET /api/vehicles, /api/vehicles/<id>
# =========================
def test_list_vehicles_filters(client, make_vehicle):
    make_vehicle(name="s", capacity_kg=500)
    make_vehicle(name="m", capacity_kg=5000)
    make_vehicle(name="l", capacity_kg=12000, status=VehicleStatus.MAINTENANCE)

    data = client.get("/api/vehicles", {"minCapacity": 1000}).json()["data"]
    assert sorted(v["name"] for v in data["vehicles"]) == ["l", "m"]
    assert data["pagination"]["totalVehicles"] == 2

    data = client.get("/api/vehicles", {"maxCapacity": 6000, "status": "active"}).json()["data"]
    assert sorted(v["name"] for v in data["vehicles"]) == ["m", "s"]


def test_list_vehicles_pagination(client, make_vehicle):
    for i in range(5):
        make_vehicle(name=f"v{i}")

    data = client.get("/api/vehicles", {"page": 3, "limit": 2}).json()["data"]

    assert len(data["vehicles"]) == 1
    assert data["pagination"]["totalPages"] == 3
    assert data["pagination"]["hasPrev"] is True
    assert data["pagination"]["hasNext"] is False


def test_vehicle_detail(client, vehicle, make_booking, hours_from_now):
    for i in range(6):
        make_booking(vehicle, hours_from_now(5 * i + 1), hours=2)
    make_booking(vehicle, hours_from_now(100), hours=2, status="cancelled")

    data = client.get(f"/api/vehicles/{vehicle.pk}").json()["data"]

    assert data["vehicle"]["id"] == vehicle.pk
    assert len(data["recentBookings"]) == 5
    assert data["stats"] == {"totalBookings": 7, "activeBookings": 6}


def test_vehicle_detail_unknown(client):
    resp = client.get("/api/vehicles/31337")

    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "Vehicle not found"


# =========================
# PATCH /api/vehicles/<id>/status
# =========================
def test_update_vehicle_status(client, vehicle):
    resp = client.patch(
        f"/api/vehicles/{vehicle.pk}/status",
        data=json.dumps({"status": "maintenance"}),
        content_type="application/json",
    )

    assert resp.status_code == 200
    assert resp.json()["message"] == "Vehicle status updated to maintenance"
    vehicle.refresh_from_db()
    assert vehicle.status == VehicleStatus.MAINTENANCE


def test_update_vehicle_status_invalid(client, vehicle):
    resp = client.patch(
        f"/api/vehicles/{vehicle.pk}/status",
        data=json.dumps({"status": "scrapped"}),
        content_type="application/json",
    )

    assert resp.status_code == 400
    vehicle.refresh_from_db()
    assert vehicle.status == VehicleStatus.ACTIVE


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nothing-here")

    assert resp.status_code == 404
    assert resp.json()["success"] is False


def test_health(client):
    assert client.get("/health").json()["status"] == "OK"
