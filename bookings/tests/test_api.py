import json

import pytest

from bookings.models import Booking, BookingStatus

pytestmark = pytest.mark.django_db


def post_json(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type="application/json")


def patch_json(client, url, payload):
    return client.patch(url, data=json.dumps(payload), content_type="application/json")


@pytest.fixture
def booking_payload(vehicle, hours_from_now):
    return {
        "vehicleId": vehicle.pk,
        "customerId": "customer-42",
        "fromPincode": "110001",
        "toPincode": "110005",
        "startTime": hours_from_now(2).isoformat(),
    }


class TestCreateBooking:
    def test_created(self, client, booking_payload, vehicle):
        resp = post_json(client, "/api/bookings", booking_payload)

        assert resp.status_code == 201
        body = resp.json()
        assert body["success"] is True
        assert body["statusCode"] == 201
        data = body["data"]
        assert data["status"] == "confirmed"
        assert data["estimatedRideDurationHours"] == 4
        assert data["totalCost"] == 10000.0
        assert data["vehicle"]["id"] == vehicle.pk
        assert Booking.objects.filter(pk=data["id"]).exists()

    def test_conflict_is_409(self, client, booking_payload, hours_from_now):
        assert post_json(client, "/api/bookings", booking_payload).status_code == 201

        booking_payload["startTime"] = hours_from_now(4).isoformat()
        resp = post_json(client, "/api/bookings", booking_payload)

        assert resp.status_code == 409
        error = resp.json()["error"]
        assert error["details"]["conflictingBookings"] == 1
        assert Booking.objects.count() == 1

    def test_unknown_vehicle_is_404(self, client, booking_payload):
        booking_payload["vehicleId"] = 999999
        resp = post_json(client, "/api/bookings", booking_payload)

        assert resp.status_code == 404
        assert resp.json()["error"]["message"] == "Vehicle not found"

    def test_inactive_vehicle_is_400(self, client, booking_payload, vehicle):
        vehicle.status = "maintenance"
        vehicle.save()

        resp = post_json(client, "/api/bookings", booking_payload)

        assert resp.status_code == 400
        assert resp.json()["error"]["message"] == "Vehicle is not available for booking"

    @pytest.mark.parametrize("field, value", [
        ("fromPincode", "12345"),
        ("toPincode", "abcdef"),
        ("customerId", ""),
        ("customerId", "x" * 51),
        ("vehicleId", "not-an-id"),
        ("startTime", "2001-01-01T00:00:00Z"),
        ("startTime", "tomorrow"),
    ])
    def test_shape_errors_are_400(self, client, booking_payload, field, value):
        booking_payload[field] = value
        resp = post_json(client, "/api/bookings", booking_payload)

        assert resp.status_code == 400
        body = resp.json()
        assert body["success"] is False
        assert field in body["error"]["details"]["validationErrors"]
        assert not Booking.objects.exists()

    def test_malformed_json_is_400(self, client):
        resp = client.post("/api/bookings", data="{nope", content_type="application/json")

        assert resp.status_code == 400
        assert resp.json()["success"] is False


class TestBookingLifecycleEndpoints:
    def test_detail(self, client, booking_payload):
        created = post_json(client, "/api/bookings", booking_payload).json()["data"]

        resp = client.get(f"/api/bookings/{created['id']}")

        assert resp.status_code == 200
        assert resp.json()["data"]["customerId"] == "customer-42"

    def test_detail_unknown(self, client):
        assert client.get("/api/bookings/123456").status_code == 404

    def test_cancel(self, client, booking_payload):
        created = post_json(client, "/api/bookings", booking_payload).json()["data"]

        resp = client.delete(f"/api/bookings/{created['id']}")

        assert resp.status_code == 200
        assert resp.json()["data"]["status"] == "cancelled"

    def test_cancel_too_late(self, client, booking_payload, hours_from_now):
        booking_payload["startTime"] = hours_from_now(0.5).isoformat()
        created = post_json(client, "/api/bookings", booking_payload).json()["data"]

        resp = client.delete(f"/api/bookings/{created['id']}")

        assert resp.status_code == 400
        assert "within 1 hour" in resp.json()["error"]["message"]

    def test_cancel_twice(self, client, booking_payload):
        created = post_json(client, "/api/bookings", booking_payload).json()["data"]
        client.delete(f"/api/bookings/{created['id']}")

        resp = client.delete(f"/api/bookings/{created['id']}")

        assert resp.status_code == 400
        assert resp.json()["error"]["message"] == "Only confirmed bookings can be cancelled"

    def test_status_update(self, client, booking_payload):
        created = post_json(client, "/api/bookings", booking_payload).json()["data"]

        resp = patch_json(client, f"/api/bookings/{created['id']}/status", {"status": "in-progress"})

        assert resp.status_code == 200
        assert resp.json()["message"] == "Booking status updated to in-progress"
        assert Booking.objects.get(pk=created["id"]).status == BookingStatus.IN_PROGRESS

    def test_status_update_rejects_unknown_value(self, client, booking_payload):
        created = post_json(client, "/api/bookings", booking_payload).json()["data"]

        resp = patch_json(client, f"/api/bookings/{created['id']}/status", {"status": "parked"})

        assert resp.status_code == 400

    def test_status_update_unknown_booking(self, client):
        resp = patch_json(client, "/api/bookings/777777/status", {"status": "completed"})

        assert resp.status_code == 404


class TestBookingQueries:
    def test_list_filters_and_paginates(self, client, make_vehicle, make_booking, hours_from_now):
        a = make_vehicle(name="A")
        b = make_vehicle(name="B")
        for i in range(3):
            make_booking(a, hours_from_now(10 * i + 1), customer_id="alice")
        make_booking(b, hours_from_now(1), customer_id="bob", status=BookingStatus.CANCELLED)

        resp = client.get("/api/bookings", {"customerId": "alice", "limit": 2})
        data = resp.json()["data"]
        assert resp.status_code == 200
        assert len(data["bookings"]) == 2
        assert data["pagination"] == {
            "currentPage": 1,
            "totalPages": 2,
            "totalBookings": 3,
            "hasNext": True,
            "hasPrev": False,
        }

        page2 = client.get("/api/bookings", {"customerId": "alice", "limit": 2, "page": 2}).json()["data"]
        assert len(page2["bookings"]) == 1
        assert page2["pagination"]["hasNext"] is False

        cancelled = client.get("/api/bookings", {"status": "cancelled"}).json()["data"]
        assert [x["customerId"] for x in cancelled["bookings"]] == ["bob"]

        by_vehicle = client.get("/api/bookings", {"vehicleId": b.pk}).json()["data"]
        assert by_vehicle["pagination"]["totalBookings"] == 1

    def test_list_date_range(self, client, vehicle, make_booking, hours_from_now):
        make_booking(vehicle, hours_from_now(1))
        make_booking(vehicle, hours_from_now(30))

        resp = client.get("/api/bookings", {"fromDate": hours_from_now(24).isoformat()})

        assert resp.json()["data"]["pagination"]["totalBookings"] == 1

    def test_customer_history(self, client, vehicle, make_booking, hours_from_now):
        make_booking(vehicle, hours_from_now(1), customer_id="carol")
        make_booking(vehicle, hours_from_now(10), customer_id="carol", status=BookingStatus.COMPLETED)
        make_booking(vehicle, hours_from_now(20), customer_id="carol", status=BookingStatus.CANCELLED)
        make_booking(vehicle, hours_from_now(30), customer_id="dave")

        resp = client.get("/api/bookings/customer/carol")

        data = resp.json()["data"]
        assert len(data["bookings"]) == 3
        assert data["stats"] == {"totalBookings": 3, "completedBookings": 1, "activeBookings": 1}

        only_done = client.get("/api/bookings/customer/carol", {"status": "completed"}).json()["data"]
        assert [b["status"] for b in only_done["bookings"]] == ["completed"]
