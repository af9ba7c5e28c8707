from datetime import timedelta

import pytest
from django.utils import timezone

from vehicles.models import Vehicle


@pytest.fixture
def make_vehicle(db):
    def _make(name="Truck", capacity_kg=5000, tyres=6, **extra):
        return Vehicle.objects.create(name=name, capacity_kg=capacity_kg, tyres=tyres, **extra)
    return _make


@pytest.fixture
def vehicle(make_vehicle):
    return make_vehicle()


@pytest.fixture
def hours_from_now():
    """Aware datetimes relative to one fixed "now" per test."""
    now = timezone.now().replace(microsecond=0)

    def _at(hours):
        return now + timedelta(hours=hours)
    _at.now = now
    return _at


@pytest.fixture
def make_booking(db):
    """Insert a booking row directly, bypassing admission."""
    from bookings.models import Booking, BookingStatus

    def _make(vehicle, start, hours=4, status=BookingStatus.CONFIRMED, customer_id="cust-1"):
        return Booking.objects.create(
            vehicle=vehicle,
            customer_id=customer_id,
            from_pincode="110001",
            to_pincode="110005",
            start_time=start,
            end_time=start + timedelta(hours=hours),
            estimated_ride_duration_hours=hours,
            status=status,
            total_cost=0,
        )
    return _make
