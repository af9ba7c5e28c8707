from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from bookings.models import Booking, BookingStatus
from bookings.signals import booking_status_changed
from bookings.tasks import advance_booking_lifecycle

pytestmark = pytest.mark.django_db


def status_of(booking):
    return Booking.objects.get(pk=booking.pk).status


def test_lifecycle_moves_started_and_finished(vehicle, make_booking, hours_from_now):
    finished = make_booking(vehicle, hours_from_now(-6), hours=2)
    running = make_booking(vehicle, hours_from_now(-1), hours=4)
    upcoming = make_booking(vehicle, hours_from_now(5), hours=2)
    overdue = make_booking(vehicle, hours_from_now(-12), hours=1, status=BookingStatus.IN_PROGRESS)
    cancelled = make_booking(vehicle, hours_from_now(-3), hours=1, status=BookingStatus.CANCELLED)

    result = advance_booking_lifecycle(now=hours_from_now(0))

    assert result == {"started": 1, "completed": 2}
    assert status_of(finished) == BookingStatus.COMPLETED
    assert status_of(running) == BookingStatus.IN_PROGRESS
    assert status_of(upcoming) == BookingStatus.CONFIRMED
    assert status_of(overdue) == BookingStatus.COMPLETED
    assert status_of(cancelled) == BookingStatus.CANCELLED


def test_lifecycle_is_idempotent(vehicle, make_booking, hours_from_now):
    make_booking(vehicle, hours_from_now(-1), hours=4)

    advance_booking_lifecycle(now=hours_from_now(0))
    assert advance_booking_lifecycle(now=hours_from_now(0)) == {"started": 0, "completed": 0}


def test_advance_command(vehicle, make_booking, hours_from_now):
    booking = make_booking(vehicle, hours_from_now(-6), hours=2)
    out = StringIO()

    call_command("advance_bookings", stdout=out)

    assert "1 completed" in out.getvalue()
    assert status_of(booking) == BookingStatus.COMPLETED


def test_conflict_audit_clean(vehicle, make_booking, hours_from_now):
    make_booking(vehicle, hours_from_now(2), hours=4)
    make_booking(vehicle, hours_from_now(6), hours=4)
    out = StringIO()

    call_command("check_booking_conflicts", "--strict", stdout=out)

    assert "No overlapping bookings." in out.getvalue()


def test_conflict_audit_strict_fails(vehicle, make_booking, hours_from_now):
    make_booking(vehicle, hours_from_now(2), hours=4)
    make_booking(vehicle, hours_from_now(3), hours=4)
    out = StringIO()

    with pytest.raises(CommandError):
        call_command("check_booking_conflicts", "--strict", stdout=out)
    assert "Overlapping pairs: 1" in out.getvalue()


def test_lifecycle_announces_each_move(vehicle, make_booking, hours_from_now):
    finished = make_booking(vehicle, hours_from_now(-6), hours=2)
    running = make_booking(vehicle, hours_from_now(-1), hours=4)
    seen = []

    def observer(sender, booking, old_status, new_status, **kwargs):
        seen.append((booking.pk, old_status, new_status))

    booking_status_changed.connect(observer)
    try:
        advance_booking_lifecycle(now=hours_from_now(0))
    finally:
        booking_status_changed.disconnect(observer)

    assert sorted(seen) == sorted([
        (finished.pk, BookingStatus.CONFIRMED, BookingStatus.COMPLETED),
        (running.pk, BookingStatus.CONFIRMED, BookingStatus.IN_PROGRESS),
    ])
