# bookings/services/admission.py
"""
Booking admission and lifecycle.

Admission is check-then-insert. Two requests for the same vehicle and
overlapping windows must not both pass the check, so the whole sequence runs
inside one transaction holding a lock on the vehicle row
(``select_for_update``). On SQLite, where row locks do not exist, the
connection runs transactions in IMMEDIATE mode and the database write lock
plays the same role.
"""
import logging
from contextlib import contextmanager
from datetime import timedelta

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from vehicles.models import Vehicle

from bookings.exceptions import (
    Conflict,
    InvalidRequest,
    InvalidState,
    NotAvailable,
    NotFound,
    TooLate,
)
from bookings.models import Booking, BookingStatus
from bookings.signals import (
    booking_admitted,
    booking_cancelled,
    booking_rejected,
    booking_status_changed,
)

from .conflicts import find_conflicts
from .estimator import estimate_cost, estimate_duration
from .intervals import Interval

logger = logging.getLogger(__name__)


@contextmanager
def lock_vehicle(vehicle_id):
    """
    Open a transaction and lock one vehicle row for its duration.
    Yields the locked Vehicle, or None if it does not exist.

        with lock_vehicle(pk) as vehicle:
            # conflict check and insert here
    """
    with transaction.atomic():
        yield Vehicle.objects.select_for_update().filter(pk=vehicle_id).first()


def admit_booking(vehicle_id, customer_id, from_pincode, to_pincode, start_time):
    """
    Create a confirmed booking, or raise.

    NotFound        vehicle does not exist
    NotAvailable    vehicle is not active
    Conflict        the window overlaps an active booking of the vehicle
    InvalidRequest  the row fails model validation (e.g. a malformed pincode)

    The conflict check runs against the store inside the locked transaction,
    even if the caller searched availability a moment ago. Nothing is written
    unless every check passes.
    """
    try:
        with lock_vehicle(vehicle_id) as vehicle:
            if vehicle is None:
                raise NotFound("Vehicle not found")
            if not vehicle.is_bookable:
                raise NotAvailable()

            hours = estimate_duration(from_pincode, to_pincode)
            window = Interval.from_duration(start_time, hours)

            conflicts = find_conflicts(vehicle, window.start, window.end)
            if conflicts:
                raise Conflict(len(conflicts))

            booking = Booking(
                vehicle=vehicle,
                customer_id=customer_id,
                from_pincode=from_pincode,
                to_pincode=to_pincode,
                start_time=window.start,
                end_time=window.end,
                estimated_ride_duration_hours=hours,
                total_cost=estimate_cost(hours, vehicle.capacity_kg, from_pincode, to_pincode),
                status=BookingStatus.CONFIRMED,
            )
            try:
                booking.full_clean()
            except ValidationError as e:
                raise InvalidRequest(details=e.message_dict)
            booking.save()
    except (NotFound, NotAvailable, Conflict, InvalidRequest) as e:
        booking_rejected.send(
            sender=admit_booking,
            vehicle_id=vehicle_id,
            start=start_time,
            reason=type(e).__name__,
            conflict_count=getattr(e, "count", 0),
        )
        raise

    booking_admitted.send(sender=admit_booking, booking=booking)
    return booking


def get_booking(booking_id):
    booking = Booking.objects.select_related("vehicle").filter(pk=booking_id).first()
    if booking is None:
        raise NotFound("Booking not found")
    return booking


def cancel_booking(booking_id, now=None):
    """
    Guarded cancellation: only confirmed bookings, and not inside the
    FLEETLINK["CANCELLATION_BUFFER_HOURS"] window before the start.
    """
    now = now or timezone.now()
    buffer = timedelta(hours=settings.FLEETLINK["CANCELLATION_BUFFER_HOURS"])

    with transaction.atomic():
        booking = (
            Booking.objects.select_for_update()
            .select_related("vehicle")
            .filter(pk=booking_id)
            .first()
        )
        if booking is None:
            raise NotFound("Booking not found")
        if booking.status != BookingStatus.CONFIRMED:
            raise InvalidState("Only confirmed bookings can be cancelled")
        if booking.start_time - now < buffer:
            raise TooLate()

        booking.status = BookingStatus.CANCELLED
        booking.save(update_fields=["status", "updated_at"])

    booking_cancelled.send(sender=cancel_booking, booking=booking)
    return booking


def update_booking_status(booking_id, status):
    """
    Administrative override. Any known status may be written over any other;
    the transition graph is not enforced here (see cancel_booking for the
    guarded path).
    """
    if status not in BookingStatus.values:
        raise InvalidState(
            f"Invalid status. Must be one of: {', '.join(BookingStatus.values)}"
        )

    with transaction.atomic():
        booking = (
            Booking.objects.select_for_update()
            .select_related("vehicle")
            .filter(pk=booking_id)
            .first()
        )
        if booking is None:
            raise NotFound("Booking not found")
        old_status = booking.status
        booking.status = status
        booking.save(update_fields=["status", "updated_at"])

    if old_status != status:
        booking_status_changed.send(
            sender=update_booking_status,
            booking=booking,
            old_status=old_status,
            new_status=status,
        )
    return booking
