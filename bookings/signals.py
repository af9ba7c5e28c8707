# bookings/signals.py
"""
Booking lifecycle events.

The engine never prints; it sends one of these signals and whoever is
connected decides what to do with it. The receivers below only log.
"""
from __future__ import annotations

import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

# kwargs: booking
booking_admitted = Signal()
# kwargs: vehicle_id, start, reason, conflict_count
booking_rejected = Signal()
# kwargs: booking
booking_cancelled = Signal()
# kwargs: booking, old_status, new_status
booking_status_changed = Signal()
# kwargs: capacity_required, from_code, to_code, start, end, candidates, available
availability_searched = Signal()
# kwargs: from_code, to_code, hours
duration_estimate_degraded = Signal()


@receiver(booking_admitted)
def log_booking_admitted(sender, booking, **kwargs):
    logger.info(
        "[booking] admitted id=%s customer=%s vehicle=%s route=%s->%s window=%s~%s cost=%s",
        booking.pk, booking.customer_id, booking.vehicle_id,
        booking.from_pincode, booking.to_pincode,
        booking.start_time.isoformat(), booking.end_time.isoformat(), booking.total_cost,
    )


@receiver(booking_rejected)
def log_booking_rejected(sender, vehicle_id, reason, start=None, conflict_count=0, **kwargs):
    logger.info(
        "[booking] rejected vehicle=%s start=%s reason=%s conflicts=%s",
        vehicle_id, start, reason, conflict_count,
    )


@receiver(booking_cancelled)
def log_booking_cancelled(sender, booking, **kwargs):
    logger.info("[booking] cancelled id=%s customer=%s", booking.pk, booking.customer_id)


@receiver(booking_status_changed)
def log_booking_status_changed(sender, booking, old_status, new_status, **kwargs):
    logger.info("[booking] status id=%s %s -> %s", booking.pk, old_status, new_status)


@receiver(availability_searched)
def log_availability_searched(sender, capacity_required, from_code, to_code, start,
                              candidates, available, **kwargs):
    logger.info(
        "[search] capacity=%skg route=%s->%s start=%s: %s available of %s suitable",
        capacity_required, from_code, to_code, start.isoformat(), available, candidates,
    )
