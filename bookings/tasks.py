# bookings/tasks.py
from __future__ import annotations

import logging

from django.utils import timezone

from bookings.models import ACTIVE_STATUSES, Booking, BookingStatus
from bookings.services.admission import update_booking_status

logger = logging.getLogger(__name__)


def _move(qs, new_status):
    ids = list(qs.values_list("pk", flat=True))
    for pk in ids:
        update_booking_status(pk, new_status)
    return ids


def advance_booking_lifecycle(now=None):
    """
    Periodic job (APScheduler / ``manage.py advance_bookings``):
    - active bookings whose end has passed        -> completed
    - confirmed bookings whose start has passed   -> in-progress
    Cancelled and completed bookings are never touched.

    Each move goes through update_booking_status, so every change is
    written under a row lock and announced with booking_status_changed.

    Returns {"started": n, "completed": n}.
    """
    now = now or timezone.now()

    completed = _move(
        Booking.objects.filter(status__in=ACTIVE_STATUSES, end_time__lte=now),
        BookingStatus.COMPLETED,
    )
    started = _move(
        Booking.objects.filter(
            status=BookingStatus.CONFIRMED,
            start_time__lte=now,
            end_time__gt=now,
        ),
        BookingStatus.IN_PROGRESS,
    )

    if completed or started:
        logger.info("[lifecycle] started=%s completed=%s", len(started), len(completed))
    return {"started": len(started), "completed": len(completed)}
