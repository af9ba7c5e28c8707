# bookings/services/conflicts.py
from itertools import groupby

from bookings.models import ACTIVE_STATUSES, Booking

from .intervals import overlaps


def find_conflicts(vehicle, start, end, *, exclude_id=None):
    """
    Active bookings of *vehicle* (instance or pk) that collide with [start, end).

    Completed and cancelled bookings never count, whatever their stored
    window. *exclude_id* drops one booking from consideration, for
    re-validating an existing booking against everything but itself.
    Read-only.
    """
    return list(Booking.objects.overlapping(vehicle, start, end, exclude_id=exclude_id))


def count_conflicts(vehicle, start, end, *, exclude_id=None):
    return Booking.objects.overlapping(vehicle, start, end, exclude_id=exclude_id).count()


def has_conflict(vehicle, start, end, *, exclude_id=None):
    return Booking.objects.overlapping(vehicle, start, end, exclude_id=exclude_id).exists()


def find_overlapping_pairs(limit=50):
    """
    Audit: scan every vehicle's active bookings for pairs whose windows overlap.
    Such pairs should never exist; this is the check behind
    ``manage.py check_booking_conflicts``.

    Returns {"pairs": int, "samples": [...]}, samples capped at *limit*.
    """
    pairs = 0
    samples = []

    qs = (
        Booking.objects
        .filter(status__in=ACTIVE_STATUSES)
        .order_by("vehicle_id", "start_time", "id")
    )

    for vehicle_id, group in groupby(qs.iterator(), key=lambda b: b.vehicle_id):
        group_list = list(group)
        for i, b1 in enumerate(group_list):
            for b2 in group_list[i + 1:]:
                # sorted by start: nothing later can overlap b1 either
                if b2.start_time >= b1.end_time:
                    break
                if overlaps(b1.start_time, b1.end_time, b2.start_time, b2.end_time):
                    pairs += 1
                    if len(samples) < limit:
                        samples.append({
                            "vehicle": vehicle_id,
                            "first": b1.pk,
                            "second": b2.pk,
                            "window": f"{b1.start_time.isoformat()}~{b1.end_time.isoformat()} / "
                                      f"{b2.start_time.isoformat()}~{b2.end_time.isoformat()}",
                        })

    return {"pairs": pairs, "samples": samples}
