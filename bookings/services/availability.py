# bookings/services/availability.py
from dataclasses import dataclass
from datetime import datetime

from vehicles.models import Vehicle

from bookings.signals import availability_searched

from .conflicts import has_conflict
from .estimator import estimate_duration
from .intervals import Interval


@dataclass
class AvailableVehicle:
    vehicle: Vehicle
    estimated_ride_duration_hours: int
    from_code: str
    to_code: str
    window: Interval

    def to_dict(self):
        data = self.vehicle.to_dict()
        data.update({
            "estimatedRideDurationHours": self.estimated_ride_duration_hours,
            "route": {"from": self.from_code, "to": self.to_code},
            "timeWindow": self.window.as_dict(),
        })
        return data


def find_available(capacity_required, from_code, to_code, requested_start: datetime, fleet=None):
    """
    Vehicles that could take this trip right now.

    Candidates are active vehicles with enough capacity, smallest first so a
    small load does not tie up a big truck. Each candidate is then checked
    for time conflicts one at a time.

    Advisory only: nothing is reserved. Admission re-checks before it
    commits. Returns a list (possibly empty) of AvailableVehicle.
    """
    if fleet is None:
        fleet = Vehicle.objects.all()

    hours = estimate_duration(from_code, to_code)
    window = Interval.from_duration(requested_start, hours)

    available = []
    candidates = 0
    for vehicle in fleet.active_by_min_capacity(capacity_required).iterator():
        candidates += 1
        if has_conflict(vehicle, window.start, window.end):
            continue
        available.append(AvailableVehicle(
            vehicle=vehicle,
            estimated_ride_duration_hours=hours,
            from_code=from_code,
            to_code=to_code,
            window=window,
        ))

    availability_searched.send(
        sender=find_available,
        capacity_required=capacity_required,
        from_code=from_code,
        to_code=to_code,
        start=window.start,
        end=window.end,
        candidates=candidates,
        available=len(available),
    )
    return available
