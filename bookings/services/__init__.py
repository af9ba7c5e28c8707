"""
bookings.services
Booking engine. Only the pure helpers are re-exported here; bookings.models
imports this package, so the ORM-bound parts (conflicts, availability,
admission) are imported from their own modules.
"""

from .estimator import (
    estimate_duration,
    estimate_cost,
)

from .intervals import (
    Interval,
    overlaps,
)

__all__ = [
    "estimate_duration",
    "estimate_cost",
    "Interval",
    "overlaps",
]
