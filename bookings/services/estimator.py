# bookings/services/estimator.py
"""
Placeholder pricing rules. Durations and costs are derived from the numeric
distance between two pincodes; there is no real routing behind them.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP

from django.conf import settings

from bookings.signals import duration_estimate_degraded

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def _code_to_int(code):
    return int(str(code).strip())


def _degraded(sender, from_code, to_code, hours):
    duration_estimate_degraded.send(sender=sender, from_code=from_code, to_code=to_code, hours=hours)


def estimate_duration(from_code, to_code) -> int:
    """
    Ride duration in whole hours: |from - to| mod 24, never below 1.

    Unparseable codes do not raise: the estimate falls back to
    FLEETLINK["FALLBACK_DURATION_HOURS"] and a warning is logged.
    """
    try:
        origin = _code_to_int(from_code)
        destination = _code_to_int(to_code)
    except (TypeError, ValueError):
        fallback = settings.FLEETLINK["FALLBACK_DURATION_HOURS"]
        logger.warning(
            "[estimate] unparseable route %r -> %r, using fallback of %sh",
            from_code, to_code, fallback,
        )
        _degraded(estimate_duration, from_code, to_code, fallback)
        return fallback

    return max(1, abs(origin - destination) % 24)


def estimate_cost(hours, capacity_kg, from_code, to_code) -> Decimal:
    """
    base_rate * hours * max(1, capacity/1000) * max(1, distance/100),
    rounded half-up to cents.

    Like the duration estimate this never raises on a bad route: an
    unparseable code leaves the distance factor at 1.
    """
    base_rate = Decimal(settings.FLEETLINK["BASE_RATE_PER_HOUR"])
    capacity_factor = max(Decimal(1), Decimal(capacity_kg) / Decimal(1000))
    try:
        distance = abs(_code_to_int(to_code) - _code_to_int(from_code))
    except (TypeError, ValueError):
        logger.warning("[estimate] unparseable route %r -> %r, distance factor 1", from_code, to_code)
        _degraded(estimate_cost, from_code, to_code, hours)
        distance = 0
    distance_factor = max(Decimal(1), Decimal(distance) / Decimal(100))

    total = base_rate * Decimal(hours) * capacity_factor * distance_factor
    return total.quantize(CENT, rounding=ROUND_HALF_UP)
