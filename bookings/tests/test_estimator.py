import random
from decimal import Decimal

from bookings.services.estimator import estimate_cost, estimate_duration
from bookings.signals import duration_estimate_degraded


def test_duration_examples():
    assert estimate_duration("110001", "110005") == 4
    assert estimate_duration("400001", "400010") == 9
    assert estimate_duration("110001", "110001") == 1


def test_duration_wraps_at_24_and_never_drops_below_one():
    assert estimate_duration("100000", "100024") == 1
    assert estimate_duration("100000", "100025") == 1
    assert estimate_duration("100000", "100047") == 23


def test_duration_is_symmetric_and_bounded():
    rng = random.Random(20261019)
    for _ in range(500):
        a = str(rng.randint(100000, 999999))
        b = str(rng.randint(100000, 999999))
        hours = estimate_duration(a, b)
        assert hours == estimate_duration(b, a)
        assert isinstance(hours, int)
        assert 1 <= hours <= 23


def test_unparseable_codes_fall_back_to_two_hours():
    assert estimate_duration("invalid", "123456") == 2
    assert estimate_duration("123456", None) == 2


def test_fallback_is_announced():
    seen = []

    def observer(sender, **kwargs):
        seen.append(kwargs)

    duration_estimate_degraded.connect(observer)
    try:
        estimate_duration("abc", "110001")
    finally:
        duration_estimate_degraded.disconnect(observer)

    assert seen == [{"signal": duration_estimate_degraded, "from_code": "abc", "to_code": "110001", "hours": 2}]


def test_cost_formula():
    # 500 * 4h * (5000/1000) * max(1, 4/100)
    assert estimate_cost(4, 5000, "110001", "110005") == Decimal("10000.00")


def test_cost_small_vehicle_and_long_distance():
    # capacity factor floors at 1; distance 250 -> 2.5
    assert estimate_cost(2, 800, "110000", "110250") == Decimal("2500.00")


def test_cost_rounds_half_up_to_cents():
    # 500 * 1.001 * 1.01 = 505.505
    assert estimate_cost(1, 1001, "110000", "110101") == Decimal("505.51")
    assert estimate_cost(1, 1001, "110001", "110001") == Decimal("500.50")
    assert estimate_cost(3, 1234, "110001", "110004") == Decimal("1851.00")


def test_cost_with_unparseable_code_uses_unit_distance():
    # 500 * 2h * 5 * 1
    assert estimate_cost(2, 5000, "11000x", "110005") == Decimal("5000.00")
    assert estimate_cost(2, 800, None, "110005") == Decimal("1000.00")


def test_cost_fallback_is_announced():
    seen = []

    def observer(sender, from_code, to_code, **kwargs):
        seen.append((sender, from_code, to_code))

    duration_estimate_degraded.connect(observer)
    try:
        estimate_cost(2, 5000, "11000x", "110005")
    finally:
        duration_estimate_degraded.disconnect(observer)

    assert seen == [(estimate_cost, "11000x", "110005")]
