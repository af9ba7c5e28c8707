from datetime import datetime, timedelta, timezone

import pytest

from bookings.services.intervals import Interval, overlaps

T0 = datetime(2030, 1, 1, tzinfo=timezone.utc)


def window(start_h, end_h):
    return Interval(T0 + timedelta(hours=start_h), T0 + timedelta(hours=end_h))


def test_partial_overlap():
    assert window(2, 6).overlaps(window(4, 8))


def test_back_to_back_is_not_an_overlap():
    assert not window(2, 6).overlaps(window(6, 10))
    assert not window(6, 10).overlaps(window(2, 6))


def test_exact_match_overlaps():
    assert window(2, 6).overlaps(window(2, 6))


def test_containment_overlaps():
    assert window(0, 10).overlaps(window(3, 4))
    assert window(3, 4).overlaps(window(0, 10))


def test_overlap_is_symmetric():
    pairs = [((0, 1), (1, 2)), ((0, 5), (4, 9)), ((3, 4), (0, 10)), ((0, 2), (5, 7))]
    for a, b in pairs:
        assert window(*a).overlaps(window(*b)) == window(*b).overlaps(window(*a))


def test_plain_function_matches_interval():
    assert overlaps(2, 6, 4, 8)
    assert not overlaps(2, 6, 6, 10)


def test_from_duration():
    w = Interval.from_duration(T0, 4)
    assert w.end - w.start == timedelta(hours=4)
    assert w.hours == 4


def test_empty_or_inverted_window_rejected():
    with pytest.raises(ValueError):
        Interval(T0, T0)
    with pytest.raises(ValueError):
        Interval(T0, T0 - timedelta(hours=1))
