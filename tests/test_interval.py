import dataclasses

import pytest

from itree.interval import Interval, InvalidIntervalError


def test_valid_interval():
    interval = Interval(3, 7)
    assert interval.start == 3
    assert interval.end == 7
    assert str(interval) == "[3, 7]"


def test_single_point_interval():
    assert Interval(4, 4).contains(4)


def test_inverted_interval_raises():
    with pytest.raises(InvalidIntervalError) as excinfo:
        Interval(10, 1)
    assert excinfo.value.start == 10
    assert excinfo.value.end == 1
    assert "start 10 cannot be greater than end 1" in str(excinfo.value)


def test_invalid_interval_is_value_error():
    with pytest.raises(ValueError):
        Interval(2, 1)


def test_interval_is_immutable():
    interval = Interval(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        interval.end = 5


@pytest.mark.parametrize("a, b, expected", [
    ((1, 5), (3, 7), True),
    ((1, 5), (5, 9), True),    # shared endpoint
    ((1, 5), (6, 9), False),
    ((3, 4), (1, 10), True),   # nested
    ((10, 15), (1, 9), False),
])
def test_overlaps(a, b, expected):
    assert Interval(*a).overlaps(Interval(*b)) is expected
    assert Interval(*b).overlaps(Interval(*a)) is expected


def test_contains_is_closed_on_both_ends():
    interval = Interval(3, 7)
    assert interval.contains(3)
    assert interval.contains(7)
    assert interval.contains(5)
    assert not interval.contains(2)
    assert not interval.contains(8)
