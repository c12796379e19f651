"""
Clock arithmetic tests
"""

import pytest

from ftl.clock import (
    format_clock,
    format_duration,
    next_occurrence,
    overlaps,
    overlaps_daily_window,
    parse_clock,
)
from ftl.exceptions import InvalidInput, InvalidTimeFormat


@pytest.mark.parametrize("value, expected", [
    ("00:00", 0),
    ("08:00", 480),
    ("13:29", 809),
    ("23:59", 1439),
])
def test_parse_clock(value, expected):
    assert parse_clock(value) == expected


@pytest.mark.parametrize("value", ["24:00", "12:60", "8:00", "08:5", "0800", "", " 08:00", "ab:cd", None, 480])
def test_parse_clock_rejects_malformed(value):
    with pytest.raises(InvalidTimeFormat):
        parse_clock(value)


def test_invalid_time_format_is_invalid_input():
    with pytest.raises(InvalidInput):
        parse_clock("25:00")


def test_format_duration_does_not_wrap():
    assert format_duration(1500) == "25:00"
    assert format_duration(780) == "13:00"
    assert format_duration(0) == "00:00"
    assert format_duration(45) == "00:45"


def test_format_duration_keeps_sign():
    assert format_duration(-30) == "-00:30"


def test_format_clock_wraps_at_midnight():
    assert format_clock(1905) == "07:45"
    assert format_clock(1440) == "00:00"
    assert format_clock(1260) == "21:00"


def test_overlaps_is_open_at_endpoints():
    assert overlaps(0, 120, 120, 359) is False
    assert overlaps(0, 121, 120, 359) is True
    assert overlaps(359, 400, 120, 359) is False


def test_daily_window_checked_on_next_day():
    # 23:00 + 08:45 runs through 02:00-05:59 of the following day
    assert overlaps_daily_window(1380, 1905, 120, 359) is True
    # 08:00 + 13:00 stays clear of both occurrences
    assert overlaps_daily_window(480, 1260, 120, 359) is False


def test_daily_window_ending_at_window_start_does_not_overlap():
    assert overlaps_daily_window(1380, 1560, 120, 359) is False


def test_next_occurrence_rolls_to_next_day():
    assert next_occurrence(1320, 240) == 1680
    assert next_occurrence(480, 1020) == 1020
    assert next_occurrence(480, 480) == 480
