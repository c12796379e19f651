"""
Clock Arithmetic

Minute-based helpers for local clock-face times:
- HH:MM parsing and rendering (durations vs. wall-clock times)
- Interval overlap, including a daily window checked on the report day
  and the day after
- Rolling a clock time forward past midnight
"""

import re

from .exceptions import InvalidTimeFormat

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * 60

# 24-hour HH:MM, two digits each
CLOCK_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def parse_clock(value: str) -> int:
    """
    Parse a 24-hour HH:MM string into minutes since local midnight.

    Args:
        value: Clock string such as "08:00"

    Returns:
        Minute of day in 0..1439

    Raises:
        InvalidTimeFormat: If the string is not a valid HH:MM time
    """
    if not isinstance(value, str):
        raise InvalidTimeFormat(value)
    match = CLOCK_PATTERN.match(value)
    if match is None:
        raise InvalidTimeFormat(value)
    hours, minutes = int(match.group(1)), int(match.group(2))
    return hours * MINUTES_PER_HOUR + minutes


def format_duration(minutes: int) -> str:
    """
    Render a duration as HH:MM without wrapping at 24 hours.

    1500 minutes renders as "25:00". A negative duration keeps its sign.
    """
    sign = "-" if minutes < 0 else ""
    hours, mins = divmod(abs(minutes), MINUTES_PER_HOUR)
    return f"{sign}{hours:02d}:{mins:02d}"


def format_clock(minutes: int) -> str:
    """Render an absolute minute offset as a wall-clock HH:MM."""
    hours, mins = divmod(minutes % MINUTES_PER_DAY, MINUTES_PER_HOUR)
    return f"{hours:02d}:{mins:02d}"


def overlaps(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    """Open interval overlap: touching endpoints do not count."""
    return max(a_start, b_start) < min(a_end, b_end)


def overlaps_daily_window(start: int, end: int, window_start: int, window_end: int) -> bool:
    """
    Check an interval against a window that recurs every day.

    The interval is measured from midnight of the report day and may run
    past 1440. The window is tested on the report day and again on the
    following day.

    Args:
        start: Interval start (minute of report day)
        end: Interval end (unwrapped minute offset)
        window_start: Window start as minute of day
        window_end: Window end as minute of day

    Returns:
        True if either occurrence of the window overlaps the interval
    """
    return any(
        overlaps(start, end, window_start + offset, window_end + offset)
        for offset in (0, MINUTES_PER_DAY)
    )


def next_occurrence(reference: int, clock: int) -> int:
    """
    Place a clock time at or after a reference minute of the same day.

    A clock value numerically earlier than the reference is taken to be
    on the following day.
    """
    if clock < reference:
        return clock + MINUTES_PER_DAY
    return clock
