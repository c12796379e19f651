"""
Maximum FDP Tables

Base flight duty period by report time (EASA ORO.FTL.205, 2-pilot crew):
- One table for acclimatised crew, one for crew in an unknown state
- Each entry covers an inclusive report-time window; a window whose start
  is later than its end runs through midnight
- Together the entries of a table cover every minute of the day
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .clock import parse_clock, format_clock, format_duration
from .exceptions import TableLookupMiss


logger = logging.getLogger(__name__)


class Acclimatisation(Enum):
    """Crew body-clock state relative to local time."""
    ACCLIMATISED = "acclimatised"
    NOT_ACCLIMATISED = "not_acclimatised"


@dataclass(frozen=True)
class FDPTableEntry:
    """A report-time window and the base FDP it allows (minutes)."""
    start: int
    end: int
    fdp: int

    @property
    def wraps_midnight(self) -> bool:
        return self.start > self.end

    def contains(self, report_minutes: int) -> bool:
        """Inclusive match; wrap-around windows match either side of midnight."""
        if self.wraps_midnight:
            return report_minutes >= self.start or report_minutes <= self.end
        return self.start <= report_minutes <= self.end

    @property
    def window(self) -> str:
        return f"{format_clock(self.start)}-{format_clock(self.end)}"


def _entry(start: str, end: str, fdp: str) -> FDPTableEntry:
    return FDPTableEntry(start=parse_clock(start), end=parse_clock(end), fdp=parse_clock(fdp))


FDP_TABLE_ACCLIMATISED = (
    _entry("06:00", "13:29", "13:00"),
    _entry("13:30", "13:59", "12:45"),
    _entry("14:00", "14:29", "12:30"),
    _entry("14:30", "14:59", "12:15"),
    _entry("15:00", "15:29", "12:00"),
    _entry("15:30", "15:59", "11:45"),
    _entry("16:00", "16:59", "11:30"),
    _entry("17:00", "21:59", "11:00"),
    _entry("22:00", "22:29", "10:45"),
    _entry("22:30", "22:59", "10:30"),
    _entry("23:00", "23:29", "10:15"),
    _entry("23:30", "23:59", "10:00"),
    _entry("00:00", "00:29", "09:45"),
    _entry("00:30", "00:59", "09:30"),
    _entry("01:00", "01:29", "09:15"),
    _entry("01:30", "05:59", "09:00"),
)

FDP_TABLE_NOT_ACCLIMATISED = (
    _entry("06:00", "12:29", "11:00"),
    _entry("12:30", "12:59", "10:45"),
    _entry("13:00", "13:29", "10:30"),
    _entry("13:30", "13:59", "10:15"),
    _entry("14:00", "21:59", "10:00"),
    _entry("22:00", "22:29", "09:45"),
    _entry("22:30", "22:59", "09:30"),
    _entry("23:00", "23:29", "09:15"),
    _entry("23:30", "05:59", "09:00"),  # Through midnight
)


def table_for(acclimatisation: Acclimatisation) -> tuple[FDPTableEntry, ...]:
    """
    Select the FDP table for an acclimatisation state.

    Args:
        acclimatisation: Crew acclimatisation state

    Returns:
        The constant table for that state

    Raises:
        ValueError: If the value is not an Acclimatisation member
    """
    if acclimatisation is Acclimatisation.ACCLIMATISED:
        return FDP_TABLE_ACCLIMATISED
    if acclimatisation is Acclimatisation.NOT_ACCLIMATISED:
        return FDP_TABLE_NOT_ACCLIMATISED
    raise ValueError(f"Unknown acclimatisation state: {acclimatisation!r}")


def lookup_base_fdp(report_minutes: int, table: tuple[FDPTableEntry, ...]) -> Optional[int]:
    """
    Find the base FDP for a report time.

    Args:
        report_minutes: Report time as minute of day
        table: FDP table to scan, in order

    Returns:
        Base FDP in minutes from the first matching entry, or None if no
        entry covers the report time
    """
    for entry in table:
        if entry.contains(report_minutes):
            return entry.fdp
    return None


def require_base_fdp(report_minutes: int, acclimatisation: Acclimatisation) -> int:
    """Base FDP lookup that treats a gap in the table as a defect."""
    fdp = lookup_base_fdp(report_minutes, table_for(acclimatisation))
    if fdp is None:
        logger.error(
            f"No {acclimatisation.value} FDP entry for report time {format_clock(report_minutes)}"
        )
        raise TableLookupMiss(report_minutes, acclimatisation.value)
    return fdp


def describe_table(acclimatisation: Acclimatisation) -> list[dict]:
    """Table rows as window/FDP strings for display."""
    return [
        {"window": entry.window, "fdp": format_duration(entry.fdp)}
        for entry in table_for(acclimatisation)
    ]
