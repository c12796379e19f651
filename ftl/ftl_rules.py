"""
Flight Time Limitations (FTL) Rules Engine

Implements the EASA ORO.FTL.205 maximum daily FDP for 2-pilot crews:
- Base FDP from report time and acclimatisation state
- 30-minute reduction per sector beyond the second
- 11-hour ceiling when the duty infringes the WOCL (02:00-05:59)
- One-hour extension for up to 4 sectors
- Minimum rest of the longer of the rest floor and the duty itself
- Feasibility of a proposed final arrival time
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .clock import (
    MINUTES_PER_DAY,
    format_clock,
    next_occurrence,
    overlaps_daily_window,
    parse_clock,
)
from .exceptions import InvalidInput, SectorCountOutOfRange
from .fdp_tables import Acclimatisation, require_base_fdp


logger = logging.getLogger(__name__)


# ORO.FTL.205 constants (minutes)
SECTOR_REDUCTION_MINUTES = 30  # Reduction per sector beyond the free ones
FREE_SECTORS = 2  # Sectors flown without FDP reduction
MIN_SECTORS = 1
MAX_SECTORS = 10
WOCL_START = 2 * 60  # 02:00
WOCL_END = 5 * 60 + 59  # 05:59
WOCL_FDP_CAP = 11 * 60  # Ceiling when the WOCL is infringed
EXTENSION_MINUTES = 60  # Commander's discretion
EXTENSION_MAX_SECTORS = 4  # Extension not available above this
REST_FLOOR_ACCLIMATISED = 12 * 60
REST_FLOOR_NOT_ACCLIMATISED = 10 * 60


@dataclass(frozen=True)
class DutyInput:
    """
    A single duty to evaluate.

    Times are minutes since local midnight.
    """
    report_time: int
    sector_count: int
    acclimatisation: Acclimatisation
    proposed_arrival_time: Optional[int] = None


@dataclass(frozen=True)
class FeasibilityResult:
    """Planned duty length compared with the computed limit."""
    planned_fdp: int
    is_feasible: bool
    difference_minutes: int


@dataclass(frozen=True)
class DutyResult:
    """
    Computed limits for a duty.

    All durations are minutes. latest_permissible_time is a minute of day.
    """
    base_fdp: int
    sector_reduction: int
    fdp_after_sectors: int
    wocl_infringed: bool
    final_fdp: int
    latest_permissible_time: int
    extension_eligible: bool
    extended_fdp: int
    minimum_rest: int
    feasibility: Optional[FeasibilityResult] = None

    @property
    def wocl_cap_applied(self) -> bool:
        """True when the WOCL ceiling actually shortened the FDP."""
        return self.final_fdp < self.fdp_after_sectors


def _check_clock_minutes(value, name: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value < MINUTES_PER_DAY:
        raise InvalidInput(f"{name} must be a minute of day in 0-{MINUTES_PER_DAY - 1}, got {value!r}")


def validate_duty_input(duty: DutyInput) -> None:
    """
    Fail fast on a DutyInput built without going through validation.

    Raises:
        SectorCountOutOfRange: If sector_count is outside 1-10
        InvalidInput: If a time or the acclimatisation value is out of bounds
    """
    _check_clock_minutes(duty.report_time, "report_time")
    if duty.proposed_arrival_time is not None:
        _check_clock_minutes(duty.proposed_arrival_time, "proposed_arrival_time")
    sectors = duty.sector_count
    if not isinstance(sectors, int) or isinstance(sectors, bool) or not MIN_SECTORS <= sectors <= MAX_SECTORS:
        raise SectorCountOutOfRange(sectors, MIN_SECTORS, MAX_SECTORS)
    if not isinstance(duty.acclimatisation, Acclimatisation):
        raise InvalidInput(f"Unknown acclimatisation state: {duty.acclimatisation!r}")


def sector_reduction(sector_count: int) -> int:
    """FDP reduction for the sectors beyond the free ones."""
    return max(0, sector_count - FREE_SECTORS) * SECTOR_REDUCTION_MINUTES


def infringes_wocl(report_time: int, fdp: int) -> bool:
    """
    Check whether a duty overlaps the WOCL.

    Args:
        report_time: Report time as minute of day
        fdp: Duty length in minutes

    Returns:
        True if the duty overlaps the WOCL on the report day or the next
    """
    return overlaps_daily_window(report_time, report_time + fdp, WOCL_START, WOCL_END)


def rest_floor(acclimatisation: Acclimatisation) -> int:
    if acclimatisation is Acclimatisation.ACCLIMATISED:
        return REST_FLOOR_ACCLIMATISED
    return REST_FLOOR_NOT_ACCLIMATISED


def minimum_rest(acclimatisation: Acclimatisation, fdp: int) -> int:
    """
    Rest required after a duty = max(rest floor, duty length).
    """
    return max(rest_floor(acclimatisation), fdp)


def check_feasibility(report_time: int, arrival_time: int, final_fdp: int) -> FeasibilityResult:
    """
    Compare a proposed arrival against the FDP limit.

    An arrival earlier on the clock than the report time is taken to be on
    the following day.
    """
    planned = next_occurrence(report_time, arrival_time) - report_time
    return FeasibilityResult(
        planned_fdp=planned,
        is_feasible=planned <= final_fdp,
        difference_minutes=abs(planned - final_fdp),
    )


def compute_duty_limit(duty: DutyInput) -> DutyResult:
    """
    Compute the maximum FDP and related limits for a duty.

    Args:
        duty: Duty to evaluate

    Returns:
        Computed limits, with a feasibility result when a proposed
        arrival time was given

    Raises:
        InvalidInput: If the duty holds out-of-bound values
        TableLookupMiss: If the FDP table has no entry for the report time
    """
    validate_duty_input(duty)

    base_fdp = require_base_fdp(duty.report_time, duty.acclimatisation)
    reduction = sector_reduction(duty.sector_count)

    # Not clamped: a reduction larger than the base FDP stays negative
    fdp_after_sectors = base_fdp - reduction
    if fdp_after_sectors < 0:
        logger.warning(
            f"Sector reduction {reduction}m exceeds base FDP {base_fdp}m "
            f"for report {format_clock(duty.report_time)}"
        )

    wocl_infringed = infringes_wocl(duty.report_time, fdp_after_sectors)
    final_fdp = fdp_after_sectors
    if wocl_infringed:
        final_fdp = min(fdp_after_sectors, WOCL_FDP_CAP)

    feasibility = None
    if duty.proposed_arrival_time is not None:
        feasibility = check_feasibility(duty.report_time, duty.proposed_arrival_time, final_fdp)

    result = DutyResult(
        base_fdp=base_fdp,
        sector_reduction=reduction,
        fdp_after_sectors=fdp_after_sectors,
        wocl_infringed=wocl_infringed,
        final_fdp=final_fdp,
        latest_permissible_time=(duty.report_time + final_fdp) % MINUTES_PER_DAY,
        extension_eligible=duty.sector_count <= EXTENSION_MAX_SECTORS,
        extended_fdp=final_fdp + EXTENSION_MINUTES,
        minimum_rest=minimum_rest(duty.acclimatisation, final_fdp),
        feasibility=feasibility,
    )
    logger.debug(f"Computed FDP for {duty}: {result}")
    return result


def calculate(
    report_time: str,
    sectors: int,
    acclimatisation: Acclimatisation | str,
    proposed_arrival_time: Optional[str] = None,
) -> DutyResult:
    """
    Compute duty limits from raw clock strings.

    Args:
        report_time: Report time as HH:MM
        sectors: Number of sectors in the duty
        acclimatisation: Acclimatisation state or its string value
        proposed_arrival_time: Final on-block time as HH:MM, optional

    Returns:
        Computed limits

    Raises:
        InvalidTimeFormat: If a clock string is malformed
        SectorCountOutOfRange: If sectors is outside 1-10
        InvalidInput: If the acclimatisation value is unknown
    """
    try:
        state = Acclimatisation(acclimatisation)
    except ValueError:
        raise InvalidInput(f"Unknown acclimatisation state: {acclimatisation!r}")

    arrival = None
    if proposed_arrival_time:
        arrival = parse_clock(proposed_arrival_time)

    return compute_duty_limit(
        DutyInput(
            report_time=parse_clock(report_time),
            sector_count=sectors,
            acclimatisation=state,
            proposed_arrival_time=arrival,
        )
    )
