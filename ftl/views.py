"""
FTL Calculator API Views
"""

import logging

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from .clock import format_clock, format_duration
from .fdp_tables import Acclimatisation, describe_table
from .ftl_rules import (
    DutyResult,
    FeasibilityResult,
    compute_duty_limit,
    EXTENSION_MAX_SECTORS,
    EXTENSION_MINUTES,
    FREE_SECTORS,
    REST_FLOOR_ACCLIMATISED,
    REST_FLOOR_NOT_ACCLIMATISED,
    SECTOR_REDUCTION_MINUTES,
    WOCL_END,
    WOCL_FDP_CAP,
    WOCL_START,
)
from .serializers import DutyRequestSerializer


logger = logging.getLogger(__name__)


DEFINITIONS = {
    'fdp': (
        'A Flight Duty Period (FDP) is the period which commences when a crew member is '
        'required to report for duty, which includes a flight or a series of flights, and '
        'finishes when the aircraft finally comes to rest and the engines are shut down, '
        'at the end of the last flight on which he/she is a crew member.'
    ),
    'acclimatisation': (
        "A state in which a crew member's circadian biological clock is synchronised to "
        'the time of the area to which the crew member is exposed. When the local time '
        'where a duty commences differs by more than 2 hours from the local time where '
        'the crew member was last acclimatised, the crew member is considered to be in an '
        'unknown state of acclimatisation for the calculation of the maximum FDP.'
    ),
    'wocl': (
        'The Window of Circadian Low (WOCL) is the period between 02:00 and 05:59 hours in '
        'the time zone to which a crew member is acclimatised. When any part of a duty '
        'infringes on this period, the maximum FDP is limited.'
    ),
}

DISCLAIMER = (
    'This calculator is for informational and guidance purposes only and is not a '
    'substitute for official flight planning and rostering systems. Always refer to the '
    "airline's Operations Manual and the applicable EASA regulations."
)


@api_view(['POST'])
def calculate_fdp(request):
    """
    Calculate the maximum FDP, minimum rest and feasibility of a duty.

    Request body:
    {
        "reportTime": "08:00",
        "proposedArrivalTime": "17:30",  (optional, "" or null for none)
        "sectors": 2,
        "acclimatisation": "acclimatised" | "not_acclimatised"
    }

    Returns:
    {
        "baseFDP": {"minutes": 780, "hhmm": "13:00"},
        "sectorReductions": {...},
        "fdpAfterSectors": {...},
        "woclInfringement": false,
        "finalFDP": {...},
        "latestOffBlock": "21:00",
        "extension": {"possible": true, "newFDP": {...}},
        "minRest": {...},
        "feasibility": null | {...}
    }
    """
    serializer = DutyRequestSerializer(data=request.data)
    if not serializer.is_valid():
        logger.info(f"Rejected FDP request: {serializer.errors}")
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    result = compute_duty_limit(serializer.to_duty_input())
    return Response(_result_payload(result))


@api_view(['GET'])
def ftl_rules(request):
    """
    Reference data behind the calculator: FDP tables, WOCL, reductions,
    extension and rest policy, plus definitions for display.
    """
    return Response({
        'tables': {
            state.value: describe_table(state)
            for state in Acclimatisation
        },
        'wocl': {
            'start': format_clock(WOCL_START),
            'end': format_clock(WOCL_END),
            'fdpCap': format_duration(WOCL_FDP_CAP),
        },
        'sectorReduction': {
            'freeSectors': FREE_SECTORS,
            'perSector': format_duration(SECTOR_REDUCTION_MINUTES),
        },
        'extension': {
            'maxSectors': EXTENSION_MAX_SECTORS,
            'duration': format_duration(EXTENSION_MINUTES),
        },
        'restFloor': {
            Acclimatisation.ACCLIMATISED.value: format_duration(REST_FLOOR_ACCLIMATISED),
            Acclimatisation.NOT_ACCLIMATISED.value: format_duration(REST_FLOOR_NOT_ACCLIMATISED),
        },
        'definitions': DEFINITIONS,
        'disclaimer': DISCLAIMER,
    })


def _duration(minutes: int) -> dict:
    return {'minutes': minutes, 'hhmm': format_duration(minutes)}


def _result_payload(result: DutyResult) -> dict:
    """Build the JSON body for a computed duty."""
    return {
        'baseFDP': _duration(result.base_fdp),
        'sectorReductions': _duration(result.sector_reduction),
        'fdpAfterSectors': _duration(result.fdp_after_sectors),
        'woclInfringement': result.wocl_infringed,
        'woclCapApplied': result.wocl_cap_applied,
        'finalFDP': _duration(result.final_fdp),
        'latestOffBlock': format_clock(result.latest_permissible_time),
        'extension': {
            'possible': result.extension_eligible,
            'newFDP': _duration(result.extended_fdp),
        },
        'minRest': _duration(result.minimum_rest),
        'feasibility': _feasibility_payload(result.feasibility) if result.feasibility else None,
    }


def _feasibility_payload(feasibility: FeasibilityResult) -> dict:
    difference = format_duration(feasibility.difference_minutes)
    if feasibility.is_feasible:
        message = 'Flight is feasible'
    else:
        message = f'Exceeds max FDP by {difference}'
    return {
        'isFeasible': feasibility.is_feasible,
        'plannedFDP': _duration(feasibility.planned_fdp),
        'difference': _duration(feasibility.difference_minutes),
        'message': message,
    }
