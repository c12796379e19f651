"""
Request validation tests
"""

import pytest

from ftl.fdp_tables import Acclimatisation
from ftl.serializers import DutyRequestSerializer


def _serializer(**data):
    return DutyRequestSerializer(data=data)


def test_valid_request_builds_duty_input():
    serializer = _serializer(
        reportTime="22:00",
        proposedArrivalTime="04:00",
        sectors=2,
        acclimatisation="acclimatised",
    )
    assert serializer.is_valid(), serializer.errors

    duty = serializer.to_duty_input()
    assert duty.report_time == 1320
    assert duty.proposed_arrival_time == 240
    assert duty.sector_count == 2
    assert duty.acclimatisation is Acclimatisation.ACCLIMATISED


def test_defaults_match_form_defaults():
    serializer = _serializer(reportTime="08:00")
    assert serializer.is_valid(), serializer.errors

    duty = serializer.to_duty_input()
    assert duty.sector_count == 2
    assert duty.acclimatisation is Acclimatisation.ACCLIMATISED
    assert duty.proposed_arrival_time is None


@pytest.mark.parametrize("arrival", ["", None])
def test_blank_arrival_is_not_supplied(arrival):
    serializer = _serializer(reportTime="08:00", proposedArrivalTime=arrival)
    assert serializer.is_valid(), serializer.errors
    assert serializer.to_duty_input().proposed_arrival_time is None


@pytest.mark.parametrize("report", ["24:00", "8:00", "12:60", "noon"])
def test_malformed_report_time_rejected(report):
    serializer = _serializer(reportTime=report)
    assert not serializer.is_valid()
    assert serializer.errors["reportTime"] == ["Invalid time format (HH:MM)."]


def test_missing_report_time_rejected():
    serializer = _serializer(sectors=2)
    assert not serializer.is_valid()
    assert "reportTime" in serializer.errors


def test_malformed_arrival_rejected():
    serializer = _serializer(reportTime="08:00", proposedArrivalTime="7pm")
    assert not serializer.is_valid()
    assert "proposedArrivalTime" in serializer.errors


@pytest.mark.parametrize("sectors", [0, 11, "many"])
def test_sector_count_out_of_range_rejected(sectors):
    serializer = _serializer(reportTime="08:00", sectors=sectors)
    assert not serializer.is_valid()
    assert "sectors" in serializer.errors


def test_unknown_acclimatisation_rejected():
    serializer = _serializer(reportTime="08:00", acclimatisation="unknown")
    assert not serializer.is_valid()
    assert "acclimatisation" in serializer.errors
