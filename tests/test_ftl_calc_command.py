"""
ftl_calc management command tests
"""

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError


def _run(*args):
    out = StringIO()
    call_command("ftl_calc", *args, stdout=out)
    return out.getvalue()


def test_prints_limits():
    output = _run("--report", "08:00")

    assert "Max FDP:           13:00" in output
    assert "Latest off-block:  21:00" in output
    assert "WOCL infringement: no" in output
    assert "Extended FDP (+1h): 14:00" in output


def test_not_acclimatised_with_arrival():
    output = _run("--report", "23:00", "--sectors", "3", "--not-acclimatised", "--arrival", "06:00")

    assert "Max FDP:           08:45" in output
    assert "WOCL infringement: yes (limited to 11:00)" in output
    assert "Min. rest:         10:00" in output
    assert "Planned FDP:       07:00" in output
    assert "Flight is feasible" in output


def test_infeasible_arrival_reported():
    output = _run("--report", "08:00", "--arrival", "22:30")
    assert "Exceeds max FDP by 01:30" in output


def test_no_extension_above_four_sectors():
    assert "Extended FDP" not in _run("--report", "08:00", "--sectors", "5")


@pytest.mark.parametrize("args", [
    ("--report", "8am"),
    ("--report", "08:00", "--sectors", "11"),
    ("--report", "08:00", "--arrival", "24:00"),
])
def test_invalid_input_raises_command_error(args):
    with pytest.raises(CommandError):
        _run(*args)
