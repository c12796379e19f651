"""
API Serializers for the FTL Calculator
"""

from rest_framework import serializers

from .clock import parse_clock
from .exceptions import InvalidTimeFormat
from .fdp_tables import Acclimatisation
from .ftl_rules import DutyInput, MAX_SECTORS, MIN_SECTORS


class ClockField(serializers.CharField):
    """A 24-hour HH:MM local time, validated into minutes of day."""

    default_error_messages = {
        'invalid_clock': 'Invalid time format (HH:MM).',
    }

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        try:
            return parse_clock(value)
        except InvalidTimeFormat:
            self.fail('invalid_clock')


class DutyRequestSerializer(serializers.Serializer):
    """Serializer for an FDP calculation request."""
    reportTime = ClockField()
    proposedArrivalTime = ClockField(required=False, allow_blank=True, allow_null=True, default=None)
    sectors = serializers.IntegerField(min_value=MIN_SECTORS, max_value=MAX_SECTORS, default=2)
    acclimatisation = serializers.ChoiceField(
        choices=[state.value for state in Acclimatisation],
        default=Acclimatisation.ACCLIMATISED.value,
    )

    def validate_proposedArrivalTime(self, value):
        """Treat an empty arrival field as not supplied."""
        if value == '':
            return None
        return value

    def to_duty_input(self) -> DutyInput:
        """Build the engine input from validated data."""
        data = self.validated_data
        return DutyInput(
            report_time=data['reportTime'],
            sector_count=data['sectors'],
            acclimatisation=Acclimatisation(data['acclimatisation']),
            proposed_arrival_time=data.get('proposedArrivalTime'),
        )
