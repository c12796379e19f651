"""
FTL Calculator Errors

- InvalidInput and its subclasses are caller-correctable and are turned
  into 400 responses by the serializers.
- TableLookupMiss means an FDP table does not cover the clock; it is a
  data defect and is never caught.
"""


class InvalidInput(ValueError):
    """A duty input value is outside what the calculator accepts."""


class InvalidTimeFormat(InvalidInput):
    """A clock string is not a 24-hour HH:MM value."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid time format (HH:MM): {value!r}")


class SectorCountOutOfRange(InvalidInput):
    """Sector count is outside the supported bound."""

    def __init__(self, sectors, minimum: int, maximum: int):
        self.sectors = sectors
        super().__init__(
            f"Sector count {sectors!r} outside supported range {minimum}-{maximum}"
        )


class TableLookupMiss(AssertionError):
    """No FDP table entry matched a report time."""

    def __init__(self, report_minutes: int, table_name: str):
        self.report_minutes = report_minutes
        self.table_name = table_name
        super().__init__(
            f"FDP table '{table_name}' has no entry for report minute {report_minutes}"
        )
