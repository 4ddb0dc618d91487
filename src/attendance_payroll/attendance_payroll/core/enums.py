from __future__ import annotations

from enum import Enum


class DayClassification(str, Enum):
    """Derived state of one calendar day, re-evaluated on every time edit."""

    UNSET = "UNSET"
    HOLIDAY = "HOLIDAY"
    SUNDAY_OFF = "SUNDAY_OFF"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    INVALID = "INVALID"


class WarningCode(str, Enum):
    """Non-fatal data-entry problems reported next to a zeroed result."""

    MALFORMED_TIME = "MALFORMED_TIME"
    NEGATIVE_DURATION = "NEGATIVE_DURATION"
    OVERRIDE_UNPARSEABLE = "OVERRIDE_UNPARSEABLE"
    OVERRIDE_OUT_OF_RANGE = "OVERRIDE_OUT_OF_RANGE"


class DayField(str, Enum):
    """Editable fields of a day row."""

    IN_TIME = "in_time"
    OUT_TIME = "out_time"
    OVERTIME = "overtime"
    SHORTFALL = "shortfall"
    REMARKS = "remarks"
