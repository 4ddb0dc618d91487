"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

HOLIDAY_MARKER = "H"

DEFAULT_WORK_START = "09:00"
DEFAULT_WORK_END = "17:30"
DEFAULT_SHORTFALL_BASELINE_MINUTES = 8 * 60
DEFAULT_REFERENCE_HOURS_PER_DAY = 8
DEFAULT_BASE_SALARY = 8500.0

MAX_OVERRIDE_HOURS = 24.0
