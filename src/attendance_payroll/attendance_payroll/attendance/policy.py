from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import format_minutes, parse_time
from ..common.validators import require_positive_number, require_time
from ..core import constants
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class PayrollPolicy:
    """Fixed working-time rules the calculators are evaluated against.

    Times are minutes since midnight. ``standard_window_minutes`` bounds
    weekday overtime; ``shortfall_baseline_minutes`` is the day length a
    weekday is measured against for deductions; ``reference_hours_per_day``
    turns a daily rate into the hourly rate.
    """

    work_start: int = parse_time(constants.DEFAULT_WORK_START)
    work_end: int = parse_time(constants.DEFAULT_WORK_END)
    shortfall_baseline_minutes: int = constants.DEFAULT_SHORTFALL_BASELINE_MINUTES
    reference_hours_per_day: float = constants.DEFAULT_REFERENCE_HOURS_PER_DAY
    default_base_salary: float = constants.DEFAULT_BASE_SALARY

    def __post_init__(self) -> None:
        if self.work_end <= self.work_start:
            raise ValidationError(
                f"work_end ({format_minutes(self.work_end)}) must be after work_start ({format_minutes(self.work_start)})"
            )
        if self.shortfall_baseline_minutes < 0:
            raise ValidationError("shortfall_baseline_minutes must not be negative")
        if self.reference_hours_per_day <= 0:
            raise ValidationError("reference_hours_per_day must be positive")
        if self.default_base_salary < 0:
            raise ValidationError("default_base_salary must not be negative")

    @property
    def standard_window_minutes(self) -> int:
        return self.work_end - self.work_start

    @classmethod
    def from_settings(cls, settings) -> "PayrollPolicy":
        """Build a policy from a settings module; missing names fall back to defaults."""
        return cls(
            work_start=require_time(getattr(settings, "WORK_START", constants.DEFAULT_WORK_START), "WORK_START"),
            work_end=require_time(getattr(settings, "WORK_END", constants.DEFAULT_WORK_END), "WORK_END"),
            shortfall_baseline_minutes=int(
                getattr(settings, "SHORTFALL_BASELINE_MINUTES", constants.DEFAULT_SHORTFALL_BASELINE_MINUTES)
            ),
            reference_hours_per_day=require_positive_number(
                getattr(settings, "REFERENCE_HOURS_PER_DAY", constants.DEFAULT_REFERENCE_HOURS_PER_DAY),
                "REFERENCE_HOURS_PER_DAY",
            ),
            default_base_salary=float(getattr(settings, "DEFAULT_BASE_SALARY", constants.DEFAULT_BASE_SALARY)),
        )
