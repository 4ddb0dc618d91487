from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class MonthlySummary:
    """Derived payroll figures for one month; recomputed on every read."""

    base_salary: float
    days_in_month: int
    present_days: int
    absent_days: int
    total_overtime_hours: float
    total_shortfall_hours: float
    daily_rate: float
    hourly_rate: float
    overtime_amount: float
    absent_deduction: float
    shortfall_deduction: float
    total_payable: float

    def to_dict(self) -> dict:
        return asdict(self)
