from __future__ import annotations

from typing import Optional, Sequence

from .base import PayrollCalculator
from ..model import MonthlySummary
from ...attendance.model import DayRecord
from ...attendance.policy import PayrollPolicy
from ...common.datetime_utils import is_blank, is_holiday_marker, is_sunday
from ...common.numbers import parse_number, round2


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: base + overtime pay - absent days - shortfall hours.

    The hourly rate is the daily rate spread over the policy's reference
    day (8h), not over the 8.5h overtime window.
    """

    def __init__(self, policy: Optional[PayrollPolicy] = None):
        self._policy = policy or PayrollPolicy()

    def summarize(self, days: Sequence[DayRecord], base_salary: float, days_in_month: int) -> MonthlySummary:
        base_salary = parse_number(base_salary) or 0.0

        daily_rate = 0.0
        hourly_rate = 0.0
        if base_salary > 0 and days_in_month > 0:
            daily_rate = base_salary / days_in_month
            hourly_rate = round2(daily_rate / self._policy.reference_hours_per_day)

        present = 0
        absent = 0
        overtime_hours = 0.0
        shortfall_hours = 0.0
        for d in days:
            verdict = self.attendance_of(d)
            if verdict is True:
                present += 1
            elif verdict is False:
                absent += 1

            overtime_hours += max(0.0, d.overtime_hours)
            shortfall_hours += max(0.0, d.shortfall_hours)

        overtime_hours = round2(overtime_hours)
        shortfall_hours = round2(shortfall_hours)

        overtime_amount = overtime_hours * hourly_rate
        absent_deduction = absent * daily_rate
        shortfall_deduction = shortfall_hours * hourly_rate
        total = base_salary + overtime_amount - absent_deduction - shortfall_deduction

        return MonthlySummary(
            base_salary=base_salary,
            days_in_month=int(days_in_month),
            present_days=present,
            absent_days=absent,
            total_overtime_hours=overtime_hours,
            total_shortfall_hours=shortfall_hours,
            daily_rate=round2(daily_rate),
            hourly_rate=hourly_rate,
            overtime_amount=round2(overtime_amount),
            absent_deduction=round2(absent_deduction),
            shortfall_deduction=round2(shortfall_deduction),
            total_payable=round2(total),
        )

    @staticmethod
    def attendance_of(day: DayRecord) -> Optional[bool]:
        """True when present, False when absent, None for holidays."""
        if is_holiday_marker(day.in_time) or is_holiday_marker(day.out_time):
            return None
        if is_sunday(day.work_date):
            return True
        return not is_blank(day.in_time)
