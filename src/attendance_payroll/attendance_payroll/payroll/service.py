from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..attendance.model import DayRecord
from ..attendance.service import AttendanceService
from ..common.datetime_utils import days_in_month
from ..common.validators import require_month
from ..core.exceptions import ValidationError
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import MonthlySummary


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: MonthlySummary


class PayrollReportService:
    def __init__(
        self,
        attendance: AttendanceService,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._attendance = attendance
        self._calculator = calculator or StandardPayrollCalculator()

    def summarize(self, days: Sequence[DayRecord], base_salary: float, *, year: int, month: int) -> MonthlySummary:
        """Summary for caller-held days; each date must fall in the month and appear once."""
        year, month = require_month(year, month)

        seen = set()
        for d in days:
            if (d.work_date.year, d.work_date.month) != (year, month):
                raise ValidationError(f"{d.work_date} is not in {year}-{month:02d}")
            if d.work_date in seen:
                raise ValidationError(f"{d.work_date} appears more than once")
            seen.add(d.work_date)

        return self._calculator.summarize(days, base_salary, days_in_month(year, month))

    def build_month_report(self, employee_id: str, year: int, month: int) -> ReportData:
        record = self._attendance.get_month(employee_id, year, month)
        summary = self._calculator.summarize(record.days, record.base_salary, record.days_in_month)

        rows = [
            {
                "work_date": d.work_date.strftime("%Y-%m-%d"),
                "in_time": d.in_time or "-",
                "out_time": d.out_time or "-",
                "overtime": f"{d.overtime_hours:.2f}",
                "shortfall": f"{d.shortfall_hours:.2f}",
                "status": d.classification.value,
                "remarks": d.remarks or "",
            }
            for d in record.days
        ]
        return ReportData(rows=rows, summary=summary)
