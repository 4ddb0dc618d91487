from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.datetime_utils import is_sunday
from ..common.numbers import parse_number
from ..common.validators import require_month
from ..core.enums import DayClassification, DayField
from ..core.exceptions import ValidationError
from .calculator import DayCalculator
from .model import DayRecord, MonthRecord
from .repository import MonthRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        months: MonthRepository,
        *,
        calculator: Optional[DayCalculator] = None,
        default_base_salary: Optional[float] = None,
    ):
        self._months = months
        self._calculator = calculator or DayCalculator()
        if default_base_salary is None:
            default_base_salary = self._calculator.policy.default_base_salary
        self._default_base_salary = float(default_base_salary)

    def get_month(self, employee_id: str, year: int, month: int) -> MonthRecord:
        """Stored month, or a freshly materialized one (saved before returning)."""
        employee_id = self._require_employee(employee_id)
        year, month = require_month(year, month)

        existing = self._months.get(employee_id=employee_id, year=year, month=month)
        if existing:
            return existing

        record = MonthRecord(
            employee_id=employee_id,
            year=year,
            month=month,
            days=tuple(self._calculator.materialize_month(year, month)),
            base_salary=self._default_base_salary,
        )
        self._months.save(record)
        logger.info("materialized %s-%02d for employee %s", year, month, employee_id)
        return record

    def edit_day(self, employee_id: str, year: int, month: int, *, work_date: date, field: str, value) -> DayRecord:
        return self.edit_day_fields(employee_id, year, month, work_date=work_date, changes={field: value})

    def edit_day_fields(self, employee_id: str, year: int, month: int, *, work_date: date, changes: dict) -> DayRecord:
        """Apply several field edits to one day and store the month once.

        Every field name is checked before anything changes. Times are applied
        before overrides so an override in the same edit survives the recompute.
        """
        if not isinstance(changes, dict) or not changes:
            raise ValidationError("Nothing to update")

        parsed: dict[DayField, object] = {}
        for name, value in changes.items():
            try:
                parsed[DayField(name)] = value
            except ValueError:
                raise ValidationError(f"Unknown day field: {name!r}") from None

        record = self.get_month(employee_id, year, month)
        index = self._day_index(record, work_date)
        day = record.days[index]

        if DayField.IN_TIME in parsed or DayField.OUT_TIME in parsed:
            day = self._calculator.edit_times(
                day,
                in_time=self._token(parsed[DayField.IN_TIME]) if DayField.IN_TIME in parsed else None,
                out_time=self._token(parsed[DayField.OUT_TIME]) if DayField.OUT_TIME in parsed else None,
            )
        if DayField.OVERTIME in parsed:
            day = self._calculator.override_overtime(day, parsed[DayField.OVERTIME])
        if DayField.SHORTFALL in parsed:
            day = self._calculator.override_shortfall(day, parsed[DayField.SHORTFALL])
        if DayField.REMARKS in parsed:
            day = replace(day, remarks=self._token(parsed[DayField.REMARKS]))

        days = record.days[:index] + (day,) + record.days[index + 1 :]
        self._months.save(replace(record, days=days))
        return day

    def set_base_salary(self, employee_id: str, year: int, month: int, value) -> MonthRecord:
        salary = parse_number(value)
        if salary is None:
            salary = 0.0
        if salary < 0:
            logger.warning("negative base salary %s for employee %s ignored", salary, employee_id)
            salary = 0.0

        record = replace(self.get_month(employee_id, year, month), base_salary=salary)
        self._months.save(record)
        return record

    def delete_employee(self, employee_id: str) -> int:
        removed = self._months.delete_for_employee(employee_id=self._require_employee(employee_id))
        logger.info("deleted %d month(s) for employee %s", removed, employee_id)
        return removed

    def month_rows_ui(self, employee_id: str, year: int, month: int) -> list[dict]:
        record = self.get_month(employee_id, year, month)
        return [self._to_ui(d) for d in record.days]

    @staticmethod
    def _require_employee(employee_id: str) -> str:
        if employee_id is None or not str(employee_id).strip():
            raise ValidationError("Employee id is required")
        return str(employee_id).strip()

    @staticmethod
    def _token(value) -> str:
        return "" if value is None else str(value)

    @staticmethod
    def _day_index(record: MonthRecord, work_date: date) -> int:
        for i, day in enumerate(record.days):
            if day.work_date == work_date:
                return i
        raise ValidationError(f"{work_date} is not in {record.year}-{record.month:02d}")

    def _to_ui(self, d: DayRecord) -> dict:
        label = {
            DayClassification.UNSET: "-",
            DayClassification.HOLIDAY: "Holiday",
            DayClassification.SUNDAY_OFF: "Sunday",
            DayClassification.PRESENT: "Present",
            DayClassification.ABSENT: "Absent",
            DayClassification.INVALID: "Check entry",
        }.get(d.classification, d.classification.value)

        return {
            "date": d.work_date.strftime("%d/%m/%y"),
            "in_time": d.in_time,
            "out_time": d.out_time,
            "overtime": f"{d.overtime_hours:.2f}",
            "shortfall": f"{d.shortfall_hours:.2f}",
            "remarks": d.remarks,
            "status": label,
            "is_sunday": is_sunday(d.work_date),
        }
