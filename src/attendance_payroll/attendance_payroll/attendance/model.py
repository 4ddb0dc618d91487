from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

from ..common.datetime_utils import days_in_month
from ..core.enums import DayClassification, DayField, WarningCode


@dataclass(frozen=True)
class Computed:
    """Hours derived from the day's in/out times."""

    hours: float = 0.0

    @property
    def overridden(self) -> bool:
        return False


@dataclass(frozen=True)
class Overridden:
    """Hours typed in by a user; kept until the day's times change."""

    hours: float = 0.0

    @property
    def overridden(self) -> bool:
        return True


Hours = Union[Computed, Overridden]


@dataclass(frozen=True)
class DayWarning:
    code: WarningCode
    field: DayField
    message: str

    def to_dict(self) -> dict:
        return {"code": self.code.value, "field": self.field.value, "message": self.message}


@dataclass(frozen=True)
class DayRecord:
    """One calendar day of attendance for an (employee, month)."""

    work_date: date
    in_time: str = ""
    out_time: str = ""
    overtime: Hours = Computed()
    shortfall: Hours = Computed()
    remarks: str = ""
    classification: DayClassification = DayClassification.UNSET
    warnings: tuple[DayWarning, ...] = ()

    @property
    def overtime_hours(self) -> float:
        return self.overtime.hours

    @property
    def shortfall_hours(self) -> float:
        return self.shortfall.hours

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.strftime("%Y-%m-%d"),
            "in_time": self.in_time,
            "out_time": self.out_time,
            "overtime_hours": self.overtime.hours,
            "overtime_overridden": self.overtime.overridden,
            "shortfall_hours": self.shortfall.hours,
            "shortfall_overridden": self.shortfall.overridden,
            "remarks": self.remarks,
            "classification": self.classification.value,
            "warnings": [w.to_dict() for w in self.warnings],
        }


@dataclass(frozen=True)
class MonthRecord:
    """All days of one employee's month plus the salary they are paid against."""

    employee_id: str
    year: int
    month: int
    days: tuple[DayRecord, ...]
    base_salary: float

    @property
    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "year": self.year,
            "month": self.month,
            "base_salary": self.base_salary,
            "days": [d.to_dict() for d in self.days],
        }
