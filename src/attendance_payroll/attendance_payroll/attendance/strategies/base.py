from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...common.datetime_utils import is_blank, parse_time
from ...core.enums import DayClassification, DayField, WarningCode
from ..model import DayRecord, DayWarning
from ..policy import PayrollPolicy


@dataclass(frozen=True)
class DayDecision:
    classification: DayClassification
    overtime_minutes: int = 0
    shortfall_minutes: int = 0
    warnings: tuple[DayWarning, ...] = ()


@dataclass(frozen=True)
class WorkedSpan:
    in_minutes: int
    out_minutes: int

    @property
    def worked_minutes(self) -> int:
        return self.out_minutes - self.in_minutes


def malformed_time_warnings(record: DayRecord) -> tuple[DayWarning, ...]:
    """Warnings for tokens that were typed in but are not HH:MM times."""
    warnings = []
    for day_field, token in ((DayField.IN_TIME, record.in_time), (DayField.OUT_TIME, record.out_time)):
        if not is_blank(token) and parse_time(token) is None:
            warnings.append(
                DayWarning(
                    code=WarningCode.MALFORMED_TIME,
                    field=day_field,
                    message=f"{token!r} is not a HH:MM time; day counted as having no entry",
                )
            )
    return tuple(warnings)


def resolve_span(record: DayRecord) -> Optional[WorkedSpan]:
    in_minutes = parse_time(record.in_time)
    out_minutes = parse_time(record.out_time)
    if in_minutes is None or out_minutes is None:
        return None
    return WorkedSpan(in_minutes=in_minutes, out_minutes=out_minutes)


def negative_duration_warning(record: DayRecord) -> DayWarning:
    return DayWarning(
        code=WarningCode.NEGATIVE_DURATION,
        field=DayField.OUT_TIME,
        message=f"out time {record.out_time} is before in time {record.in_time}; no hours derived",
    )


class DayStrategy(ABC):
    """Strategy Pattern: encapsulate how one kind of day is classified and measured."""

    @abstractmethod
    def decide(self, record: DayRecord, policy: PayrollPolicy) -> DayDecision:
        raise NotImplementedError
