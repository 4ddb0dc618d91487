from __future__ import annotations

from ...common.datetime_utils import is_blank
from ...core.enums import DayClassification
from ..model import DayRecord
from ..policy import PayrollPolicy
from .base import DayDecision, DayStrategy, malformed_time_warnings, negative_duration_warning, resolve_span


class WeekdayStrategy(DayStrategy):
    """Regular working day measured against the standard window.

    Shortfall is the deficit against the shortfall baseline. Overtime is the
    time spent before ``work_start`` plus after ``work_end``, but never more
    than the part of the whole day that exceeds the standard window.
    """

    def decide(self, record: DayRecord, policy: PayrollPolicy) -> DayDecision:
        span = resolve_span(record)
        if span is None:
            if is_blank(record.in_time) and is_blank(record.out_time):
                return DayDecision(classification=DayClassification.ABSENT)
            return DayDecision(classification=DayClassification.INVALID, warnings=malformed_time_warnings(record))

        worked = span.worked_minutes
        if worked < 0:
            return DayDecision(classification=DayClassification.PRESENT, warnings=(negative_duration_warning(record),))

        shortfall = max(0, policy.shortfall_baseline_minutes - worked)

        early = max(0, policy.work_start - span.in_minutes)
        late = max(0, span.out_minutes - policy.work_end)
        excess = max(0, worked - policy.standard_window_minutes)
        overtime = min(early + late, excess)

        return DayDecision(
            classification=DayClassification.PRESENT,
            overtime_minutes=overtime,
            shortfall_minutes=shortfall,
        )
