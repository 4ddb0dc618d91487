from __future__ import annotations

from ...core.enums import DayClassification
from ..model import DayRecord
from ..policy import PayrollPolicy
from .base import DayDecision, DayStrategy, malformed_time_warnings, negative_duration_warning, resolve_span


class SundayStrategy(DayStrategy):
    """Rest day: every worked minute is overtime, shortfall never applies."""

    def decide(self, record: DayRecord, policy: PayrollPolicy) -> DayDecision:
        span = resolve_span(record)
        if span is None:
            return DayDecision(classification=DayClassification.SUNDAY_OFF, warnings=malformed_time_warnings(record))

        if span.worked_minutes < 0:
            return DayDecision(classification=DayClassification.PRESENT, warnings=(negative_duration_warning(record),))

        return DayDecision(classification=DayClassification.PRESENT, overtime_minutes=span.worked_minutes)
