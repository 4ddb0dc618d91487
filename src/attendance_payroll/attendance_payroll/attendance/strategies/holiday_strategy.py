from __future__ import annotations

from ...core.enums import DayClassification
from ..model import DayRecord
from ..policy import PayrollPolicy
from .base import DayDecision, DayStrategy


class HolidayStrategy(DayStrategy):
    """Day marked "H": excused, no overtime and no shortfall."""

    def decide(self, record: DayRecord, policy: PayrollPolicy) -> DayDecision:
        return DayDecision(classification=DayClassification.HOLIDAY)
