from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import DayRecord
from ..model import MonthlySummary


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def summarize(self, days: Sequence[DayRecord], base_salary: float, days_in_month: int) -> MonthlySummary:
        raise NotImplementedError
