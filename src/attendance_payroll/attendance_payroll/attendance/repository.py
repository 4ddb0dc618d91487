from __future__ import annotations

from typing import Optional, Protocol

from .model import MonthRecord


class MonthRepository(Protocol):
    def get(self, *, employee_id: str, year: int, month: int) -> Optional[MonthRecord]:
        raise NotImplementedError

    def save(self, record: MonthRecord) -> None:
        """Create or replace the month keyed by (employee_id, year, month)."""

        raise NotImplementedError

    def delete_for_employee(self, *, employee_id: str) -> int:
        """Drop every month owned by an employee.

        Returns the number of months removed.
        """

        raise NotImplementedError
