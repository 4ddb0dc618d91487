from __future__ import annotations

import threading
from typing import Optional

from .model import MonthRecord


class InMemoryMonthRepository:
    """Process-local month store keyed by (employee_id, year, month)."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._months: dict[tuple[str, int, int], MonthRecord] = {}

    def get(self, *, employee_id: str, year: int, month: int) -> Optional[MonthRecord]:
        with self._lock:
            return self._months.get((employee_id, int(year), int(month)))

    def save(self, record: MonthRecord) -> None:
        with self._lock:
            self._months[(record.employee_id, record.year, record.month)] = record

    def delete_for_employee(self, *, employee_id: str) -> int:
        with self._lock:
            keys = [k for k in self._months if k[0] == employee_id]
            for k in keys:
                del self._months[k]
            return len(keys)
