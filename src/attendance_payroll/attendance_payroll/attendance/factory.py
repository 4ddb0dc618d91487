from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import is_holiday_marker, is_sunday
from .model import DayRecord
from .strategies.base import DayStrategy
from .strategies.holiday_strategy import HolidayStrategy
from .strategies.sunday_strategy import SundayStrategy
from .strategies.weekday_strategy import WeekdayStrategy


@dataclass
class DayStrategyFactory:
    """Factory Pattern: choose the strategy for a day. Holiday wins over Sunday."""

    def for_day(self, record: DayRecord) -> DayStrategy:
        if is_holiday_marker(record.in_time) or is_holiday_marker(record.out_time):
            return HolidayStrategy()
        if is_sunday(record.work_date):
            return SundayStrategy()
        return WeekdayStrategy()
