from __future__ import annotations

import calendar
import re
from datetime import date, datetime
from typing import Optional

from ..core.constants import HOLIDAY_MARKER

_HHMM = re.compile(r"^([0-9]{2}):([0-9]{2})$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def is_blank(token: Optional[str]) -> bool:
    return token is None or not str(token).strip()


def is_holiday_marker(token: Optional[str]) -> bool:
    return not is_blank(token) and str(token).strip().upper() == HOLIDAY_MARKER


def parse_time(token: Optional[str]) -> Optional[int]:
    """Parse an ``HH:MM`` token into minutes since midnight.

    Returns None for anything that is not a well-formed 24-hour time,
    including blanks and the holiday marker. Never raises.
    """
    if is_blank(token) or is_holiday_marker(token):
        return None

    match = _HHMM.match(str(token).strip())
    if not match:
        return None

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


def format_minutes(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def is_sunday(value: date) -> bool:
    # A calendar date carries no timezone, so the weekday cannot drift.
    return value.isoweekday() == 7


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_dates(year: int, month: int) -> list[date]:
    return [date(year, month, day) for day in range(1, days_in_month(year, month) + 1)]
