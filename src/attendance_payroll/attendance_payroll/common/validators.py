from __future__ import annotations

from ..core.exceptions import ValidationError
from .datetime_utils import parse_time
from .numbers import parse_number


def require_time(value: str, field_name: str) -> int:
    minutes = parse_time(value)
    if minutes is None:
        raise ValidationError(f"{field_name} must be a HH:MM time, got {value!r}")
    return minutes


def require_positive_number(value, field_name: str) -> float:
    number = parse_number(value)
    if number is None or number <= 0:
        raise ValidationError(f"{field_name} must be a positive number, got {value!r}")
    return number


def require_month(year: int, month: int) -> tuple[int, int]:
    if int(month) < 1 or int(month) > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month!r}")
    if int(year) < 1 or int(year) > 9999:
        raise ValidationError(f"year is out of range: {year!r}")
    return int(year), int(month)


def require_json_object(data) -> dict:
    """A missing body counts as empty; anything but a JSON object is rejected."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
