from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest

from src.attendance_payroll.attendance_payroll.attendance.calculator import DayCalculator
from src.attendance_payroll.attendance_payroll.attendance.model import Computed, DayRecord, Overridden
from src.attendance_payroll.attendance_payroll.attendance.policy import PayrollPolicy
from src.attendance_payroll.attendance_payroll.core.enums import DayClassification, DayField, WarningCode
from src.attendance_payroll.attendance_payroll.core.exceptions import ValidationError

SUNDAY = date(2026, 1, 4)
MONDAY = date(2026, 1, 5)


def _day(calculator: DayCalculator, work_date: date, in_time: str, out_time: str) -> DayRecord:
    return calculator.edit_times(DayRecord(work_date=work_date), in_time=in_time, out_time=out_time)


def test_sunday_hours_are_all_overtime(calculator):
    day = _day(calculator, SUNDAY, "08:00", "12:00")

    assert day.overtime == Computed(4.0)
    assert day.shortfall == Computed(0.0)
    assert day.classification == DayClassification.PRESENT


def test_weekday_exact_standard_window(calculator):
    day = _day(calculator, MONDAY, "09:00", "17:30")

    assert day.overtime_hours == 0.0
    assert day.shortfall_hours == 0.0
    assert day.classification == DayClassification.PRESENT
    assert day.warnings == ()


def test_weekday_early_and_late_is_capped_by_excess(calculator):
    day = _day(calculator, MONDAY, "08:30", "18:00")

    assert day.overtime_hours == 1.0
    assert day.shortfall_hours == 0.0


def test_weekday_short_day(calculator):
    day = _day(calculator, MONDAY, "10:00", "14:00")

    assert day.overtime_hours == 0.0
    assert day.shortfall_hours == 4.0


@pytest.mark.parametrize(
    "in_time, out_time, overtime, shortfall",
    [
        ("08:00", "17:00", 0.5, 0.0),  # 1h early, but only 30 min over the window
        ("07:00", "12:00", 0.0, 3.0),  # early arrival, short day: no excess to pay
        ("09:00", "18:20", 0.83, 0.0),
        ("09:30", "17:30", 0.0, 0.0),  # 8h exactly meets the shortfall baseline
        ("12:00", "12:00", 0.0, 8.0),
    ],
)
def test_weekday_rules(calculator, in_time, out_time, overtime, shortfall):
    day = _day(calculator, MONDAY, in_time, out_time)

    assert day.overtime_hours == overtime
    assert day.shortfall_hours == shortfall


def test_holiday_marker_suppresses_everything(calculator):
    day = _day(calculator, MONDAY, "H", "")

    assert day.classification == DayClassification.HOLIDAY
    assert (day.overtime_hours, day.shortfall_hours) == (0.0, 0.0)

    sunday = _day(calculator, SUNDAY, "08:00", "h")
    assert sunday.classification == DayClassification.HOLIDAY
    assert sunday.overtime_hours == 0.0


def test_blank_days(calculator):
    assert _day(calculator, MONDAY, "", "").classification == DayClassification.ABSENT
    assert _day(calculator, SUNDAY, "", "").classification == DayClassification.SUNDAY_OFF


def test_incomplete_entry_is_invalid_without_warning(calculator):
    day = _day(calculator, MONDAY, "09:00", "")

    assert day.classification == DayClassification.INVALID
    assert day.warnings == ()
    assert (day.overtime_hours, day.shortfall_hours) == (0.0, 0.0)


def test_malformed_time_is_zeroed_with_warning(calculator):
    day = _day(calculator, MONDAY, "9:00", "17:30")

    assert day.classification == DayClassification.INVALID
    assert (day.overtime_hours, day.shortfall_hours) == (0.0, 0.0)
    assert [(w.code, w.field) for w in day.warnings] == [(WarningCode.MALFORMED_TIME, DayField.IN_TIME)]


def test_malformed_time_on_sunday(calculator):
    day = _day(calculator, SUNDAY, "08:00", "noon")

    assert day.classification == DayClassification.SUNDAY_OFF
    assert day.warnings[0].field == DayField.OUT_TIME


def test_out_before_in_yields_zero_hours_and_warning(calculator):
    day = _day(calculator, MONDAY, "17:00", "09:00")

    assert (day.overtime_hours, day.shortfall_hours) == (0.0, 0.0)
    assert day.classification == DayClassification.PRESENT
    assert day.warnings[0].code == WarningCode.NEGATIVE_DURATION


def test_compute_day_is_idempotent(calculator):
    day = _day(calculator, MONDAY, "08:30", "18:00")
    day = calculator.override_shortfall(day, "x")

    assert calculator.compute_day(day) == calculator.compute_day(calculator.compute_day(day))


def test_override_survives_recompute_until_times_change(calculator):
    day = _day(calculator, MONDAY, "08:30", "18:00")

    day = calculator.override_overtime(day, "2.5")
    assert day.overtime == Overridden(2.5)
    assert calculator.compute_day(day).overtime == Overridden(2.5)

    day = calculator.edit_times(day, out_time="17:30")
    assert day.overtime == Computed(0.5)


def test_blank_override_returns_to_computed_value(calculator):
    day = calculator.override_overtime(_day(calculator, MONDAY, "08:30", "18:00"), 3)

    day = calculator.override_overtime(day, "")

    assert day.overtime == Computed(1.0)


def test_unparseable_override_is_zeroed_with_warning(calculator):
    day = calculator.override_overtime(_day(calculator, MONDAY, "08:30", "18:00"), "abc")

    assert day.overtime == Overridden(0.0)
    assert day.warnings[-1].code == WarningCode.OVERRIDE_UNPARSEABLE
    assert calculator.compute_day(day).warnings == day.warnings


@pytest.mark.parametrize("value", ["-1", 30, "24.5"])
def test_out_of_range_override_is_zeroed_with_warning(calculator, value):
    day = calculator.override_shortfall(_day(calculator, MONDAY, "10:00", "14:00"), value)

    assert day.shortfall == Overridden(0.0)
    assert day.warnings[-1].code == WarningCode.OVERRIDE_OUT_OF_RANGE
    assert day.warnings[-1].field == DayField.SHORTFALL


def test_time_edit_discards_override_warnings(calculator):
    day = calculator.override_overtime(_day(calculator, MONDAY, "08:30", "18:00"), "abc")

    day = calculator.edit_times(day, in_time="09:00")

    assert day.warnings == ()
    assert day.overtime == Computed(0.5)


def test_materialize_month(calculator):
    days = calculator.materialize_month(2026, 1)

    assert len(days) == 31
    assert [d.work_date.day for d in days] == list(range(1, 32))
    assert days[3].classification == DayClassification.SUNDAY_OFF
    assert days[4].classification == DayClassification.ABSENT
    assert all(d.overtime == Computed(0.0) for d in days)


def test_alternate_policy_window():
    calculator = DayCalculator(PayrollPolicy(work_start=8 * 60, work_end=16 * 60))

    day = _day(calculator, MONDAY, "08:00", "17:00")

    assert day.overtime_hours == 1.0
    assert day.shortfall_hours == 0.0


def test_policy_rejects_inverted_window():
    with pytest.raises(ValidationError):
        PayrollPolicy(work_start=600, work_end=540)


def test_policy_from_settings():
    policy = PayrollPolicy.from_settings(SimpleNamespace(WORK_START="08:00", WORK_END="16:30", DEFAULT_BASE_SALARY=9000))

    assert policy.standard_window_minutes == 510
    assert policy.default_base_salary == 9000.0
    assert policy.reference_hours_per_day == 8

    with pytest.raises(ValidationError):
        PayrollPolicy.from_settings(SimpleNamespace(WORK_START="9am"))
