"""Example: drive the service layer directly (no Flask).

Fills a few days of January 2026 and prints the monthly summary.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.attendance_payroll.attendance_payroll.attendance.policy import PayrollPolicy
from src.attendance_payroll.attendance_payroll.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(policy=PayrollPolicy.from_settings(settings))
    attendance = container.attendance_service

    attendance.edit_day("emp-1", 2026, 1, work_date=date(2026, 1, 5), field="in_time", value="08:30")
    attendance.edit_day("emp-1", 2026, 1, work_date=date(2026, 1, 5), field="out_time", value="18:00")
    attendance.edit_day("emp-1", 2026, 1, work_date=date(2026, 1, 6), field="in_time", value="H")

    report = container.payroll_report_service.build_month_report("emp-1", 2026, 1)
    print(report.summary.to_dict())


if __name__ == "__main__":
    main()
