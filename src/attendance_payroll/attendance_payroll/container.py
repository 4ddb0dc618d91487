from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.calculator import DayCalculator
from .attendance.factory import DayStrategyFactory
from .attendance.memory_repository import InMemoryMonthRepository
from .attendance.policy import PayrollPolicy
from .attendance.service import AttendanceService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import PayrollReportService


@dataclass(frozen=True)
class Container:
    policy: PayrollPolicy

    months_repo: InMemoryMonthRepository

    day_calculator: DayCalculator
    payroll_calculator: StandardPayrollCalculator

    attendance_service: AttendanceService
    payroll_report_service: PayrollReportService


def build_container(*, policy: Optional[PayrollPolicy] = None) -> Container:
    policy = policy or PayrollPolicy()

    months_repo = InMemoryMonthRepository()

    day_calculator = DayCalculator(policy, strategy_factory=DayStrategyFactory())
    payroll_calculator = StandardPayrollCalculator(policy)

    attendance_service = AttendanceService(
        months_repo,
        calculator=day_calculator,
        default_base_salary=policy.default_base_salary,
    )
    payroll_report_service = PayrollReportService(attendance_service, calculator=payroll_calculator)

    return Container(
        policy=policy,
        months_repo=months_repo,
        day_calculator=day_calculator,
        payroll_calculator=payroll_calculator,
        attendance_service=attendance_service,
        payroll_report_service=payroll_report_service,
    )
