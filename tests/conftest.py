from __future__ import annotations

import pytest

from src.attendance_payroll.attendance_payroll.attendance.calculator import DayCalculator
from src.attendance_payroll.attendance_payroll.attendance.memory_repository import InMemoryMonthRepository
from src.attendance_payroll.attendance_payroll.attendance.policy import PayrollPolicy
from src.attendance_payroll.attendance_payroll.attendance.service import AttendanceService
from src.attendance_payroll.attendance_payroll.main import create_app


@pytest.fixture
def policy() -> PayrollPolicy:
    return PayrollPolicy()


@pytest.fixture
def calculator(policy) -> DayCalculator:
    return DayCalculator(policy)


@pytest.fixture
def attendance_service(calculator) -> AttendanceService:
    return AttendanceService(InMemoryMonthRepository(), calculator=calculator)


@pytest.fixture
def client():
    app = create_app("config.testing")
    return app.test_client()
