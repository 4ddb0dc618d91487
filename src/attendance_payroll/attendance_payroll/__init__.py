"""Attendance Payroll package.

Feature modules (attendance, payroll) each carry a pure calculation layer,
a service layer and a thin Flask controller.
"""
