from __future__ import annotations

from flask import Flask, jsonify, request

from ..attendance.model import DayRecord
from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_json_object
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _load_days(items: list) -> list[DayRecord]:
        calculator = container.day_calculator
        days = []
        for item in items:
            if not isinstance(item, dict):
                raise ValidationError("Each day must be an object")
            try:
                work_date = parse_iso_date(str(item.get("date") or ""))
            except ValueError:
                raise ValidationError(f"Invalid date: {item.get('date')!r}") from None
            day = calculator.edit_times(
                DayRecord(work_date=work_date, remarks=item.get("remarks") or ""),
                in_time=item.get("in_time") or "",
                out_time=item.get("out_time") or "",
            )
            if "overtime" in item:
                day = calculator.override_overtime(day, item["overtime"])
            if "shortfall" in item:
                day = calculator.override_shortfall(day, item["shortfall"])
            days.append(day)
        return days

    @app.route(
        "/api/employees/<employee_id>/months/<int:year>/<int:month>/summary",
        methods=["GET"],
        endpoint="api_month_summary",
    )
    def api_month_summary(employee_id: str, year: int, month: int):
        report = container.payroll_report_service.build_month_report(employee_id, year, month)
        return jsonify({"success": True, "rows": report.rows, "summary": report.summary.to_dict()}), 200

    @app.route("/api/summary/compute", methods=["POST"], endpoint="api_compute_summary")
    def api_compute_summary():
        data = require_json_object(request.get_json(silent=True))
        try:
            year = int(data.get("year"))
            month = int(data.get("month"))
        except (TypeError, ValueError, OverflowError):
            raise ValidationError("year and month are required") from None

        items = data.get("days") or []
        if not isinstance(items, list):
            raise ValidationError("days must be a list")
        days = _load_days(items)
        base_salary = data.get("base_salary", container.policy.default_base_salary)
        summary = container.payroll_report_service.summarize(days, base_salary, year=year, month=month)
        return jsonify({"success": True, "summary": summary.to_dict()}), 200
