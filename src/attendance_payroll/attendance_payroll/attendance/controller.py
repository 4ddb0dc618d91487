from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_json_object
from ..core.exceptions import ValidationError
from ..container import Container
from .model import DayRecord


def register(app: Flask, container: Container) -> None:
    def _parse_date(value: str):
        try:
            return parse_iso_date(str(value or ""))
        except ValueError:
            raise ValidationError(f"Invalid date: {value!r}") from None

    @app.route("/api/days/compute", methods=["POST"], endpoint="api_compute_day")
    def api_compute_day():
        data = require_json_object(request.get_json(silent=True))
        calculator = container.day_calculator

        day = DayRecord(work_date=_parse_date(data.get("date")))
        day = calculator.edit_times(day, in_time=data.get("in_time") or "", out_time=data.get("out_time") or "")
        if "overtime" in data:
            day = calculator.override_overtime(day, data.get("overtime"))
        if "shortfall" in data:
            day = calculator.override_shortfall(day, data.get("shortfall"))

        return jsonify({"success": True, "day": day.to_dict()}), 200

    @app.route("/api/employees/<employee_id>/months/<int:year>/<int:month>", methods=["GET"], endpoint="api_month")
    def api_month(employee_id: str, year: int, month: int):
        record = container.attendance_service.get_month(employee_id, year, month)
        rows = container.attendance_service.month_rows_ui(employee_id, year, month)
        return jsonify({"success": True, "month": record.to_dict(), "rows": rows}), 200

    @app.route(
        "/api/employees/<employee_id>/months/<int:year>/<int:month>/days/<work_date>",
        methods=["PATCH"],
        endpoint="api_edit_day",
    )
    def api_edit_day(employee_id: str, year: int, month: int, work_date: str):
        data = require_json_object(request.get_json(silent=True))
        if not data:
            raise ValidationError("Nothing to update")

        day = container.attendance_service.edit_day_fields(
            employee_id, year, month, work_date=_parse_date(work_date), changes=data
        )
        return jsonify({"success": True, "day": day.to_dict()}), 200

    @app.route(
        "/api/employees/<employee_id>/months/<int:year>/<int:month>/salary",
        methods=["PUT"],
        endpoint="api_set_salary",
    )
    def api_set_salary(employee_id: str, year: int, month: int):
        data = require_json_object(request.get_json(silent=True))
        record = container.attendance_service.set_base_salary(employee_id, year, month, data.get("base_salary"))
        return jsonify({"success": True, "base_salary": record.base_salary}), 200

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="api_delete_employee")
    def api_delete_employee(employee_id: str):
        removed = container.attendance_service.delete_employee(employee_id)
        return jsonify({"success": True, "deleted_months": removed}), 200
