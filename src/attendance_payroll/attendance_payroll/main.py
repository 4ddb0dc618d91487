from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .attendance.policy import PayrollPolicy
from .common.datetime_utils import format_minutes
from .container import build_container
from .core.exceptions import ValidationError
from .payroll.controller import register as register_payroll


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    policy = PayrollPolicy.from_settings(settings)
    app.logger.info(
        "[attendance-payroll] settings=%s window=%s-%s base_salary=%s",
        settings_module,
        format_minutes(policy.work_start),
        format_minutes(policy.work_end),
        policy.default_base_salary,
    )

    container = build_container(policy=policy)
    app.extensions["attendance_payroll"] = container

    register_attendance(app, container)
    register_payroll(app, container)

    @app.errorhandler(ValidationError)
    def on_validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    return app
