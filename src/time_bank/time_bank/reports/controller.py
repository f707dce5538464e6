from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import require_date, require_month
from ..container import Container
from ..core.exceptions import MalformedPunchError, ValidationError
from .presenter import alert_rows, frequency_rows, summarize, time_bank_rows, week_rows

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(MalformedPunchError)
    def handle_malformed_punch(e: MalformedPunchError):
        logger.error("Malformed punch, report aborted: %s (record=%r)", e, e.record)
        return jsonify({"success": False, "message": str(e)}), 422

    def employee_filter():
        value = (request.args.get("employee_id") or "").strip()
        return value or None

    @app.route("/api/time-bank", methods=["GET"], endpoint="api_time_bank")
    def api_time_bank():
        month = require_month(request.args.get("month"))
        report = container.time_bank_service.build_monthly_report(month=month, employee_id=employee_filter())

        rows = time_bank_rows(report)
        for row, tb in zip(rows, report.time_banks):
            row["weeks"] = week_rows(tb)

        return jsonify(
            {
                "success": True,
                "month": report.month.strftime("%Y-%m"),
                "time_bank": rows,
                "alerts": alert_rows(report.alerts),
                "summary": summarize(report),
            }
        )

    @app.route("/api/time-bank/alerts", methods=["GET"], endpoint="api_time_bank_alerts")
    def api_time_bank_alerts():
        alerts = container.time_bank_service.build_current_alerts(employee_id=employee_filter())
        return jsonify({"success": True, "alerts": alert_rows(alerts)})

    @app.route("/api/frequency", methods=["GET"], endpoint="api_frequency")
    def api_frequency():
        start = require_date(request.args.get("start"), "start")
        end = require_date(request.args.get("end"), "end")
        stats = container.frequency_service.build(start=start, end=end, employee_id=employee_filter())
        return jsonify({"success": True, "frequency": frequency_rows(stats)})
