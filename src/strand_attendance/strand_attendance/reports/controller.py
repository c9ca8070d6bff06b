from __future__ import annotations

from flask import Flask, current_app, jsonify, request

from ..common.datetime_utils import require_iso_date
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/daily", methods=["GET"], endpoint="api_daily_report")
    def api_daily_report():
        try:
            selected_date = require_iso_date(request.args.get("date") or current_app.config["DEFAULT_REPORT_DATE"])
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        report = container.report_service.build_daily_report(date=selected_date)
        return jsonify({"success": True, **report})
