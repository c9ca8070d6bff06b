from __future__ import annotations

from flask import Flask, current_app, jsonify, request

from ..common.datetime_utils import require_iso_date
from ..core.constants import ALL_GROUPS
from ..core.enums import TimeField
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _parse_time_field(value: str | None) -> TimeField | None:
        if not value or value == "none":
            return None
        try:
            return TimeField(value)
        except ValueError:
            raise ValidationError(f"Unknown time field: {value!r}") from None

    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance")
    def api_attendance():
        try:
            selected_date = require_iso_date(request.args.get("date") or current_app.config["DEFAULT_REPORT_DATE"])
            data = container.report_service.build_dashboard(
                date=selected_date,
                group=request.args.get("group") or ALL_GROUPS,
                search=request.args.get("search", ""),
                time_field=_parse_time_field(request.args.get("time_field")),
                time_value=request.args.get("time_value"),
                only_missing_checkout=request.args.get("missing_checkout") in {"1", "true", "yes"},
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify(
            {
                "success": True,
                "date": selected_date,
                "rows": data.rows,
                "summary": data.summary.to_dict(),
                "loadError": data.load_error,
            }
        )
