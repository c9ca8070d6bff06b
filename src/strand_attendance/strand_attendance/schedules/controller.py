from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container
from ..timeparse.formatting import to_clock_label
from ..timeparse.normalizer import normalize_text


def _with_inputs(schedule) -> dict:
    # 24-hour values for <input type="time"> fields
    return {
        **schedule.to_dict(),
        "startInput": to_clock_label(normalize_text(schedule.start)),
        "endInput": to_clock_label(normalize_text(schedule.end)),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schedules", methods=["GET"], endpoint="api_schedules")
    def api_schedules():
        schedules = container.schedule_service.list_all()
        return jsonify({group: _with_inputs(schedule) for group, schedule in schedules.items()})

    @app.route("/api/schedules/<group>", methods=["PATCH"], endpoint="api_schedules_update")
    def api_schedules_update(group: str):
        data = request.get_json(silent=True) or {}
        try:
            schedule = container.schedule_service.update(
                group,
                start=data.get("start"),
                end=data.get("end"),
                grace_minutes=data.get("graceMinutes"),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "group": group, "schedule": schedule.to_dict()})

    @app.route("/api/schedules/<group>/reset", methods=["POST"], endpoint="api_schedules_reset")
    def api_schedules_reset(group: str):
        try:
            schedule = container.schedule_service.reset(group)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "group": group, "schedule": schedule.to_dict()})
