from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import StorageUnavailableError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="api_students")
    def api_students():
        roster = container.student_service.load_roster()
        return jsonify(
            {
                "students": [s.to_dict() for s in roster.students],
                "stats": container.student_service.directory_stats(roster.students),
                "loadError": roster.load_error,
            }
        )

    @app.route("/api/students", methods=["POST"], endpoint="api_students_register")
    def api_students_register():
        data = request.get_json(silent=True) or {}
        try:
            student = container.student_service.register(
                student_id=data.get("studentId", ""),
                first_name=data.get("firstName", ""),
                last_name=data.get("lastName", ""),
                strand=data.get("strand", ""),
                guardian_email=data.get("guardianEmail", ""),
                grade_level=data.get("gradeLevel"),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except StorageUnavailableError:
            return jsonify({"success": False, "message": "Unable to save the student. Please try again."}), 503

        return jsonify({"success": True, "student": student.to_dict()}), 201
