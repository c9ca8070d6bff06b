from __future__ import annotations

import pytest

from src.strand_attendance.strand_attendance.attendance.model import AttendanceRecord
from src.strand_attendance.strand_attendance.container import build_container
from src.strand_attendance.strand_attendance.main import create_app
from src.strand_attendance.strand_attendance.students.model import Student


class InMemoryStudentRepo:
    def __init__(self, students):
        self._students = {s.student_id: s for s in students}

    def list_with_latest_attendance(self):
        return list(self._students.values())

    def get_by_student_id(self, student_id):
        return self._students.get(student_id)

    def create(self, student):
        self._students[student.student_id] = student
        return len(self._students)


def _student(student_id, first, last, strand, time_in, time_out=None):
    latest = AttendanceRecord.from_mapping(
        {"studentId": student_id, "firstName": first, "lastName": last, "strand": strand,
         "date": "2025-08-23", "timeIn": time_in, "timeOut": time_out}
    )
    return Student(student_id, first, last, strand, "Grade 11", f"{first.lower()}@example.com", latest)


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    repo = InMemoryStudentRepo(
        [
            _student("2025-0001", "Andrea", "Santos", "STEM", "07:52 AM"),
            _student("2025-0002", "Miguel", "Reyes", "STEM", "08:12 AM"),
        ]
    )
    app = create_app(build_container(students_repo=repo))
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_attendance_defaults_to_configured_date(client):
    res = client.get("/api/attendance")
    assert res.status_code == 200

    body = res.get_json()
    assert body["date"] == "2025-08-23"
    assert [r["statusLabel"] for r in body["rows"]] == ["Late - On campus", "On time - On campus"]
    assert body["summary"]["onTime"] == 1
    assert body["summary"]["late"] == 1


def test_attendance_rejects_bad_date_and_time_field(client):
    assert client.get("/api/attendance?date=23-08-2025").status_code == 400
    assert client.get("/api/attendance?time_field=lunch&time_value=12:00").status_code == 400


def test_daily_report(client):
    body = client.get("/api/reports/daily?date=2025-08-23").get_json()

    assert body["success"] is True
    assert body["summary"]["total"] == 2
    assert body["summary"]["averageTimeInLabel"] == "08:02 AM"
    assert body["groupRows"][0] == {"group": "STEM", "onTime": 1, "late": 1}


def test_schedule_override_and_reset(client):
    res = client.patch("/api/schedules/STEM", json={"start": "08:30 AM", "graceMinutes": 0})
    assert res.status_code == 200
    assert res.get_json()["schedule"] == {"start": "08:30 AM", "end": "03:45 PM", "graceMinutes": 0}

    summary = client.get("/api/reports/daily").get_json()["summary"]
    assert (summary["onTime"], summary["late"]) == (2, 0)

    res = client.post("/api/schedules/STEM/reset")
    assert res.get_json()["schedule"]["start"] == "08:00 AM"
    schedules = client.get("/api/schedules").get_json()
    assert schedules["STEM"]["graceMinutes"] == 5
    assert schedules["STEM"]["startInput"] == "08:00"
    assert schedules["ICT"]["endInput"] == "15:30"


def test_schedule_update_validation(client):
    res = client.patch("/api/schedules/STEM", json={"start": "whenever"})
    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_students_directory_and_registration(client):
    body = client.get("/api/students").get_json()
    assert [s["lastName"] for s in body["students"]] == ["Reyes", "Santos"]
    assert body["stats"]["total"] == 2

    bad = client.post("/api/students", json={"studentId": "2025-0003", "firstName": "Bea", "lastName": "Cruz",
                                              "strand": "ICT", "guardianEmail": "nope"})
    assert bad.status_code == 400

    ok = client.post("/api/students", json={"studentId": "2025-0003", "firstName": "Bea", "lastName": "Cruz",
                                             "strand": "ICT", "guardianEmail": "cruz@example.com",
                                             "gradeLevel": "12"})
    assert ok.status_code == 201
    assert ok.get_json()["student"]["gradeLevel"] == "Grade 12"
    assert client.get("/api/students").get_json()["stats"]["total"] == 3
