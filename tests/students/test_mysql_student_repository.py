from __future__ import annotations

from datetime import date, datetime

import mysql.connector
import pytest

from src.strand_attendance.strand_attendance.attendance.classifier import classify
from src.strand_attendance.strand_attendance.attendance.model import AttendanceRecord
from src.strand_attendance.strand_attendance.core.exceptions import StorageUnavailableError
from src.strand_attendance.strand_attendance.schedules.defaults import create_default_schedule_map
from src.strand_attendance.strand_attendance.students.model import Student
from src.strand_attendance.strand_attendance.students.mysql_student_repository import MySQLStudentRepository
from src.strand_attendance.strand_attendance.timeparse.model import NativeTime


class FakeCursor:
    def __init__(self, rows, fail=False):
        self.rows = rows
        self.fail = fail
        self.executed = []
        self.lastrowid = 7

    def execute(self, sql, params=None):
        if self.fail:
            raise mysql.connector.Error("lost connection")
        self.executed.append((sql, params))

    def fetchall(self):
        return self.rows

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeFactory:
    def __init__(self, conn=None, refuse=False):
        self.conn = conn
        self.refuse = refuse

    def connect(self):
        if self.refuse:
            raise mysql.connector.Error("connection refused")
        return self.conn


ROWS = [
    {
        "id": 1,
        "student_id": "2025-0002",
        "first_name": "Miguel",
        "last_name": "Reyes",
        "strand": "STEM",
        "grade_level": 11,
        "parent_email": "reyes@example.com",
        "attendance_date": date(2025, 8, 23),
        "time_in": datetime(2025, 8, 23, 8, 12),
        "time_out": None,
    },
    {
        "id": 2,
        "student_id": "2025-0009",
        "first_name": "Nina",
        "last_name": "Lopez",
        "strand": "GAS",
        "grade_level": None,
        "parent_email": None,
        "attendance_date": None,
        "time_in": None,
        "time_out": None,
    },
]


def test_rows_map_to_students_with_latest_attendance():
    repo = MySQLStudentRepository(FakeFactory(FakeConnection(FakeCursor(ROWS))))
    miguel, nina = repo.list_with_latest_attendance()

    assert miguel.grade_level == "Grade 11"
    assert miguel.latest.date == "2025-08-23"
    assert miguel.latest.time_in == NativeTime(datetime(2025, 8, 23, 8, 12))
    assert miguel.latest.time_out is None
    assert classify(miguel.latest, create_default_schedule_map()).is_late is True

    assert nina.latest is None
    assert nina.grade_level == ""
    assert nina.guardian_email == ""


def test_create_stores_grade_number():
    cursor = FakeCursor([])
    conn = FakeConnection(cursor)
    repo = MySQLStudentRepository(FakeFactory(conn))

    new_id = repo.create(Student("2025-0010", "Bea", "Cruz", "ICT", "Grade 12", "cruz@example.com"))

    assert new_id == 7
    assert cursor.executed[0][1] == ("2025-0010", "Bea", "Cruz", "ICT", 12, "cruz@example.com")
    assert conn.committed is True


def test_refused_connection_is_storage_unavailable():
    repo = MySQLStudentRepository(FakeFactory(refuse=True))
    with pytest.raises(StorageUnavailableError):
        repo.list_with_latest_attendance()


def test_failed_query_rolls_back():
    conn = FakeConnection(FakeCursor([], fail=True))
    repo = MySQLStudentRepository(FakeFactory(conn))

    with pytest.raises(StorageUnavailableError):
        repo.get_by_student_id("2025-0001")
    assert conn.rolled_back is True
    assert conn.committed is False


def test_create_with_registration_day_inserts_empty_attendance():
    cursor = FakeCursor([])
    conn = FakeConnection(cursor)
    repo = MySQLStudentRepository(FakeFactory(conn))
    latest = AttendanceRecord("2025-0010", "Bea", "Cruz", "ICT", "2025-08-26")

    repo.create(Student("2025-0010", "Bea", "Cruz", "ICT", "Grade 12", "cruz@example.com", latest))

    assert len(cursor.executed) == 2
    sql, params = cursor.executed[1]
    assert "INSERT INTO attendance" in sql
    assert params == (7, "2025-08-26", "Registered")
    assert conn.committed is True
