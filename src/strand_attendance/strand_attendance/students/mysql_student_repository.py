from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import REGISTERED_STATUS
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..timeparse.model import tag_time_value
from .model import Student, grade_label, grade_number
from .repository import StudentRepository

_SELECT_WITH_LATEST = """
    SELECT s.id, s.student_id, s.first_name, s.last_name, s.strand, s.grade_level, s.parent_email,
           a.date AS attendance_date, a.time_in, a.time_out
    FROM students s
    LEFT JOIN attendance a ON a.id = (
        SELECT a2.id FROM attendance a2
        WHERE a2.student_pk = s.id
        ORDER BY a2.date DESC, a2.id DESC
        LIMIT 1
    )
"""


def _row_to_student(r: Dict[str, Any]) -> Student:
    student_id = str(r.get("student_id") or r.get("id") or "")
    first_name = r.get("first_name") or ""
    last_name = r.get("last_name") or ""
    strand = r.get("strand") or ""

    latest = None
    if r.get("attendance_date") is not None:
        work_date = r["attendance_date"]
        latest = AttendanceRecord(
            student_id=student_id,
            first_name=first_name,
            last_name=last_name,
            group=strand,
            date=work_date.strftime("%Y-%m-%d") if hasattr(work_date, "strftime") else str(work_date),
            time_in=tag_time_value(r.get("time_in")),
            time_out=tag_time_value(r.get("time_out")),
        )

    return Student(
        student_id=student_id,
        first_name=first_name,
        last_name=last_name,
        strand=strand,
        grade_level=grade_label(r.get("grade_level")),
        guardian_email=r.get("parent_email") or "",
        latest=latest,
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_with_latest_attendance(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_WITH_LATEST + " ORDER BY s.last_name ASC, s.first_name ASC")
            return [_row_to_student(r) for r in fetchall(cur)]

    def get_by_student_id(self, student_id: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_WITH_LATEST + " WHERE s.student_id=%s", (student_id,))
            r = fetchone(cur)
            return _row_to_student(r) if r else None

    def create(self, student: Student) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(student_id, first_name, last_name, strand, grade_level, parent_email)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    student.student_id,
                    student.first_name,
                    student.last_name,
                    student.strand,
                    grade_number(student.grade_level),
                    student.guardian_email,
                ),
            )
            student_pk = int(cur.lastrowid)
            if student.latest is not None:
                cur.execute(
                    "INSERT INTO attendance(student_pk, date, status) VALUES(%s,%s,%s)",
                    (student_pk, student.latest.date, REGISTERED_STATUS),
                )
            return student_pk
