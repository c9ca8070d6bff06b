from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import require_iso_date
from ..common.validators import require_email, require_non_empty
from ..core.constants import LOAD_ERROR_MESSAGE
from ..core.exceptions import StorageUnavailableError, ValidationError
from .model import Student, grade_label, grade_number, sort_students
from .repository import StudentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RosterLoad:
    """Result of reading the roster: the students plus a user-facing error, if any."""

    students: list[Student] = field(default_factory=list)
    load_error: str = ""

    @property
    def records(self) -> list[AttendanceRecord]:
        return [s.latest for s in self.students if s.latest is not None]


class StudentService:
    def __init__(self, students: StudentRepository):
        self._students = students

    def load_roster(self) -> RosterLoad:
        """Fetch every student; a failing store degrades to an empty roster."""
        try:
            rows = self._students.list_with_latest_attendance()
        except StorageUnavailableError as e:
            logger.error("Failed to load students: %s", e)
            return RosterLoad(students=[], load_error=LOAD_ERROR_MESSAGE)
        return RosterLoad(students=sort_students(rows))

    def register(
        self,
        *,
        student_id: str,
        first_name: str,
        last_name: str,
        strand: str,
        guardian_email: str,
        grade_level: Optional[str] = None,
        registered_on: Optional[str] = None,
    ) -> Student:
        """Validate and store a new student with an empty attendance record for the registration day."""
        student_id = require_non_empty(student_id, "Student ID")
        first_name = require_non_empty(first_name, "First name")
        last_name = require_non_empty(last_name, "Last name")
        strand = require_non_empty(strand, "Strand")
        guardian_email = require_email(guardian_email, "Parent email")

        grade = grade_number(grade_level)
        if grade_level and grade is None:
            raise ValidationError("Grade level must contain a number")
        registered_on = require_iso_date(registered_on) if registered_on else date.today().isoformat()

        if self._students.get_by_student_id(student_id):
            raise ValidationError(f"Student ID {student_id} is already registered")

        student = Student(
            student_id=student_id,
            first_name=first_name,
            last_name=last_name,
            strand=strand,
            grade_level=grade_label(grade),
            guardian_email=guardian_email,
            latest=AttendanceRecord(student_id, first_name, last_name, strand, registered_on),
        )
        self._students.create(student)
        logger.info("Registered student %s (%s)", student_id, strand)
        return student

    @staticmethod
    def directory_stats(students: Sequence[Student]) -> dict:
        grades = Counter(s.grade_level for s in students if s.grade_level)
        strands = {s.strand for s in students if s.strand}
        return {
            "total": len(students),
            "strandCount": len(strands),
            "gradeCounts": dict(sorted(grades.items(), key=lambda kv: (len(kv[0]), kv[0]))),
        }
