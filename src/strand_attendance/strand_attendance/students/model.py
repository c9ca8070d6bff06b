from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..attendance.model import AttendanceRecord


@dataclass(frozen=True)
class Student:
    """Domain entity: a registered learner and their latest attendance stamp."""

    student_id: str
    first_name: str
    last_name: str
    strand: str
    grade_level: str = ""
    guardian_email: str = ""
    latest: Optional[AttendanceRecord] = None

    def to_dict(self) -> dict:
        return {
            "studentId": self.student_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "strand": self.strand,
            "gradeLevel": self.grade_level,
            "guardianEmail": self.guardian_email,
            "date": self.latest.date if self.latest else "",
        }


def grade_label(value) -> str:
    """5 -> "Grade 5"; non-numeric values pass through unchanged."""
    if value is None or value == "":
        return ""
    try:
        return f"Grade {int(value)}"
    except (TypeError, ValueError):
        return str(value)


def grade_number(label: Optional[str]) -> Optional[int]:
    if not label:
        return None
    match = re.search(r"\d+", str(label))
    return int(match.group(0)) if match else None


def sort_students(students):
    """Alphabetical by last name, then first name, ignoring case."""
    return sorted(students, key=lambda s: ((s.last_name or "").casefold(), (s.first_name or "").casefold()))
