from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def list_with_latest_attendance(self) -> Sequence[Student]:
        """Every student with their most recent attendance row attached (if any)."""

        raise NotImplementedError

    def get_by_student_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def create(self, student: Student) -> int:
        """Insert a student and return its storage id.

        When `student.latest` is set, its day is stored as an empty attendance
        record in the same transaction.
        """

        raise NotImplementedError
