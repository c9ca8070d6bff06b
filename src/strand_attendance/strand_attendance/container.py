from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .reports.service import DailyReportService
from .schedules.defaults import create_default_schedule_map
from .schedules.service import ScheduleService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    students_repo: StudentRepository

    student_service: StudentService
    schedule_service: ScheduleService
    report_service: DailyReportService


def build_container(*, db_config: Optional[dict] = None, students_repo: Optional[StudentRepository] = None) -> Container:
    if students_repo is None:
        if db_config is None:
            raise ValueError("db_config is required when no students_repo is given")
        students_repo = MySQLStudentRepository(DatabaseConnection.get_instance(DBConfig.from_mapping(db_config)))

    student_service = StudentService(students_repo)
    schedule_service = ScheduleService(create_default_schedule_map())
    report_service = DailyReportService(student_service, schedule_service)

    return Container(
        students_repo=students_repo,
        student_service=student_service,
        schedule_service=schedule_service,
        report_service=report_service,
    )
