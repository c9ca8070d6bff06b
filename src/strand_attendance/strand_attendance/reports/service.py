from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from ..attendance.classifier import classify
from ..attendance.filters import filter_records, records_for_date
from ..attendance.model import AttendanceRecord
from ..core.constants import ALL_GROUPS
from ..core.enums import Tone, TimeField
from ..schedules.model import Schedule
from ..schedules.resolver import schedule_groups
from ..schedules.service import ScheduleService
from ..students.service import StudentService
from ..timeparse.formatting import format_minutes
from ..timeparse.model import Minutes
from ..timeparse.normalizer import normalize
from .model import DailySummary, GroupBreakdown


def average_minutes(values: Iterable[Minutes]) -> Minutes:
    """Mean of the present values, rounded half up; None when nothing is present."""
    present = [v for v in values if v is not None]
    if not present:
        return None
    return math.floor(sum(present) / len(present) + 0.5)


def summarize(
    records: Iterable[AttendanceRecord],
    date: str,
    schedule_map: Optional[Mapping[str, Schedule]],
    groups: Sequence[str],
) -> DailySummary:
    day_records = records_for_date(records, date)

    on_time = late = checked_in = pending_checkout = 0
    by_group: dict[str, dict[str, int]] = defaultdict(lambda: {"on_time": 0, "late": 0})

    for r in day_records:
        result = classify(r, schedule_map)
        if not result.has_checked_in:
            continue

        checked_in += 1
        if not result.has_checked_out:
            pending_checkout += 1

        if result.tone == Tone.LATE:
            late += 1
            by_group[r.group]["late"] += 1
        else:
            on_time += 1
            by_group[r.group]["on_time"] += 1

    return DailySummary(
        date=date,
        total=len(day_records),
        on_time=on_time,
        late=late,
        not_checked_in=len(day_records) - checked_in,
        pending_checkout=pending_checkout,
        average_time_in=average_minutes(normalize(r.time_in) for r in day_records),
        average_time_out=average_minutes(normalize(r.time_out) for r in day_records),
        per_group_breakdown={
            g: GroupBreakdown(on_time=by_group[g]["on_time"], late=by_group[g]["late"]) for g in groups
        },
    )


def arrival_breakdown(summary: DailySummary) -> list[dict]:
    """Pie chart rows."""
    return [
        {"name": "On Time", "value": summary.on_time},
        {"name": "Late", "value": summary.late},
        {"name": "Not Yet Checked In", "value": summary.not_checked_in},
    ]


def group_rows(summary: DailySummary) -> list[dict]:
    """Bar chart rows, one per requested group in order."""
    return [
        {"group": group, "onTime": b.on_time, "late": b.late}
        for group, b in summary.per_group_breakdown.items()
    ]


@dataclass(frozen=True)
class DashboardData:
    rows: list[dict]
    summary: DailySummary
    load_error: str = ""


class DailyReportService:
    """Joins the roster with the session's schedules to feed the dashboard views."""

    def __init__(self, students: StudentService, schedules: ScheduleService):
        self._students = students
        self._schedules = schedules

    def build_dashboard(
        self,
        *,
        date: str,
        group: str = ALL_GROUPS,
        search: str = "",
        time_field: Optional[TimeField] = None,
        time_value: Optional[str] = None,
        only_missing_checkout: bool = False,
    ) -> DashboardData:
        roster = self._students.load_roster()
        schedule_map = self._schedules.current_map()
        records = roster.records

        visible = filter_records(
            records,
            date=date,
            group=group,
            search=search,
            time_field=time_field,
            time_value=time_value,
            only_missing_checkout=only_missing_checkout,
        )
        rows = [self._to_row(r, classify(r, schedule_map)) for r in visible]
        summary = summarize(records, date, schedule_map, schedule_groups(schedule_map))
        return DashboardData(rows=rows, summary=summary, load_error=roster.load_error)

    def build_daily_report(self, *, date: str) -> dict:
        roster = self._students.load_roster()
        schedule_map = self._schedules.current_map()
        summary = summarize(roster.records, date, schedule_map, schedule_groups(schedule_map))
        return {
            "summary": summary.to_dict(),
            "arrivalBreakdown": arrival_breakdown(summary),
            "groupRows": group_rows(summary),
            "hasData": summary.total > 0,
            "loadError": roster.load_error,
        }

    @staticmethod
    def _to_row(r: AttendanceRecord, result) -> dict:
        return {
            "studentId": r.student_id,
            "firstName": r.first_name,
            "lastName": r.last_name,
            "group": r.group,
            "date": r.date,
            "timeIn": format_minutes(normalize(r.time_in)),
            "timeOut": format_minutes(normalize(r.time_out)),
            **result.to_dict(),
        }
