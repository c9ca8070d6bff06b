"""Example: use the attendance engine directly (no Flask, no database).

Controllers and repositories are thin layers; classification and summaries are
plain functions over records and a schedule map.
"""

from src.strand_attendance.strand_attendance.attendance.classifier import classify
from src.strand_attendance.strand_attendance.attendance.model import AttendanceRecord
from src.strand_attendance.strand_attendance.reports.service import summarize
from src.strand_attendance.strand_attendance.schedules.defaults import DEFAULT_GROUPS, create_default_schedule_map
from src.strand_attendance.strand_attendance.schedules.resolver import update_schedule
from src.strand_attendance.strand_attendance.timeparse.formatting import format_minutes


def main():
    records = [
        AttendanceRecord.from_mapping(
            {"studentId": "2025-0001", "firstName": "Andrea", "lastName": "Santos", "group": "STEM",
             "date": "2025-08-23", "timeIn": "07:52 AM", "timeOut": "03:45 PM"}
        ),
        AttendanceRecord.from_mapping(
            {"studentId": "2025-0002", "firstName": "Miguel", "lastName": "Reyes", "group": "STEM",
             "date": "2025-08-23", "timeIn": "2025-08-23 08:12:00", "timeOut": ""}
        ),
    ]

    schedule_map = create_default_schedule_map()
    for r in records:
        print(r.full_name, classify(r, schedule_map).status_label)

    summary = summarize(records, "2025-08-23", schedule_map, DEFAULT_GROUPS)
    print(summary.on_time, "on time,", summary.late, "late, average in", format_minutes(summary.average_time_in))

    relaxed = update_schedule(schedule_map, "STEM", start="08:30 AM", grace_minutes=0)
    print("After moving STEM to 08:30 AM:", classify(records[1], relaxed).status_label)


if __name__ == "__main__":
    main()
