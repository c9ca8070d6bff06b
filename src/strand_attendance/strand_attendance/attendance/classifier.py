from __future__ import annotations

from typing import Mapping, Optional

from ..core.enums import Tone
from ..schedules.model import Schedule
from ..schedules.resolver import resolve_schedule
from ..timeparse.formatting import add_minutes, format_minutes
from ..timeparse.normalizer import normalize, normalize_text
from .model import AttendanceRecord, ClassificationResult


def classify(record: AttendanceRecord, schedule_map: Optional[Mapping[str, Schedule]]) -> ClassificationResult:
    """Decide whether a student is awaited, on time or late for their group.

    An arrival equal to start + grace is on time; only a strictly later
    arrival is late. When the schedule start cannot be parsed there is no
    threshold and nobody in that group is marked late.
    """

    schedule = resolve_schedule(schedule_map, record.group)
    start_minutes = normalize_text(schedule.start)
    threshold_minutes = add_minutes(start_minutes, schedule.grace_minutes)

    arrival_minutes = normalize(record.time_in)
    has_checked_in = arrival_minutes is not None
    has_checked_out = normalize(record.time_out) is not None

    if not has_checked_in:
        start_label = format_minutes(start_minutes) if start_minutes is not None else schedule.start
        return ClassificationResult(
            has_checked_in=False,
            has_checked_out=has_checked_out,
            is_late=False,
            arrival_minutes=None,
            threshold_minutes=threshold_minutes,
            status_label=f"Awaiting {start_label} check-in",
            tone=Tone.NEUTRAL,
            row_class="row-none",
        )

    is_late = threshold_minutes is not None and arrival_minutes > threshold_minutes
    arrival_part = "Late" if is_late else "On time"
    presence_part = "Checked out" if has_checked_out else "On campus"

    return ClassificationResult(
        has_checked_in=True,
        has_checked_out=has_checked_out,
        is_late=is_late,
        arrival_minutes=arrival_minutes,
        threshold_minutes=threshold_minutes,
        status_label=f"{arrival_part} - {presence_part}",
        tone=Tone.LATE if is_late else Tone.ONTIME,
        row_class="row-both" if has_checked_out else "row-timein",
    )
