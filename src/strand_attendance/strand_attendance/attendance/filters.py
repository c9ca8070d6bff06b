from __future__ import annotations

from typing import Iterable, Optional

from ..core.constants import ALL_GROUPS
from ..core.enums import TimeField
from ..timeparse.normalizer import normalize, normalize_text
from .model import AttendanceRecord


def records_for_date(records: Iterable[AttendanceRecord], date: str) -> list[AttendanceRecord]:
    return [r for r in records if r.date == date]


def filter_records(
    records: Iterable[AttendanceRecord],
    *,
    date: str,
    group: str = ALL_GROUPS,
    search: str = "",
    time_field: Optional[TimeField] = None,
    time_value: Optional[str] = None,
    only_missing_checkout: bool = False,
) -> list[AttendanceRecord]:
    """Dashboard table filter.

    The time filter keeps records whose chosen field is at or after
    `time_value`; records without that field never match it.
    """

    needle = (search or "").strip().lower()
    filter_minutes = normalize_text(time_value) if time_field and time_value else None

    out: list[AttendanceRecord] = []
    for r in records:
        if r.date != date:
            continue
        if group and group != ALL_GROUPS and r.group != group:
            continue
        if needle and needle not in r.full_name.lower() and needle not in r.student_id.lower():
            continue

        if filter_minutes is not None:
            value = r.time_in if TimeField(time_field) == TimeField.TIME_IN else r.time_out
            record_minutes = normalize(value)
            if record_minutes is None or record_minutes < filter_minutes:
                continue

        if only_missing_checkout and normalize(r.time_out) is not None:
            continue

        out.append(r)
    return out
