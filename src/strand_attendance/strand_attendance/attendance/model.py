from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import Tone
from ..timeparse.formatting import format_minutes
from ..timeparse.model import Minutes, TimeValue, tag_time_value


def _pick(data: Mapping[str, Any], *keys: str, default=None):
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


@dataclass(frozen=True)
class AttendanceRecord:
    """One student's attendance for one calendar day."""

    student_id: str
    first_name: str
    last_name: str
    group: str
    date: str
    time_in: Optional[TimeValue] = None
    time_out: Optional[TimeValue] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        """Build a record from the interop field set (camelCase or snake_case keys)."""
        return cls(
            student_id=str(_pick(data, "studentId", "student_id", "id", default="")),
            first_name=str(_pick(data, "firstName", "first_name", default="")),
            last_name=str(_pick(data, "lastName", "last_name", default="")),
            group=str(_pick(data, "group", "strand", default="")),
            date=str(_pick(data, "date", default="")),
            time_in=tag_time_value(_pick(data, "timeIn", "time_in")),
            time_out=tag_time_value(_pick(data, "timeOut", "time_out")),
        )


@dataclass(frozen=True)
class ClassificationResult:
    """Derived per-record status; computed on demand, never stored."""

    has_checked_in: bool
    has_checked_out: bool
    is_late: bool
    arrival_minutes: Minutes
    threshold_minutes: Minutes
    status_label: str
    tone: Tone
    row_class: str

    def to_dict(self) -> dict:
        return {
            "hasCheckedIn": self.has_checked_in,
            "hasCheckedOut": self.has_checked_out,
            "isLate": self.is_late,
            "arrivalMinutes": self.arrival_minutes,
            "thresholdMinutes": self.threshold_minutes,
            "arrival": format_minutes(self.arrival_minutes),
            "threshold": format_minutes(self.threshold_minutes),
            "statusLabel": self.status_label,
            "tone": self.tone.value,
            "rowClass": self.row_class,
        }
