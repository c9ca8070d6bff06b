from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Schedule:
    """Expected arrival window of one group (strand)."""

    start: str
    end: str
    grace_minutes: int = 0

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end, "graceMinutes": self.grace_minutes}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Schedule":
        grace = data.get("graceMinutes", data.get("grace_minutes", 0))
        return cls(start=str(data["start"]), end=str(data["end"]), grace_minutes=int(grace))


ScheduleMap = dict[str, Schedule]
