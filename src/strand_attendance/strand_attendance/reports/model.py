from __future__ import annotations

from dataclasses import dataclass, field

from ..timeparse.formatting import format_minutes
from ..timeparse.model import Minutes


@dataclass(frozen=True)
class GroupBreakdown:
    on_time: int = 0
    late: int = 0


@dataclass(frozen=True)
class DailySummary:
    date: str
    total: int = 0
    on_time: int = 0
    late: int = 0
    not_checked_in: int = 0
    pending_checkout: int = 0
    average_time_in: Minutes = None
    average_time_out: Minutes = None
    per_group_breakdown: dict[str, GroupBreakdown] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "total": self.total,
            "onTime": self.on_time,
            "late": self.late,
            "notCheckedIn": self.not_checked_in,
            "pendingCheckout": self.pending_checkout,
            "averageTimeIn": self.average_time_in,
            "averageTimeOut": self.average_time_out,
            "averageTimeInLabel": format_minutes(self.average_time_in),
            "averageTimeOutLabel": format_minutes(self.average_time_out),
            "perGroup": {
                group: {"onTime": b.on_time, "late": b.late} for group, b in self.per_group_breakdown.items()
            },
        }
