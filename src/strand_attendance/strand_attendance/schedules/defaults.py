from __future__ import annotations

from types import MappingProxyType

from .model import Schedule, ScheduleMap

DEFAULT_GROUP_SCHEDULES = MappingProxyType(
    {
        "STEM": Schedule(start="08:00 AM", end="03:45 PM", grace_minutes=5),
        "ICT": Schedule(start="07:30 AM", end="03:30 PM", grace_minutes=10),
        "HUMSS": Schedule(start="09:00 AM", end="04:30 PM", grace_minutes=5),
        "ABM": Schedule(start="08:30 AM", end="04:00 PM", grace_minutes=5),
        "GAS": Schedule(start="07:45 AM", end="03:50 PM", grace_minutes=7),
    }
)

FALLBACK_SCHEDULE = Schedule(start="08:00 AM", end="04:00 PM", grace_minutes=5)

DEFAULT_GROUPS: tuple[str, ...] = tuple(DEFAULT_GROUP_SCHEDULES)


def create_default_schedule_map() -> ScheduleMap:
    """Fresh map seeded with one entry per built-in group."""
    return dict(DEFAULT_GROUP_SCHEDULES)
