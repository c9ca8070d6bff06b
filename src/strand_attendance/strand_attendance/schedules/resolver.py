"""Effective schedule resolution.

Lookup chain: caller override -> built-in group default -> global fallback.
Every function here is pure; update/reset return a new map and leave the
argument untouched.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Mapping, Optional

from .defaults import DEFAULT_GROUP_SCHEDULES, DEFAULT_GROUPS, FALLBACK_SCHEDULE
from .model import Schedule, ScheduleMap


def default_schedule(group: str) -> Schedule:
    return DEFAULT_GROUP_SCHEDULES.get(group, FALLBACK_SCHEDULE)


def resolve_schedule(schedule_map: Optional[Mapping[str, Schedule]], group: str) -> Schedule:
    if schedule_map and group in schedule_map:
        return schedule_map[group]
    return default_schedule(group)


def update_schedule(
    schedule_map: Mapping[str, Schedule],
    group: str,
    *,
    start: Optional[str] = None,
    end: Optional[str] = None,
    grace_minutes: Optional[int] = None,
) -> ScheduleMap:
    changes = {}
    if start is not None:
        changes["start"] = start
    if end is not None:
        changes["end"] = end
    if grace_minutes is not None:
        changes["grace_minutes"] = grace_minutes

    merged = replace(resolve_schedule(schedule_map, group), **changes)
    return {**schedule_map, group: merged}


def reset_schedule(schedule_map: Mapping[str, Schedule], group: str) -> ScheduleMap:
    return {**schedule_map, group: default_schedule(group)}


def schedule_groups(schedule_map: Optional[Mapping[str, Schedule]]) -> list[str]:
    """Built-in groups first, then any extra groups present in the map."""
    groups = list(DEFAULT_GROUPS)
    for group in schedule_map or {}:
        if group not in groups:
            groups.append(group)
    return groups
