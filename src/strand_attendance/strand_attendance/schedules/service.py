from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import coerce_int
from ..core.exceptions import ValidationError
from ..timeparse.formatting import format_minutes
from ..timeparse.normalizer import normalize_text
from .defaults import DEFAULT_GROUP_SCHEDULES, create_default_schedule_map
from .model import Schedule, ScheduleMap
from .resolver import reset_schedule, resolve_schedule, schedule_groups, update_schedule

logger = logging.getLogger(__name__)


class ScheduleService:
    """Owns the session's ScheduleMap and validates changes coming from the UI.

    The engine functions never keep a reference to the map; callers read it
    through `current_map()` and pass it along explicitly.
    """

    def __init__(self, schedule_map: Optional[ScheduleMap] = None):
        self._map: ScheduleMap = dict(schedule_map) if schedule_map is not None else create_default_schedule_map()

    def current_map(self) -> ScheduleMap:
        return dict(self._map)

    def list_all(self) -> dict[str, Schedule]:
        return {group: resolve_schedule(self._map, group) for group in schedule_groups(self._map)}

    def get(self, group: str) -> Schedule:
        return resolve_schedule(self._map, group)

    def update(
        self,
        group: str,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
        grace_minutes=None,
    ) -> Schedule:
        group = (group or "").strip()
        if not group:
            raise ValidationError("Strand is required")

        start_label = self._canonical_label(start, "Arrival time") if start is not None else None
        end_label = self._canonical_label(end, "Dismissal time") if end is not None else None
        grace = None
        if grace_minutes is not None:
            grace = max(0, coerce_int(grace_minutes, "Grace period"))

        self._map = update_schedule(self._map, group, start=start_label, end=end_label, grace_minutes=grace)
        updated = self._map[group]
        logger.info(
            "Schedule for %s updated: start=%s end=%s grace=%s",
            group,
            updated.start,
            updated.end,
            updated.grace_minutes,
        )
        return updated

    def reset(self, group: str) -> Schedule:
        group = (group or "").strip()
        if not group:
            raise ValidationError("Strand is required")

        if group in DEFAULT_GROUP_SCHEDULES:
            self._map = reset_schedule(self._map, group)
        else:
            # groups without a built-in entry lose their override entirely
            self._map = {g: s for g, s in self._map.items() if g != group}
        logger.info("Schedule for %s reset to default", group)
        return resolve_schedule(self._map, group)

    @staticmethod
    def _canonical_label(value: str, field_name: str) -> str:
        minutes = normalize_text(value)
        if minutes is None:
            raise ValidationError(f"{field_name} is not a valid time: {value!r}")
        return format_minutes(minutes)
