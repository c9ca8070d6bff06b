from __future__ import annotations

import re
from typing import Optional

from .base import TimeTextStrategy, clock_minutes

_CLOCK = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


class ClockStrategy(TimeTextStrategy):
    """Bare 24-hour label, e.g. `07:52` or `16:00:00`."""

    name = "clock"

    def parse(self, text: str) -> Optional[int]:
        match = _CLOCK.match(text)
        if not match:
            return None
        return clock_minutes(int(match.group(1)), int(match.group(2)))
