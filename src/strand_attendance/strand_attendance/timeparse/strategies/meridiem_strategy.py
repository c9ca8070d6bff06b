from __future__ import annotations

import re
from typing import Optional

from .base import TimeTextStrategy, clock_minutes

_MERIDIEM = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?\s*(AM|PM)$", re.IGNORECASE)


class MeridiemStrategy(TimeTextStrategy):
    """12-hour label, e.g. `08:05 AM` or `1:30:15 pm`."""

    name = "meridiem"

    def parse(self, text: str) -> Optional[int]:
        match = _MERIDIEM.match(text)
        if not match:
            return None

        hour = int(match.group(1))
        if hour > 12:
            return None
        hour %= 12
        if match.group(4).upper() == "PM":
            hour += 12
        return clock_minutes(hour, int(match.group(2)))
