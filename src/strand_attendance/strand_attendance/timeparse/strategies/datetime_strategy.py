from __future__ import annotations

import re
from typing import Optional

from .base import TimeTextStrategy, clock_minutes

_DATE_TIME = re.compile(
    r"^\d{4}-\d{2}-\d{2}[ T](\d{2}):(\d{2})(?::(\d{2})(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?$",
    re.IGNORECASE,
)


class DateTimeStrategy(TimeTextStrategy):
    """Combined `YYYY-MM-DD HH:MM[:SS]` or ISO 8601 stamp.

    The zone suffix is accepted but not applied: the embedded wall-clock digits win.
    """

    name = "datetime"

    def parse(self, text: str) -> Optional[int]:
        match = _DATE_TIME.match(text)
        if not match:
            return None
        return clock_minutes(int(match.group(1)), int(match.group(2)))
