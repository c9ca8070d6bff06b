from __future__ import annotations

import warnings
from datetime import datetime
from typing import Optional

from dateutil import parser
from dateutil.parser import UnknownTimezoneWarning

from .base import TimeTextStrategy, clock_minutes

# Two defaults that disagree on hour and minute: a string that never names a
# clock time comes back different under each and is rejected.
_DEFAULTS = (datetime(2000, 1, 1, 0, 0), datetime(2000, 1, 1, 1, 1))


class FallbackStrategy(TimeTextStrategy):
    """Last resort: let dateutil read whatever date-time string is left."""

    name = "fallback"

    def parse(self, text: str) -> Optional[int]:
        try:
            with warnings.catch_warnings():
                # An unrecognised zone name is treated as unparseable text.
                warnings.simplefilter("error", UnknownTimezoneWarning)
                first, second = (parser.parse(text, default=d) for d in _DEFAULTS)
            if (first.hour, first.minute) != (second.hour, second.minute):
                return None
            if first.tzinfo is not None:
                first = first.astimezone()
        except (ValueError, OverflowError, OSError, UnknownTimezoneWarning):
            return None
        return clock_minutes(first.hour, first.minute)
