"""Time normalization: any supported TimeValue to minutes since local midnight.

Unparseable or absent input is never an error here; it comes back as None and
flows through classification as "not checked in" or "no data".
"""
from __future__ import annotations

import logging
import math
from datetime import date, datetime, time
from typing import Optional, Sequence

from .model import EpochTime, Minutes, NativeTime, TextTime, TimeValue
from .strategies.base import TimeTextStrategy, clock_minutes
from .strategies.clock_strategy import ClockStrategy
from .strategies.datetime_strategy import DateTimeStrategy
from .strategies.fallback_strategy import FallbackStrategy
from .strategies.meridiem_strategy import MeridiemStrategy

logger = logging.getLogger(__name__)

# Order matters: a date-time stamp also contains a bare HH:MM.
DEFAULT_STRATEGIES: tuple[TimeTextStrategy, ...] = (
    DateTimeStrategy(),
    MeridiemStrategy(),
    ClockStrategy(),
    FallbackStrategy(),
)


def normalize(value: Optional[TimeValue], *, strategies: Sequence[TimeTextStrategy] = DEFAULT_STRATEGIES) -> Minutes:
    if value is None:
        return None
    if isinstance(value, TextTime):
        return _normalize_text(value.text, strategies)
    if isinstance(value, EpochTime):
        return _normalize_epoch(value.millis)
    if isinstance(value, NativeTime):
        return _normalize_native(value.value)
    raise TypeError(f"Untagged time value: {value!r}")


def normalize_text(text: Optional[str]) -> Minutes:
    """Shortcut for values known to be strings (schedule labels, filter inputs)."""
    return normalize(TextTime(text) if text is not None else None)


def _normalize_text(text: str, strategies: Sequence[TimeTextStrategy]) -> Minutes:
    trimmed = (text or "").strip()
    if not trimmed:
        return None

    for strategy in strategies:
        minutes = strategy.parse(trimmed)
        if minutes is not None:
            return minutes

    logger.debug("Unparseable time value %r", text)
    return None


def _normalize_epoch(millis: float) -> Minutes:
    try:
        if math.isnan(millis) or math.isinf(millis):
            return None
        moment = datetime.fromtimestamp(millis / 1000)
    except (OverflowError, OSError, ValueError):
        logger.debug("Invalid epoch timestamp %r", millis)
        return None
    return clock_minutes(moment.hour, moment.minute)


def _normalize_native(value) -> Minutes:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            try:
                value = value.astimezone()
            except (OverflowError, OSError, ValueError):
                return None
        return clock_minutes(value.hour, value.minute)
    if isinstance(value, time):
        return clock_minutes(value.hour, value.minute)
    if isinstance(value, date):
        return 0
    return None
