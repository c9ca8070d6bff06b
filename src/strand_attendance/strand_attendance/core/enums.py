from __future__ import annotations

from enum import Enum


class Tone(str, Enum):
    """Visual tone of an attendance status badge."""

    NEUTRAL = "neutral"
    ONTIME = "ontime"
    LATE = "late"


class TimeField(str, Enum):
    """Record fields the dashboard time filter can target."""

    TIME_IN = "time_in"
    TIME_OUT = "time_out"
