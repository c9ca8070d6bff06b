from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional, Union

Minutes = Optional[int]


@dataclass(frozen=True)
class TextTime:
    """A time label or date-time string as typed or stored."""

    text: str


@dataclass(frozen=True)
class EpochTime:
    """Milliseconds since the Unix epoch."""

    millis: float


@dataclass(frozen=True)
class NativeTime:
    value: Union[datetime, date, time]


TimeValue = Union[TextTime, EpochTime, NativeTime]


def tag_time_value(raw) -> Optional[TimeValue]:
    """Tag a raw storage value so normalization never has to guess its shape.

    Only used at the boundary where rows come in from storage or JSON.
    """

    if raw is None:
        return None
    if isinstance(raw, (TextTime, EpochTime, NativeTime)):
        return raw
    if isinstance(raw, str):
        return TextTime(raw)
    if isinstance(raw, bool):
        raise TypeError("booleans are not time values")
    if isinstance(raw, (int, float)):
        return EpochTime(raw)
    if isinstance(raw, (datetime, date, time)):
        return NativeTime(raw)
    raise TypeError(f"Unsupported time value type: {type(raw)!r}")
