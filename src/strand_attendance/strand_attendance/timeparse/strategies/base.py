from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...core.constants import MINUTES_PER_DAY


class TimeTextStrategy(ABC):
    """Strategy Pattern: one way of reading a time string.

    `parse` returns minutes since midnight on success and None on failure,
    so the normalizer can move on to the next strategy.
    """

    name: str = "base"

    @abstractmethod
    def parse(self, text: str) -> Optional[int]:
        raise NotImplementedError


def clock_minutes(hour: int, minute: int) -> Optional[int]:
    if not (0 <= hour < 24 and 0 <= minute < 60):
        return None
    minutes = hour * 60 + minute
    return minutes if minutes < MINUTES_PER_DAY else None
