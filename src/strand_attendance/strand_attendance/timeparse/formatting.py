from __future__ import annotations

from .model import Minutes


def format_minutes(value: Minutes) -> str:
    """Render minutes as a zero-padded 12-hour label (`08:05 AM`), `-` when absent."""
    if value is None:
        return "-"
    hours24, minutes = divmod(int(value), 60)
    modifier = "PM" if hours24 % 24 >= 12 else "AM"
    hours12 = hours24 % 12 or 12
    return f"{hours12:02d}:{minutes:02d} {modifier}"


def to_clock_label(value: Minutes) -> str:
    """24-hour `HH:MM` as used by time inputs; empty when absent."""
    if value is None:
        return ""
    hours, minutes = divmod(int(value), 60)
    return f"{hours:02d}:{minutes:02d}"


def add_minutes(base: Minutes, increment: int) -> Minutes:
    if base is None:
        return None
    return base + increment
