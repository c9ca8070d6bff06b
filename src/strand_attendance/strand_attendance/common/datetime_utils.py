from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def require_iso_date(value: str) -> str:
    """Validate a YYYY-MM-DD query value and return it unchanged."""
    try:
        parse_iso_date(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}") from None
    return value
