from __future__ import annotations

import re

from ..core.exceptions import ValidationError

GUARDIAN_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_email(value: str, field_name: str) -> str:
    value = (value or "").strip().lower()
    if not value:
        raise ValidationError(f"{field_name} is required")
    if not GUARDIAN_EMAIL_PATTERN.match(value):
        raise ValidationError("Enter a valid email address")
    return value


def coerce_int(value, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number") from None
