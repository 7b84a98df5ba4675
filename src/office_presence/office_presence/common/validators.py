from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def clamp_percent(value: int) -> int:
    """Clamp to [0, 100]. Out-of-range percentages are clamped, not rejected."""
    return max(0, min(100, int(value)))


def require_day_in_month(day: int, days_in_month: int) -> int:
    if day < 1 or day > days_in_month:
        raise ValidationError(f"Day must be between 1 and {days_in_month}")
    return day
