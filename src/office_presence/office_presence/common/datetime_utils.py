from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.constants import YEAR_MONTH_FORMAT
from ..core.exceptions import ValidationError


def parse_year_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM string into (year, month)."""
    try:
        parsed = datetime.strptime(value, YEAR_MONTH_FORMAT)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid month: {value!r}, expected YYYY-MM")
    return parsed.year, parsed.month


def format_year_month(year: int, month: int) -> str:
    return date(year, month, 1).strftime(YEAR_MONTH_FORMAT)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()
