from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import DayKind


@dataclass(frozen=True)
class CalendarDay:
    """One day-of-month as seen by the calendar classifier."""

    day: int
    date: date
    weekday: int  # Monday == 0
    is_weekend: bool
    is_holiday: bool

    @property
    def kind(self) -> DayKind:
        if self.is_holiday:
            return DayKind.HOLIDAY
        if self.is_weekend:
            return DayKind.WEEKEND
        return DayKind.CALENDAR

    @property
    def is_obligatory_candidate(self) -> bool:
        return not self.is_weekend and not self.is_holiday
