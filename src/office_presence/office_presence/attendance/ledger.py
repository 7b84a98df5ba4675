"""Attendance accounting: day transitions and monthly statistics.

Everything here is pure. Callers validate day numbers and clamp
percentages before calling in.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import days_in_month
from ..core.enums import MarkStatus
from ..workdays.classifier import CalendarClassifier
from .model import Mark, MonthRecord, MonthStats

_CYCLE: dict[Optional[MarkStatus], Optional[MarkStatus]] = {
    None: MarkStatus.PRESENT,
    MarkStatus.PRESENT: MarkStatus.EXCUSED,
    MarkStatus.EXCUSED: None,
}


def next_status(current: Optional[MarkStatus]) -> Optional[MarkStatus]:
    """unmarked -> present -> excused -> unmarked."""
    return _CYCLE[current]


def current_status(marks: Iterable[Mark], day: int) -> Optional[MarkStatus]:
    for m in marks:
        if m.day == day:
            return m.status
    return None


def set_mark(marks: Iterable[Mark], day: int, status: Optional[MarkStatus]) -> tuple[Mark, ...]:
    """Replace or remove the mark for `day`; result is sorted by day."""
    out = [m for m in marks if m.day != day]
    if status is not None:
        out.append(Mark(day=day, status=status))
    out.sort(key=lambda m: m.day)
    return tuple(out)


def present_count(marks: Iterable[Mark], workday_set: Iterable[int]) -> int:
    workday_set = set(workday_set)
    return sum(1 for m in marks if m.status == MarkStatus.PRESENT and m.day in workday_set)


def _round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def required_days(required_percent: int, employment_fraction: int, workday_count: int) -> int:
    """Days needed to meet the target.

    The full-time threshold is rounded first and only then scaled by the
    employment fraction, which is rounded again.
    """
    full_time = _round_half_up(Decimal(required_percent) * Decimal(workday_count) / Decimal(100))
    return _round_half_up(Decimal(full_time) * Decimal(employment_fraction) / Decimal(100))


def attendance_percent(present: int, workday_count: int) -> float:
    if workday_count == 0:
        return 0.0
    return 100 * present / workday_count


def shortfall(required: int, present: int) -> int:
    return max(0, required - present)


class AttendanceLedger:
    """Ledger operations that need the calendar (weekends and holidays)."""

    def __init__(self, classifier: CalendarClassifier):
        self._classifier = classifier

    @property
    def classifier(self) -> CalendarClassifier:
        return self._classifier

    def is_locked(self, value: date, *, today: date) -> bool:
        """Weekends, holidays and past days of the live month cannot change.

        Past days of any other month stay editable.
        """
        if self._classifier.is_weekend(value) or self._classifier.is_public_holiday(value, value.year):
            return True
        in_live_month = value.year == today.year and value.month == today.month
        return in_live_month and value < today

    def toggle_day(self, marks: Sequence[Mark], day: int, value: date, *, today: date) -> tuple[Mark, ...]:
        if self.is_locked(value, today=today):
            return tuple(marks)
        return set_mark(marks, day, next_status(current_status(marks, day)))

    def workdays(self, year: int, month: int, marks: Iterable[Mark]) -> tuple[int, ...]:
        excused = {m.day for m in marks if m.status == MarkStatus.EXCUSED}
        out: list[int] = []
        for day in range(1, days_in_month(year, month) + 1):
            if day in excused:
                continue
            if self._classifier.is_obligatory_candidate(date(year, month, day), year):
                out.append(day)
        return tuple(out)

    def compute_stats(self, year: int, month: int, record: MonthRecord) -> MonthStats:
        days = self.workdays(year, month, record.marks)
        present = present_count(record.marks, days)
        required = required_days(record.required_percent, record.employment_fraction, len(days))
        return MonthStats(
            workdays=days,
            present_count=present,
            percent=attendance_percent(present, len(days)),
            required_days=required,
            shortfall=shortfall(required, present),
        )
