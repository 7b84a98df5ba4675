from datetime import date

import pytest

from src.office_presence.office_presence.attendance.ledger import (
    attendance_percent,
    current_status,
    next_status,
    present_count,
    required_days,
    set_mark,
    shortfall,
)
from src.office_presence.office_presence.attendance.model import Mark, MonthRecord
from src.office_presence.office_presence.core.enums import MarkStatus

P = MarkStatus.PRESENT
E = MarkStatus.EXCUSED

# June 2025 is the live month here.
LIVE_TODAY = date(2025, 6, 11)
# June 2025 is a past month here.
LATER_TODAY = date(2025, 7, 15)


def test_next_status_cycles():
    assert next_status(None) == P
    assert next_status(P) == E
    assert next_status(E) is None


def test_set_mark_sorts_and_replaces():
    marks = set_mark((), 12, P)
    marks = set_mark(marks, 3, P)
    marks = set_mark(marks, 12, E)

    assert marks == (Mark(3, P), Mark(12, E))


def test_set_mark_none_removes_and_is_idempotent():
    marks = set_mark((Mark(3, P),), 7, P)
    removed = set_mark(marks, 7, None)

    assert removed == (Mark(3, P),)
    assert set_mark(removed, 7, None) == removed
    assert set_mark(marks, 7, P) == marks


def test_toggle_is_a_three_cycle(ledger):
    start = (Mark(2, P),)
    value = date(2025, 6, 10)

    marks = start
    seen = []
    for _ in range(3):
        marks = ledger.toggle_day(marks, 10, value, today=LATER_TODAY)
        seen.append(current_status(marks, 10))

    assert seen == [P, E, None]
    assert marks == start


@pytest.mark.parametrize(
    "day, today",
    [
        (7, LATER_TODAY),  # Saturday
        (19, LATER_TODAY),  # public holiday
        (10, LIVE_TODAY),  # before today in the live month
    ],
)
def test_toggle_locked_days_is_noop(ledger, day, today):
    marks = (Mark(3, P),)

    assert ledger.toggle_day(marks, day, date(2025, 6, day), today=today) == marks


def test_today_and_future_days_of_live_month_are_mutable(ledger):
    assert ledger.toggle_day((), 11, date(2025, 6, 11), today=LIVE_TODAY) == (Mark(11, P),)
    assert ledger.toggle_day((), 12, date(2025, 6, 12), today=LIVE_TODAY) == (Mark(12, P),)


def test_past_days_of_other_months_are_mutable(ledger):
    assert ledger.toggle_day((), 2, date(2025, 6, 2), today=LATER_TODAY) == (Mark(2, P),)
    # Same day-of-month, other year: still not the live month.
    assert not ledger.is_locked(date(2024, 6, 3), today=LIVE_TODAY)


def test_workdays_exclude_weekends_holidays_and_excused(ledger):
    days = ledger.workdays(2025, 6, ())

    assert len(days) == 20
    assert 7 not in days and 8 not in days
    assert 19 not in days

    excused = ledger.workdays(2025, 6, (Mark(2, E),))
    assert len(excused) == 19
    assert 2 not in excused


def test_present_mark_on_non_workday_is_not_counted(ledger):
    marks = (Mark(2, P), Mark(7, P))
    days = ledger.workdays(2025, 6, marks)

    assert present_count(marks, days) == 1


def test_required_days_two_stage_rounding():
    assert required_days(40, 100, 20) == 8
    assert required_days(40, 50, 20) == 4
    # round(2.5) -> 3, then round(1.5) -> 2; a single rounding would give 1.
    assert required_days(50, 50, 5) == 2
    assert required_days(40, 100, 0) == 0


def test_attendance_percent_handles_zero_workdays():
    assert attendance_percent(0, 0) == 0
    assert attendance_percent(5, 20) == 25.0


def test_shortfall_not_negative():
    assert shortfall(8, 5) == 3
    assert shortfall(8, 10) == 0


def test_compute_stats_end_to_end(ledger):
    record = MonthRecord(marks=tuple(Mark(d, P) for d in (2, 3, 4, 5, 6)))

    stats = ledger.compute_stats(2025, 6, record)

    assert stats.workday_count == 20
    assert stats.present_count == 5
    assert stats.percent == 25.0
    assert stats.required_days == 8
    assert stats.shortfall == 3
    assert not stats.met


def test_compute_stats_scales_by_employment_fraction(ledger):
    record = MonthRecord(
        marks=tuple(Mark(d, P) for d in (2, 3, 4, 5)),
        required_percent=40,
        employment_fraction=50,
    )

    stats = ledger.compute_stats(2025, 6, record)

    assert stats.required_days == 4
    assert stats.met
