from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import format_year_month
from ..core.constants import DEFAULT_EMPLOYMENT_FRACTION, DEFAULT_REQUIRED_PERCENT
from ..core.enums import DayKind, MarkStatus


@dataclass(frozen=True)
class Mark:
    """Status recorded for one day of a month."""

    day: int
    status: MarkStatus


@dataclass(frozen=True)
class MonthKey:
    user_id: int
    year: int
    month: int

    @property
    def year_month(self) -> str:
        return format_year_month(self.year, self.month)


@dataclass(frozen=True)
class MonthRecord:
    """Persisted attendance settings and marks for one user and month.

    `upgraded_from_legacy` is never stored; it tells the writer that the
    stored document still has the old `days` shape and must be replaced.
    """

    marks: tuple[Mark, ...] = ()
    required_percent: int = DEFAULT_REQUIRED_PERCENT
    employment_fraction: int = DEFAULT_EMPLOYMENT_FRACTION
    upgraded_from_legacy: bool = False


@dataclass(frozen=True)
class MonthStats:
    workdays: tuple[int, ...]
    present_count: int
    percent: float
    required_days: int
    shortfall: int

    @property
    def workday_count(self) -> int:
        return len(self.workdays)

    @property
    def met(self) -> bool:
        return self.shortfall == 0


@dataclass(frozen=True)
class DayCell:
    """Read-model for rendering one day of the month grid."""

    day: int
    weekday: int
    kind: DayKind
    status: Optional[MarkStatus]
    locked: bool
