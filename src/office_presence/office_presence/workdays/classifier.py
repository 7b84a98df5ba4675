from __future__ import annotations

import threading
from datetime import date
from typing import Optional

from ..common.datetime_utils import days_in_month
from ..core.constants import DEFAULT_HOLIDAY_REGION
from .model import CalendarDay
from .provider import CountryHolidayProvider, HolidayProvider


def is_weekend(value: date) -> bool:
    return value.weekday() >= 5


class CalendarClassifier:
    """Classify days as weekend, public holiday or plain calendar day.

    Holiday sets are fetched once per year and cached per year; the cache
    is shared between requests, so it is guarded by a lock.
    """

    def __init__(self, provider: Optional[HolidayProvider] = None, *, region: str = DEFAULT_HOLIDAY_REGION):
        self._provider = provider or CountryHolidayProvider()
        self._region = region
        self._holidays_by_year: dict[int, frozenset[date]] = {}
        self._lock = threading.Lock()

    @property
    def region(self) -> str:
        return self._region

    def holidays_for(self, year: int) -> frozenset[date]:
        with self._lock:
            cached = self._holidays_by_year.get(year)
            if cached is None:
                cached = frozenset(self._provider.public_holidays(self._region, year))
                self._holidays_by_year[year] = cached
            return cached

    def is_weekend(self, value: date) -> bool:
        return is_weekend(value)

    def is_public_holiday(self, value: date, year: int) -> bool:
        return value in self.holidays_for(year)

    def is_obligatory_candidate(self, value: date, year: int) -> bool:
        return not self.is_weekend(value) and not self.is_public_holiday(value, year)

    def classify_month(self, year: int, month: int) -> list[CalendarDay]:
        out: list[CalendarDay] = []
        for day in range(1, days_in_month(year, month) + 1):
            d = date(year, month, day)
            out.append(
                CalendarDay(
                    day=day,
                    date=d,
                    weekday=d.weekday(),
                    is_weekend=self.is_weekend(d),
                    is_holiday=self.is_public_holiday(d, year),
                )
            )
        return out
