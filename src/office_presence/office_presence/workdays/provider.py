from __future__ import annotations

import logging
from datetime import date
from typing import Protocol

import holidays

logger = logging.getLogger(__name__)


class HolidayProvider(Protocol):
    def public_holidays(self, region: str, year: int) -> set[date]:
        raise NotImplementedError


class CountryHolidayProvider(HolidayProvider):
    """Public holidays from the `holidays` package.

    Unsupported regions yield an empty set instead of failing.
    """

    def public_holidays(self, region: str, year: int) -> set[date]:
        try:
            calendar = holidays.country_holidays(region, years=year)
        except NotImplementedError:
            logger.warning("No holiday data for region %r, using an empty holiday set", region)
            return set()
        return {d for d in calendar.keys() if d.year == year}
