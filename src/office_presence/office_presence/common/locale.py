"""Display names for weekdays and months.

Only used when rendering a month view; never affects the calculations.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LocaleNames:
    code: str
    weekdays: tuple[str, ...]  # Monday first
    months: tuple[str, ...]  # January first

    def weekday_name(self, weekday: int) -> str:
        return self.weekdays[weekday]

    def month_name(self, month: int) -> str:
        return self.months[month - 1]


_LOCALES = {
    "pl": LocaleNames(
        code="pl",
        weekdays=("Pon", "Wt", "Śr", "Czw", "Pt", "Sob", "Nd"),
        months=(
            "styczeń", "luty", "marzec", "kwiecień", "maj", "czerwiec",
            "lipiec", "sierpień", "wrzesień", "październik", "listopad", "grudzień",
        ),
    ),
    "en": LocaleNames(
        code="en",
        weekdays=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
        months=(
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ),
    ),
}


def get_locale(code: str) -> LocaleNames:
    # Unknown codes fall back to English.
    return _LOCALES.get((code or "").lower(), _LOCALES["en"])
