from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional

from ..common.datetime_utils import today_local
from ..common.locale import LocaleNames, get_locale
from ..common.validators import clamp_percent
from ..core.constants import DEFAULT_LOCALE
from ..core.enums import WriteMode
from ..core.exceptions import StoreReadError, StoreWriteError
from .codec import decode_record, encode_record
from .ledger import AttendanceLedger, current_status
from .model import DayCell, MonthKey, MonthRecord, MonthStats
from .repository import MonthRecordStore

logger = logging.getLogger(__name__)


@dataclass
class MonthView:
    """Local state of one month plus everything derived from it.

    `record` is updated before the store confirms a write. Statistics are
    recomputed on every access.
    """

    key: MonthKey
    record: MonthRecord
    today: date
    ledger: AttendanceLedger
    warnings: list[str] = field(default_factory=list)

    @property
    def stats(self) -> MonthStats:
        return self.ledger.compute_stats(self.key.year, self.key.month, self.record)

    def cells(self) -> list[DayCell]:
        out: list[DayCell] = []
        for cd in self.ledger.classifier.classify_month(self.key.year, self.key.month):
            out.append(
                DayCell(
                    day=cd.day,
                    weekday=cd.weekday,
                    kind=cd.kind,
                    status=current_status(self.record.marks, cd.day),
                    locked=self.ledger.is_locked(cd.date, today=self.today),
                )
            )
        return out

    def to_dict(self, locale: Optional[LocaleNames] = None) -> dict:
        locale = locale or get_locale(DEFAULT_LOCALE)
        stats = self.stats
        return {
            "month": self.key.year_month,
            "monthName": locale.month_name(self.key.month),
            "weekdayNames": list(locale.weekdays),
            "requiredPercent": self.record.required_percent,
            "employmentFraction": self.record.employment_fraction,
            "marks": [{"day": m.day, "status": m.status.value} for m in self.record.marks],
            "days": [
                {
                    "day": c.day,
                    "weekday": c.weekday,
                    "kind": c.kind.value,
                    "status": c.status.value if c.status else None,
                    "locked": c.locked,
                }
                for c in self.cells()
            ],
            "stats": {
                "workdays": stats.workday_count,
                "presentDays": stats.present_count,
                "percent": round(stats.percent, 1),
                "requiredDays": stats.required_days,
                "shortfall": stats.shortfall,
                "met": stats.met,
            },
            "warnings": list(self.warnings),
        }


class MonthService:
    """Use cases for one user's month: load, toggle a day, change settings."""

    def __init__(self, store: MonthRecordStore, ledger: AttendanceLedger, *, locale: str = DEFAULT_LOCALE):
        self._store = store
        self._ledger = ledger
        self._locale = get_locale(locale)

    @property
    def locale(self) -> LocaleNames:
        return self._locale

    def load_month(
        self,
        user_id: int,
        year: int,
        month: int,
        *,
        today: Optional[date] = None,
        lenient: bool = False,
    ) -> MonthView:
        """Read the month, creating the default record on first access.

        With `lenient=True` a failed read yields default values and a warning
        instead of raising StoreReadError.
        """
        today = today or today_local()
        key = MonthKey(user_id=int(user_id), year=int(year), month=int(month))

        try:
            record = self._read_record(key)
        except StoreReadError as e:
            if not lenient:
                raise
            logger.warning("Showing defaults for %s, user %s: %s", key.year_month, key.user_id, e)
            return MonthView(key=key, record=MonthRecord(), today=today, ledger=self._ledger, warnings=[str(e)])

        view = MonthView(key=key, record=MonthRecord(), today=today, ledger=self._ledger)
        if record is None:
            logger.info("Creating month record %s for user %s", key.year_month, key.user_id)
            self._persist(view, view.record, mode=WriteMode.REPLACE)
        else:
            view.record = record
        return view

    def toggle_day(self, user_id: int, year: int, month: int, day: int, *, today: Optional[date] = None) -> MonthView:
        view = self.load_month(user_id, year, month, today=today)
        previous = view.record

        marks = self._ledger.toggle_day(previous.marks, day, date(view.key.year, view.key.month, day), today=view.today)
        if marks == previous.marks:
            return view

        self._persist(view, replace(previous, marks=marks, upgraded_from_legacy=False), mode=self._mode_for(previous))
        return view

    def save_settings(
        self,
        user_id: int,
        year: int,
        month: int,
        *,
        required_percent: Optional[int] = None,
        employment_fraction: Optional[int] = None,
        today: Optional[date] = None,
    ) -> MonthView:
        """Update the target and employment fraction; None keeps the stored value."""
        view = self.load_month(user_id, year, month, today=today)
        previous = view.record
        if required_percent is None:
            required_percent = previous.required_percent
        if employment_fraction is None:
            employment_fraction = previous.employment_fraction
        record = replace(
            previous,
            required_percent=clamp_percent(required_percent),
            employment_fraction=clamp_percent(employment_fraction),
            upgraded_from_legacy=False,
        )
        self._persist(view, record, mode=self._mode_for(previous))
        return view

    def _read_record(self, key: MonthKey) -> Optional[MonthRecord]:
        doc = self._store.read(key)
        try:
            return decode_record(doc)
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Month %s for user %s cannot be decoded: %s", key.year_month, key.user_id, e)
            raise StoreReadError(f"Stored data for month {key.year_month} is unreadable") from e

    @staticmethod
    def _mode_for(previous: MonthRecord) -> WriteMode:
        # A legacy document still carries `days`; a merge would keep it around.
        return WriteMode.REPLACE if previous.upgraded_from_legacy else WriteMode.MERGE

    def _persist(self, view: MonthView, record: MonthRecord, *, mode: WriteMode) -> None:
        view.record = record
        try:
            self._store.write(view.key, encode_record(record), mode=mode)
        except StoreWriteError as e:
            logger.warning(
                "Write of %s for user %s failed, keeping local state: %s",
                view.key.year_month,
                view.key.user_id,
                e,
            )
            view.warnings.append(str(e))
