from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from src.office_presence.office_presence.attendance.ledger import AttendanceLedger
from src.office_presence.office_presence.attendance.model import MonthKey
from src.office_presence.office_presence.attendance.service import MonthService
from src.office_presence.office_presence.core.enums import WriteMode
from src.office_presence.office_presence.core.exceptions import StoreReadError, StoreWriteError
from src.office_presence.office_presence.users.model import User
from src.office_presence.office_presence.workdays.classifier import CalendarClassifier

# Polish public holidays for 2025. June 2025 has exactly 20 workdays with these.
PL_HOLIDAYS_2025 = {
    date(2025, 1, 1),
    date(2025, 1, 6),
    date(2025, 4, 20),
    date(2025, 4, 21),
    date(2025, 5, 1),
    date(2025, 5, 3),
    date(2025, 6, 8),
    date(2025, 6, 19),
    date(2025, 8, 15),
    date(2025, 11, 1),
    date(2025, 11, 11),
    date(2025, 12, 25),
    date(2025, 12, 26),
}


class FakeHolidays:
    def __init__(self, by_year: Optional[dict[int, set[date]]] = None):
        self.by_year = by_year if by_year is not None else {2025: set(PL_HOLIDAYS_2025)}
        self.calls: list[tuple[str, int]] = []

    def public_holidays(self, region: str, year: int) -> set[date]:
        self.calls.append((region, year))
        return set(self.by_year.get(year, set()))


class InMemoryMonthStore:
    def __init__(self):
        self.docs: dict[tuple[int, str], dict] = {}
        self.writes: list[tuple[MonthKey, dict, WriteMode]] = []
        self.fail_reads = False
        self.fail_writes = False

    def read(self, key: MonthKey) -> Optional[dict]:
        if self.fail_reads:
            raise StoreReadError(f"Could not read month {key.year_month}")
        doc = self.docs.get((key.user_id, key.year_month))
        return dict(doc) if doc is not None else None

    def write(self, key: MonthKey, document: dict, *, mode: WriteMode) -> None:
        if self.fail_writes:
            raise StoreWriteError(f"Could not save month {key.year_month}")
        self.writes.append((key, dict(document), mode))
        k = (key.user_id, key.year_month)
        if mode == WriteMode.MERGE and k in self.docs:
            merged = dict(self.docs[k])
            merged.update(document)
            self.docs[k] = merged
        else:
            self.docs[k] = dict(document)
        self.docs[k]["updatedAt"] = len(self.writes)


class InMemoryUsers:
    def __init__(self):
        self.by_id: dict[int, User] = {}

    def get_by_email(self, email: str) -> Optional[User]:
        for u in self.by_id.values():
            if u.email == email:
                return u
        return None

    def create_user(self, *, email: str, password_hash: str) -> int:
        user_id = len(self.by_id) + 1
        self.by_id[user_id] = User(user_id=user_id, email=email, password_hash=password_hash)
        return user_id


@pytest.fixture
def holidays_provider():
    return FakeHolidays()


@pytest.fixture
def classifier(holidays_provider):
    return CalendarClassifier(holidays_provider, region="PL")


@pytest.fixture
def ledger(classifier):
    return AttendanceLedger(classifier)


@pytest.fixture
def store():
    return InMemoryMonthStore()


@pytest.fixture
def month_service(store, ledger):
    return MonthService(store, ledger, locale="en")


@pytest.fixture
def users_repo():
    return InMemoryUsers()
