from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from flask import session

from .attendance.ledger import AttendanceLedger
from .attendance.mysql_month_repository import MySQLMonthRecordStore
from .attendance.repository import MonthRecordStore
from .attendance.service import MonthService
from .core.constants import DEFAULT_HOLIDAY_REGION, DEFAULT_LOCALE
from .database.connection import DBConfig, DatabaseConnection
from .users.identity import SessionIdentityProvider
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService
from .workdays.classifier import CalendarClassifier
from .workdays.provider import HolidayProvider


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    month_store: MonthRecordStore

    classifier: CalendarClassifier
    ledger: AttendanceLedger
    identity: SessionIdentityProvider

    auth_service: AuthService
    month_service: MonthService


def assemble_container(
    *,
    users_repo: UserRepository,
    month_store: MonthRecordStore,
    conn: Optional[DatabaseConnection] = None,
    holiday_provider: Optional[HolidayProvider] = None,
    holiday_region: str = DEFAULT_HOLIDAY_REGION,
    locale: str = DEFAULT_LOCALE,
) -> Container:
    classifier = CalendarClassifier(holiday_provider, region=holiday_region)
    ledger = AttendanceLedger(classifier)

    return Container(
        conn=conn,
        users_repo=users_repo,
        month_store=month_store,
        classifier=classifier,
        ledger=ledger,
        identity=SessionIdentityProvider(lambda: session),
        auth_service=AuthService(users_repo),
        month_service=MonthService(month_store, ledger, locale=locale),
    )


def build_container(
    *,
    db_config: dict,
    holiday_region: str = DEFAULT_HOLIDAY_REGION,
    locale: str = DEFAULT_LOCALE,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble_container(
        users_repo=MySQLUserRepository(conn),
        month_store=MySQLMonthRecordStore(conn),
        conn=conn,
        holiday_region=holiday_region,
        locale=locale,
    )
