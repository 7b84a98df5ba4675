from __future__ import annotations

import logging
from typing import Optional

import mysql.connector

from ..core.exceptions import StoreReadError, StoreWriteError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["user_id"]),
        email=row["email"],
        password_hash=row["password_hash"],
        is_active=bool(row.get("is_active", True)),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[User]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    SELECT user_id, email, password_hash, is_active
                    FROM users
                    WHERE email=%s
                    """,
                    (email,),
                )
                row = fetchone(cur)
        except mysql.connector.Error as e:
            logger.error("Looking up user by email failed: %s", e)
            raise StoreReadError("Could not read user accounts") from e
        return _to_user(row) if row else None

    def create_user(self, *, email: str, password_hash: str) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO users(email, password_hash, is_active)
                    VALUES(%s,%s,1)
                    """,
                    (email, password_hash),
                )
                return int(cur.lastrowid)
        except mysql.connector.Error as e:
            logger.error("Creating user failed: %s", e)
            raise StoreWriteError("Could not create the account") from e
