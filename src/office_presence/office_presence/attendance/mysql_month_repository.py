from __future__ import annotations

import json
import logging
from typing import Any, Optional

import mysql.connector

from ..core.enums import WriteMode
from ..core.exceptions import StoreReadError, StoreWriteError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import MonthKey
from .repository import MonthRecordStore

logger = logging.getLogger(__name__)


def _load_document(raw: Any) -> dict[str, Any]:
    if raw is None:
        return {}
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if isinstance(raw, str):
        return dict(json.loads(raw))
    return dict(raw)


class MySQLMonthRecordStore(MonthRecordStore):
    """Month documents stored as JSON, one row per (user_id, month_key)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def read(self, key: MonthKey) -> Optional[dict[str, Any]]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    SELECT document, updated_at
                    FROM month_records
                    WHERE user_id=%s AND month_key=%s
                    """,
                    (key.user_id, key.year_month),
                )
                row = fetchone(cur)
        except mysql.connector.Error as e:
            logger.error("Reading month %s for user %s failed: %s", key.year_month, key.user_id, e)
            raise StoreReadError(f"Could not read month {key.year_month}") from e

        if not row:
            return None
        try:
            doc = _load_document(row["document"])
        except (TypeError, ValueError) as e:
            logger.error("Month %s for user %s holds a corrupt document: %s", key.year_month, key.user_id, e)
            raise StoreReadError(f"Stored data for month {key.year_month} is unreadable") from e
        doc["updatedAt"] = row.get("updated_at")
        return doc

    def write(self, key: MonthKey, document: dict[str, Any], *, mode: WriteMode) -> None:
        doc = {k: v for k, v in document.items() if k != "updatedAt"}
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                if mode == WriteMode.MERGE:
                    cur.execute(
                        """
                        SELECT document
                        FROM month_records
                        WHERE user_id=%s AND month_key=%s
                        FOR UPDATE
                        """,
                        (key.user_id, key.year_month),
                    )
                    row = fetchone(cur)
                    if row:
                        merged = _load_document(row["document"])
                        merged.update(doc)
                        doc = merged

                cur.execute(
                    """
                    INSERT INTO month_records(user_id, month_key, document, updated_at)
                    VALUES(%s,%s,%s,CURRENT_TIMESTAMP)
                    ON DUPLICATE KEY UPDATE document=VALUES(document), updated_at=CURRENT_TIMESTAMP
                    """,
                    (key.user_id, key.year_month, json.dumps(doc)),
                )
        except (mysql.connector.Error, TypeError, ValueError) as e:
            logger.error("Writing month %s for user %s failed: %s", key.year_month, key.user_id, e)
            raise StoreWriteError(f"Could not save month {key.year_month}") from e
