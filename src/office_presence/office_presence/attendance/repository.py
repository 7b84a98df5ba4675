from __future__ import annotations

from typing import Any, Optional, Protocol

from ..core.enums import WriteMode
from .model import MonthKey


class MonthRecordStore(Protocol):
    """Document store for month records, keyed by (user_id, "YYYY-MM").

    Implementations stamp every write with a server-side `updatedAt`.
    Failures surface as StoreReadError / StoreWriteError.
    """

    def read(self, key: MonthKey) -> Optional[dict[str, Any]]:
        raise NotImplementedError

    def write(self, key: MonthKey, document: dict[str, Any], *, mode: WriteMode) -> None:
        """REPLACE overwrites the stored document; MERGE updates its top-level fields."""

        raise NotImplementedError
