from __future__ import annotations

from enum import Enum


class MarkStatus(str, Enum):
    """Recorded status of a single day. An unmarked day has no Mark at all."""

    PRESENT = "present"
    EXCUSED = "excused"


class DayKind(str, Enum):
    """Calendar classification of a day-of-month."""

    WEEKEND = "weekend"
    HOLIDAY = "holiday"
    CALENDAR = "calendar"


class WriteMode(str, Enum):
    """How a document write combines with what is already stored."""

    REPLACE = "replace"
    MERGE = "merge"
