"""Translate stored month documents to and from MonthRecord.

Two stored shapes exist: the legacy one keeps only a flat `days` list of
present days, the current one keeps `marks` with a status per day. Both
decode to the same MonthRecord; only the current shape is ever encoded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from ..core.constants import DEFAULT_EMPLOYMENT_FRACTION, DEFAULT_REQUIRED_PERCENT
from ..core.enums import MarkStatus
from .ledger import set_mark
from .model import Mark, MonthRecord


@dataclass(frozen=True)
class LegacyDays:
    days: tuple[int, ...]
    required_percent: int


@dataclass(frozen=True)
class MarksShape:
    marks: tuple[Mark, ...]
    required_percent: int
    employment_fraction: int


StoredShape = Union[LegacyDays, MarksShape]


def _int_or(value: Any, default: int) -> int:
    if value is None:
        return default
    return int(value)


def read_shape(doc: Mapping[str, Any]) -> StoredShape:
    required = _int_or(doc.get("requiredPercent"), DEFAULT_REQUIRED_PERCENT)
    if "marks" not in doc and "days" in doc:
        return LegacyDays(days=tuple(int(d) for d in doc.get("days") or ()), required_percent=required)

    marks: tuple[Mark, ...] = ()
    for raw in doc.get("marks") or ():
        marks = set_mark(marks, int(raw["day"]), MarkStatus(raw["status"]))
    return MarksShape(
        marks=marks,
        required_percent=required,
        employment_fraction=_int_or(doc.get("employmentFraction"), DEFAULT_EMPLOYMENT_FRACTION),
    )


def decode_record(doc: Optional[Mapping[str, Any]]) -> Optional[MonthRecord]:
    if doc is None:
        return None

    shape = read_shape(doc)
    if isinstance(shape, LegacyDays):
        marks: tuple[Mark, ...] = ()
        for day in shape.days:
            marks = set_mark(marks, day, MarkStatus.PRESENT)
        return MonthRecord(
            marks=marks,
            required_percent=shape.required_percent,
            employment_fraction=DEFAULT_EMPLOYMENT_FRACTION,
            upgraded_from_legacy=True,
        )

    return MonthRecord(
        marks=shape.marks,
        required_percent=shape.required_percent,
        employment_fraction=shape.employment_fraction,
    )


def encode_record(record: MonthRecord) -> dict:
    return {
        "marks": [{"day": m.day, "status": m.status.value} for m in record.marks],
        "requiredPercent": int(record.required_percent),
        "employmentFraction": int(record.employment_fraction),
    }
