from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable, Mapping

from ..core.enums import PunchKind
from ..core.exceptions import MalformedPunchError
from .model import PunchRecord


def _is_date_only(text: str) -> bool:
    try:
        date.fromisoformat(text)
    except ValueError:
        return False
    return True


def parse_timestamp(value: Any, *, record: Any = None) -> datetime:
    """Accept a datetime or an ISO-8601 string; anything else is malformed."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if _is_date_only(text):
            raise MalformedPunchError(f"Punch timestamp without time of day: {value!r}", record)
        try:
            return datetime.fromisoformat(text)
        except ValueError as e:
            raise MalformedPunchError(f"Unparseable punch timestamp: {value!r}", record) from e
    raise MalformedPunchError(f"Invalid punch timestamp: {value!r}", record)


def parse_kind(value: Any, *, record: Any = None) -> PunchKind:
    if isinstance(value, PunchKind):
        return value
    try:
        return PunchKind(str(value).strip().lower())
    except ValueError as e:
        raise MalformedPunchError(f"Unknown punch kind: {value!r}", record) from e


def parse_punch(row: Mapping[str, Any]) -> PunchRecord:
    """Build a PunchRecord from a raw store row.

    Rows use the store's column names: ``user_id`` (or ``employee_id``),
    ``clock_type`` and ``timestamp``.
    """
    employee_id = row.get("user_id") or row.get("employee_id")
    if not employee_id:
        raise MalformedPunchError("Punch without employee id", row)
    return PunchRecord(
        employee_id=str(employee_id),
        kind=parse_kind(row.get("clock_type"), record=row),
        timestamp=parse_timestamp(row.get("timestamp"), record=row),
    )


def parse_punches(rows: Iterable[Mapping[str, Any]]) -> list[PunchRecord]:
    return [parse_punch(r) for r in rows]


def ensure_valid(punch: PunchRecord) -> PunchRecord:
    """Re-check a record handed over by the caller before any aggregation."""
    if not punch.employee_id:
        raise MalformedPunchError("Punch without employee id", punch)
    if not isinstance(punch.kind, PunchKind):
        raise MalformedPunchError(f"Unknown punch kind: {punch.kind!r}", punch)
    if not isinstance(punch.timestamp, datetime):
        raise MalformedPunchError(f"Invalid punch timestamp: {punch.timestamp!r}", punch)
    return punch
