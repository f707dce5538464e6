from __future__ import annotations

from datetime import date, tzinfo
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import to_local
from .model import Employee, PunchRecord
from .parser import ensure_valid, parse_punches


class InMemoryPunchRepository:
    """Snapshot-backed punch store used when the host hands punches over directly."""

    def __init__(self, punches: Iterable[PunchRecord] = (), *, tz: Optional[tzinfo] = None):
        self._punches = list(punches)
        self._tz = tz

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, Any]], *, tz: Optional[tzinfo] = None) -> "InMemoryPunchRepository":
        """Load store-shaped rows; a single malformed row rejects the whole snapshot."""
        return cls(parse_punches(rows), tz=tz)

    def get_punches(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[PunchRecord]:
        out = []
        for p in self._punches:
            ensure_valid(p)
            if employee_id is not None and p.employee_id != employee_id:
                continue
            ts = to_local(p.timestamp, self._tz) if self._tz else p.timestamp
            if start_date <= ts.date() <= end_date:
                out.append(p)
        return out


class InMemoryRosterRepository:
    def __init__(self, employees: Iterable[Employee] = ()):
        self._by_id = {e.employee_id: e for e in employees}

    def list_employees(self) -> Sequence[Employee]:
        return sorted(self._by_id.values(), key=lambda e: e.display_name)

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)
