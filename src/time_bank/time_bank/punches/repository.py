from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Employee, PunchRecord


class PunchRepository(Protocol):
    def get_punches(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[PunchRecord]:
        """Punches whose local date falls in [start_date, end_date]."""

        raise NotImplementedError


class RosterRepository(Protocol):
    def list_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError
