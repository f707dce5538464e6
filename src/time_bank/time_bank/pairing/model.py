from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DayAggregate:
    """Derived result of one employee's punches on one local calendar day.

    Recomputed on every query and never persisted.
    """

    employee_id: str
    work_date: date
    worked_minutes: int
    break_minutes: int
    has_complete_pair: bool
    overtime_minutes: int = 0
