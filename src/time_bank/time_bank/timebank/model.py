from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.constants import MINUTES_PER_HOUR


@dataclass(frozen=True)
class DailyHours:
    work_date: date
    minutes: int

    @property
    def hours(self) -> float:
        return self.minutes / MINUTES_PER_HOUR


@dataclass(frozen=True)
class WeekAggregate:
    """Monday-start week of one employee, kept at minute precision."""

    employee_id: str
    week_start: date
    worked_minutes: int
    overtime_minutes: int
    daily_breakdown: tuple[DailyHours, ...] = ()

    @property
    def worked_hours(self) -> float:
        return self.worked_minutes / MINUTES_PER_HOUR

    @property
    def overtime_hours(self) -> float:
        return self.overtime_minutes / MINUTES_PER_HOUR


@dataclass(frozen=True)
class MonthlyTimeBank:
    """Time-bank of one employee for one month.

    ``balance_hours`` is worked minus expected: positive is a surplus, negative a
    deficit. Overtime is a separate view over the same worked minutes.
    """

    employee_id: str
    display_name: str
    month: date
    expected_hours: int
    worked_minutes: int
    overtime_minutes: int
    balance_hours: float
    job_title: Optional[str] = None
    weeks: tuple[WeekAggregate, ...] = field(default=())

    @property
    def worked_hours(self) -> float:
        return self.worked_minutes / MINUTES_PER_HOUR

    @property
    def overtime_hours(self) -> float:
        return self.overtime_minutes / MINUTES_PER_HOUR
