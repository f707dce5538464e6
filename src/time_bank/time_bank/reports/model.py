from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..alerts.model import OvertimeAlert
from ..timebank.model import MonthlyTimeBank, WeekAggregate


@dataclass(frozen=True)
class TimeBankReport:
    month: date
    today: date
    time_banks: list[MonthlyTimeBank]
    alerts: list[OvertimeAlert]

    @property
    def weeks(self) -> list[WeekAggregate]:
        return [w for tb in self.time_banks for w in tb.weeks]


@dataclass(frozen=True)
class FrequencyStats:
    """Read-model of the attendance frequency report."""

    employee_id: str
    display_name: str
    job_title: Optional[str]
    work_days: int
    days_worked: int
    absences: int
    total_minutes: int
    avg_hours_per_day: float
    rate: float

    @property
    def total_hours(self) -> float:
        return self.total_minutes / 60
