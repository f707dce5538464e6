from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ...common.datetime_utils import month_bounds
from ...core.constants import MINUTES_PER_HOUR
from ...core.settings import EngineSettings
from ...pairing.model import DayAggregate
from ...punches.model import Employee
from ..aggregator import WeeklyAggregator, expected_hours
from ..model import MonthlyTimeBank, WeekAggregate
from .base import TimeBankCalculator


class StandardTimeBankCalculator(TimeBankCalculator):
    """Standard rule: balance = worked - expected; overtime = sum of daily overtime.

    A 10h day adds 10h to worked and 2h to overtime; the two are never
    subtracted from each other.
    """

    def __init__(self, settings: Optional[EngineSettings] = None, *, aggregator: Optional[WeeklyAggregator] = None):
        self._settings = settings or EngineSettings()
        self._aggregator = aggregator or WeeklyAggregator()

    def balance_hours(self, worked_hours: float, expected_hours: float) -> float:
        return worked_hours - expected_hours

    def monthly_overtime_minutes(self, weeks: Iterable[WeekAggregate]) -> int:
        return sum(w.overtime_minutes for w in weeks)

    def build_time_bank(self, employee: Employee, month: date, days: Sequence[DayAggregate]) -> MonthlyTimeBank:
        first, last = month_bounds(month)
        in_month = [d for d in days if d.employee_id == employee.employee_id and first <= d.work_date <= last]
        weeks = self._aggregator.build_weeks(in_month)

        worked_minutes = sum(w.worked_minutes for w in weeks)
        expected = expected_hours(first.year, first.month, daily_hours=self._settings.daily_work_hours)

        return MonthlyTimeBank(
            employee_id=employee.employee_id,
            display_name=employee.display_name,
            job_title=employee.job_title,
            month=first,
            expected_hours=expected,
            worked_minutes=worked_minutes,
            overtime_minutes=self.monthly_overtime_minutes(weeks),
            balance_hours=self.balance_hours(worked_minutes / MINUTES_PER_HOUR, expected),
            weeks=tuple(weeks),
        )
