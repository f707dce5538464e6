from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable

from ..common.datetime_utils import weekday_count, week_start
from ..core.constants import DAILY_WORK_HOURS
from ..pairing.model import DayAggregate
from .model import DailyHours, WeekAggregate


def expected_hours(year: int, month: int, *, daily_hours: int = DAILY_WORK_HOURS) -> int:
    """Expected hours from the calendar alone: weekdays x daily hours.

    Part-time contracts, holidays and approved absences are not taken into
    account.
    """
    return weekday_count(year, month) * daily_hours


class WeeklyAggregator:
    """Folds DayAggregates into Monday-start WeekAggregates per employee."""

    def build_weeks(self, days: Iterable[DayAggregate]) -> list[WeekAggregate]:
        buckets: dict[tuple[str, date], list[DayAggregate]] = defaultdict(list)
        for d in days:
            buckets[(d.employee_id, week_start(d.work_date))].append(d)

        weeks = []
        for employee_id, start in sorted(buckets):
            weeks.append(self.build_week(employee_id, start, buckets[(employee_id, start)]))
        return weeks

    def build_week(self, employee_id: str, start: date, days: Iterable[DayAggregate]) -> WeekAggregate:
        complete = sorted((d for d in days if d.has_complete_pair), key=lambda d: d.work_date)
        return WeekAggregate(
            employee_id=employee_id,
            week_start=start,
            worked_minutes=sum(d.worked_minutes for d in complete),
            overtime_minutes=sum(d.overtime_minutes for d in complete),
            daily_breakdown=tuple(DailyHours(work_date=d.work_date, minutes=d.worked_minutes) for d in complete),
        )
