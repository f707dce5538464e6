from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, timedelta
from typing import Optional, Sequence

from ..alerts.evaluator import AlertEvaluator
from ..common.datetime_utils import month_bounds, now_local, week_start
from ..core.exceptions import ValidationError
from ..core.settings import EngineSettings
from ..pairing.model import DayAggregate
from ..pairing.service import DailyPairingEngine
from ..punches.model import Employee
from ..punches.repository import PunchRepository, RosterRepository
from ..timebank.aggregator import WeeklyAggregator
from ..timebank.calculator.base import TimeBankCalculator
from ..timebank.calculator.standard_calculator import StandardTimeBankCalculator
from .model import TimeBankReport

logger = logging.getLogger(__name__)


def resolve_employees(roster: RosterRepository, employee_id: Optional[str]) -> Sequence[Employee]:
    if employee_id is None:
        return roster.list_employees()
    employee = roster.get_by_id(employee_id)
    if employee is None:
        raise ValidationError(f"Unknown employee: {employee_id}")
    return [employee]


class TimeBankReportService:
    """Store -> daily pairing -> weekly/monthly aggregation -> time-bank -> alerts.

    A pure fold over the punch snapshot of the queried range. One read of the
    punch store covers both the month and the current week.
    """

    def __init__(
        self,
        punches: PunchRepository,
        roster: RosterRepository,
        *,
        settings: Optional[EngineSettings] = None,
        engine: Optional[DailyPairingEngine] = None,
        aggregator: Optional[WeeklyAggregator] = None,
        calculator: Optional[TimeBankCalculator] = None,
        evaluator: Optional[AlertEvaluator] = None,
    ):
        self._punches = punches
        self._roster = roster
        self._settings = settings or EngineSettings()
        self._engine = engine or DailyPairingEngine(self._settings)
        self._aggregator = aggregator or WeeklyAggregator()
        self._calculator = calculator or StandardTimeBankCalculator(self._settings, aggregator=self._aggregator)
        self._evaluator = evaluator or AlertEvaluator(self._settings)

    def today(self) -> date:
        return now_local(self._settings.tzinfo).date()

    def build_monthly_report(
        self,
        *,
        month: date,
        employee_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> TimeBankReport:
        today = today or self.today()
        first, last = month_bounds(month)
        current_start = week_start(today)
        current_end = current_start + timedelta(days=6)
        ranges = self._read_ranges(first, last, current_start, current_end)

        employees = resolve_employees(self._roster, employee_id)
        punches = []
        for start, end in ranges:
            punches.extend(self._punches.get_punches(start_date=start, end_date=end, employee_id=employee_id))
        days_by_employee = self._days_by_employee(self._engine.aggregate(punches), ranges)

        time_banks = [
            self._calculator.build_time_bank(emp, first, days_by_employee.get(emp.employee_id, []))
            for emp in employees
        ]

        current_weeks = [
            self._aggregator.build_week(
                emp.employee_id,
                current_start,
                [d for d in days_by_employee.get(emp.employee_id, []) if current_start <= d.work_date <= current_end],
            )
            for emp in employees
        ]
        alerts = self._evaluator.evaluate_all(employees, current_weeks, today=today)

        logger.info(
            "Time-bank report for %s: employees=%d punches=%d alerts=%d",
            first.strftime("%Y-%m"),
            len(employees),
            len(punches),
            len(alerts),
        )
        return TimeBankReport(month=first, today=today, time_banks=time_banks, alerts=alerts)

    def build_current_alerts(self, *, employee_id: Optional[str] = None, today: Optional[date] = None):
        today = today or self.today()
        return self.build_monthly_report(month=today.replace(day=1), employee_id=employee_id, today=today).alerts

    @staticmethod
    def _read_ranges(first: date, last: date, current_start: date, current_end: date) -> list[tuple[date, date]]:
        """One read when the current week overlaps or touches the month, two otherwise."""
        one_day = timedelta(days=1)
        if current_start <= last + one_day and current_end >= first - one_day:
            return [(min(first, current_start), max(last, current_end))]
        return [(first, last), (current_start, current_end)]

    def _days_by_employee(
        self, days: Sequence[DayAggregate], ranges: Sequence[tuple[date, date]]
    ) -> dict[str, list[DayAggregate]]:
        grouped: dict[str, list[DayAggregate]] = defaultdict(list)
        for d in days:
            if not any(start <= d.work_date <= end for start, end in ranges):
                logger.warning("Ignoring punches of employee=%s on %s outside the queried range", d.employee_id, d.work_date)
                continue
            grouped[d.employee_id].append(d)
        return grouped
