from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import week_start
from ..core.enums import AlertSeverity
from ..core.settings import EngineSettings
from ..punches.model import Employee
from ..timebank.model import WeekAggregate
from .model import OvertimeAlert

logger = logging.getLogger(__name__)


class AlertEvaluator:
    """Pure threshold function over the current week's aggregate.

    DANGER from the weekly threshold (40h) upwards, WARNING from
    ``warning_ratio`` of it (32h), nothing below.
    """

    def __init__(self, settings: Optional[EngineSettings] = None):
        self._settings = settings or EngineSettings()

    @property
    def danger_hours(self) -> float:
        return float(self._settings.weekly_work_hours)

    @property
    def warning_hours(self) -> float:
        return self._settings.weekly_work_hours * self._settings.warning_ratio

    def severity_for(self, weekly_hours: float) -> Optional[AlertSeverity]:
        if weekly_hours >= self.danger_hours:
            return AlertSeverity.DANGER
        if weekly_hours >= self.warning_hours:
            return AlertSeverity.WARNING
        return None

    def evaluate(self, employee: Employee, week: WeekAggregate) -> Optional[OvertimeAlert]:
        hours = week.worked_hours
        severity = self.severity_for(hours)
        if severity is None:
            return None
        return OvertimeAlert(
            employee_id=employee.employee_id,
            display_name=employee.display_name,
            weekly_worked_hours=hours,
            weekly_overtime_hours=max(0.0, hours - self.danger_hours),
            severity=severity,
        )

    def evaluate_all(
        self,
        employees: Iterable[Employee],
        weeks: Iterable[WeekAggregate],
        *,
        today: date,
    ) -> list[OvertimeAlert]:
        """Alerts for the week containing ``today``; other weeks are ignored."""
        current = week_start(today)
        by_employee = {w.employee_id: w for w in weeks if w.week_start == current}

        alerts = []
        for emp in employees:
            week = by_employee.get(emp.employee_id)
            if week is None:
                continue
            alert = self.evaluate(emp, week)
            if alert is not None:
                logger.info(
                    "Overtime %s for employee=%s: %.1fh this week",
                    alert.severity.value,
                    emp.employee_id,
                    alert.weekly_worked_hours,
                )
                alerts.append(alert)
        return alerts
