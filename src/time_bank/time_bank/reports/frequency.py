from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Optional

from ..common.datetime_utils import weekday_count_between
from ..common.validators import require_date_range
from ..core.enums import PunchKind
from ..core.settings import EngineSettings
from ..pairing.service import DailyPairingEngine
from ..punches.repository import PunchRepository, RosterRepository
from .model import FrequencyStats
from .service import resolve_employees

logger = logging.getLogger(__name__)


class FrequencyReportService:
    """Attendance frequency over an arbitrary date range.

    A day counts as worked when it has at least one Entry punch; hours only
    come from days with a complete pair.
    """

    def __init__(
        self,
        punches: PunchRepository,
        roster: RosterRepository,
        *,
        settings: Optional[EngineSettings] = None,
        engine: Optional[DailyPairingEngine] = None,
    ):
        self._punches = punches
        self._roster = roster
        self._settings = settings or EngineSettings()
        self._engine = engine or DailyPairingEngine(self._settings)

    def build(self, *, start: date, end: date, employee_id: Optional[str] = None) -> list[FrequencyStats]:
        require_date_range(start, end)
        employees = resolve_employees(self._roster, employee_id)
        punches = self._punches.get_punches(start_date=start, end_date=end, employee_id=employee_id)

        localized = [self._engine.localize(p) for p in punches]
        days = self._engine.aggregate(localized)

        entry_days: dict[str, set[date]] = defaultdict(set)
        for p in localized:
            if p.kind == PunchKind.ENTRY and start <= p.timestamp.date() <= end:
                entry_days[p.employee_id].add(p.timestamp.date())

        minutes: dict[str, int] = defaultdict(int)
        for d in days:
            if d.has_complete_pair and start <= d.work_date <= end:
                minutes[d.employee_id] += d.worked_minutes

        work_days = weekday_count_between(start, end)
        out = []
        for emp in employees:
            days_worked = len(entry_days.get(emp.employee_id, ()))
            total_minutes = minutes.get(emp.employee_id, 0)
            total_hours = total_minutes / 60
            out.append(
                FrequencyStats(
                    employee_id=emp.employee_id,
                    display_name=emp.display_name,
                    job_title=emp.job_title,
                    work_days=work_days,
                    days_worked=days_worked,
                    absences=max(0, work_days - days_worked),
                    total_minutes=total_minutes,
                    avg_hours_per_day=total_hours / days_worked if days_worked else 0.0,
                    rate=days_worked * 100 / work_days if work_days else 0.0,
                )
            )

        logger.info("Frequency report %s..%s: employees=%d", start, end, len(out))
        return out
