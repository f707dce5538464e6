"""Plain rows for tables and CSV export.

Hours are rounded to one decimal here and nowhere else.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ..alerts.model import OvertimeAlert
from ..core.constants import DEFAULT_JOB_TITLE
from ..core.enums import AlertSeverity
from ..timebank.model import MonthlyTimeBank
from .model import FrequencyStats, TimeBankReport


def round_hours(value: float) -> float:
    """One decimal, half away from zero (2.25 -> 2.3, -2.25 -> -2.3)."""
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def time_bank_rows(report: TimeBankReport) -> list[dict]:
    return [
        {
            "employee_id": tb.employee_id,
            "name": tb.display_name,
            "job_title": tb.job_title or DEFAULT_JOB_TITLE,
            "month": tb.month.strftime("%Y-%m"),
            "expected_hours": tb.expected_hours,
            "worked_hours": round_hours(tb.worked_hours),
            "overtime_hours": round_hours(tb.overtime_hours),
            "balance_hours": round_hours(tb.balance_hours),
        }
        for tb in report.time_banks
    ]


def week_rows(time_bank: MonthlyTimeBank) -> list[dict]:
    return [
        {
            "week": w.week_start.strftime("%d/%m"),
            "week_start": w.week_start.isoformat(),
            "hours": round_hours(w.worked_hours),
            "overtime": round_hours(w.overtime_hours),
            "days": [{"date": d.work_date.isoformat(), "hours": round_hours(d.hours)} for d in w.daily_breakdown],
        }
        for w in time_bank.weeks
    ]


def alert_rows(alerts: Iterable[OvertimeAlert]) -> list[dict]:
    return [
        {
            "employee_id": a.employee_id,
            "name": a.display_name,
            "worked_hours": round_hours(a.weekly_worked_hours),
            "overtime_hours": round_hours(a.weekly_overtime_hours),
            "severity": a.severity.value,
        }
        for a in alerts
    ]


def frequency_rows(stats: Iterable[FrequencyStats]) -> list[dict]:
    return [
        {
            "employee_id": s.employee_id,
            "name": s.display_name,
            "job_title": s.job_title or DEFAULT_JOB_TITLE,
            "work_days": s.work_days,
            "days_worked": s.days_worked,
            "absences": s.absences,
            "total_hours": round_hours(s.total_hours),
            "avg_hours_per_day": round_hours(s.avg_hours_per_day),
            "rate": f"{s.rate:.1f}",
        }
        for s in stats
    ]


def summarize(report: TimeBankReport) -> dict:
    # totals are taken from unrounded figures, then rounded once
    return {
        "total_overtime_hours": round_hours(sum(tb.overtime_hours for tb in report.time_banks)),
        "total_balance_hours": round_hours(sum(tb.balance_hours for tb in report.time_banks)),
        "employees_with_overtime": sum(1 for tb in report.time_banks if tb.overtime_minutes > 0),
        "danger_alerts": sum(1 for a in report.alerts if a.severity == AlertSeverity.DANGER),
    }
