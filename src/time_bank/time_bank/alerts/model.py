from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AlertSeverity


@dataclass(frozen=True)
class OvertimeAlert:
    """Current-week overtime signal. Recomputed on every query, never stored."""

    employee_id: str
    display_name: str
    weekly_worked_hours: float
    weekly_overtime_hours: float
    severity: AlertSeverity
