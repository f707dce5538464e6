from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import PunchKind


@dataclass(frozen=True)
class PunchRecord:
    """Domain entity: a single time-clock event.

    Immutable and owned by the punch store; the engine only reads a snapshot.
    """

    employee_id: str
    kind: PunchKind
    timestamp: datetime


@dataclass(frozen=True)
class Employee:
    """Roster entry attached to computed results."""

    employee_id: str
    display_name: str
    job_title: Optional[str] = None
