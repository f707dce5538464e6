from __future__ import annotations

from datetime import date, datetime

import pytest

from src.time_bank.time_bank.core.enums import PunchKind
from src.time_bank.time_bank.core.settings import EngineSettings
from src.time_bank.time_bank.punches.model import Employee, PunchRecord


@pytest.fixture
def settings() -> EngineSettings:
    return EngineSettings(timezone="America/Sao_Paulo")


@pytest.fixture
def fixed_today() -> date:
    # Wednesday; its week runs Mon 2026-10-19 .. Sun 2026-10-25
    return date(2026, 10, 21)


@pytest.fixture
def roster() -> list[Employee]:
    return [
        Employee(employee_id="u1", display_name="Ana Souza", job_title="Teacher"),
        Employee(employee_id="u2", display_name="Bruno Lima", job_title=None),
    ]


@pytest.fixture
def punch():
    """punch("u1", "entry", "2026-10-19 08:00") -> PunchRecord with a naive local timestamp."""

    def make(employee_id: str, kind: str, when: str) -> PunchRecord:
        return PunchRecord(
            employee_id=employee_id,
            kind=PunchKind(kind),
            timestamp=datetime.strptime(when, "%Y-%m-%d %H:%M"),
        )

    return make


@pytest.fixture
def workday(punch):
    """Entry/exit (and optional break) punches for one day."""

    def make(employee_id: str, day: str, start: str, end: str, break_start=None, break_end=None) -> list[PunchRecord]:
        out = [punch(employee_id, "entry", f"{day} {start}"), punch(employee_id, "exit", f"{day} {end}")]
        if break_start:
            out.append(punch(employee_id, "break_start", f"{day} {break_start}"))
        if break_end:
            out.append(punch(employee_id, "break_end", f"{day} {break_end}"))
        return out

    return make
