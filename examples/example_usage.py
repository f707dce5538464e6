"""Example: use the service layer directly (no Flask).

Builds a small punch snapshot in memory and prints the month's time-bank rows
and the current-week alerts.
"""

import importlib
from datetime import date, timedelta

from config import get_settings_module

from src.time_bank.time_bank.container import build_container
from src.time_bank.time_bank.core.settings import EngineSettings
from src.time_bank.time_bank.logging_config import setup_logging
from src.time_bank.time_bank.punches.memory_repository import InMemoryPunchRepository, InMemoryRosterRepository
from src.time_bank.time_bank.punches.model import Employee
from src.time_bank.time_bank.reports.presenter import alert_rows, summarize, time_bank_rows


def demo_rows(today: date):
    """Rows shaped like the punch store's employee_time_clock table."""
    monday = today - timedelta(days=today.weekday())
    for offset in range(5):
        day = (monday + timedelta(days=offset)).isoformat()
        yield {"user_id": "u1", "clock_type": "entry", "timestamp": f"{day}T08:00:00"}
        yield {"user_id": "u1", "clock_type": "exit", "timestamp": f"{day}T18:00:00"}


def main():
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    engine_settings = EngineSettings.from_module(settings)

    today = date.today()
    container = build_container(
        settings=engine_settings,
        punches_repo=InMemoryPunchRepository.from_rows(demo_rows(today), tz=engine_settings.tzinfo),
        roster_repo=InMemoryRosterRepository([Employee("u1", "Ana Souza", "Teacher"), Employee("u2", "Bruno Lima")]),
    )

    report = container.time_bank_service.build_monthly_report(month=today.replace(day=1), today=today)
    print(time_bank_rows(report))
    print(alert_rows(report.alerts))
    print(summarize(report))


if __name__ == "__main__":
    main()
