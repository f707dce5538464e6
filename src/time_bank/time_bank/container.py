from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .alerts.evaluator import AlertEvaluator
from .core.settings import EngineSettings
from .pairing.factory import PairingStrategyFactory
from .pairing.service import DailyPairingEngine
from .punches.memory_repository import InMemoryPunchRepository, InMemoryRosterRepository
from .punches.repository import PunchRepository, RosterRepository
from .reports.frequency import FrequencyReportService
from .reports.service import TimeBankReportService
from .timebank.aggregator import WeeklyAggregator
from .timebank.calculator.standard_calculator import StandardTimeBankCalculator


@dataclass(frozen=True)
class Container:
    settings: EngineSettings

    punches_repo: PunchRepository
    roster_repo: RosterRepository

    pairing_engine: DailyPairingEngine
    time_bank_service: TimeBankReportService
    frequency_service: FrequencyReportService


def build_container(
    *,
    settings: EngineSettings,
    punches_repo: Optional[PunchRepository] = None,
    roster_repo: Optional[RosterRepository] = None,
) -> Container:
    punches_repo = punches_repo or InMemoryPunchRepository(tz=settings.tzinfo)
    roster_repo = roster_repo or InMemoryRosterRepository()

    pairing_engine = DailyPairingEngine(settings, strategy_factory=PairingStrategyFactory())
    aggregator = WeeklyAggregator()
    time_bank_service = TimeBankReportService(
        punches_repo,
        roster_repo,
        settings=settings,
        engine=pairing_engine,
        aggregator=aggregator,
        calculator=StandardTimeBankCalculator(settings, aggregator=aggregator),
        evaluator=AlertEvaluator(settings),
    )
    frequency_service = FrequencyReportService(punches_repo, roster_repo, settings=settings, engine=pairing_engine)

    return Container(
        settings=settings,
        punches_repo=punches_repo,
        roster_repo=roster_repo,
        pairing_engine=pairing_engine,
        time_bank_service=time_bank_service,
        frequency_service=frequency_service,
    )
