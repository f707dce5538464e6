from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import to_local, whole_minutes
from ..core.enums import PunchKind
from ..core.settings import EngineSettings
from ..punches.model import PunchRecord
from ..punches.parser import ensure_valid
from .factory import PairingStrategyFactory
from .model import DayAggregate
from .strategies.base import PairingStrategy

logger = logging.getLogger(__name__)

_KIND_ORDER = {
    PunchKind.ENTRY: 0,
    PunchKind.BREAK_START: 1,
    PunchKind.BREAK_END: 2,
    PunchKind.EXIT: 3,
}


class DailyPairingEngine:
    """Turns a day's punches into a DayAggregate.

    Worked minutes are the paired Entry/Exit time minus the break. The break is
    the first BreakStart/BreakEnd pair of the day when both exist, otherwise the
    configured default break, applied even on short days (clamped at zero).
    """

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        *,
        strategy: Optional[PairingStrategy] = None,
        strategy_factory: Optional[PairingStrategyFactory] = None,
    ):
        self._settings = settings or EngineSettings()
        factory = strategy_factory or PairingStrategyFactory()
        self._strategy = strategy or factory.for_policy(self._settings.pairing_policy)
        self._tz = self._settings.tzinfo

    def localize(self, punch: PunchRecord) -> PunchRecord:
        ensure_valid(punch)
        return PunchRecord(
            employee_id=punch.employee_id,
            kind=punch.kind,
            timestamp=to_local(punch.timestamp, self._tz),
        )

    def aggregate(self, punches: Iterable[PunchRecord]) -> list[DayAggregate]:
        """One DayAggregate per (employee, local day) present in the snapshot.

        Every punch is validated before anything is computed, so a single
        malformed record fails the whole call.
        """
        localized = [self.localize(p) for p in punches]

        by_day: dict[tuple[str, date], list[PunchRecord]] = defaultdict(list)
        for p in localized:
            by_day[(p.employee_id, p.timestamp.date())].append(p)

        return [
            self.aggregate_day(employee_id, work_date, by_day[(employee_id, work_date)])
            for employee_id, work_date in sorted(by_day)
        ]

    def aggregate_day(self, employee_id: str, work_date: date, punches: Sequence[PunchRecord]) -> DayAggregate:
        ordered = sorted(
            (self.localize(p) for p in punches),
            key=lambda p: (p.timestamp, _KIND_ORDER[p.kind]),
        )

        pairs = self._strategy.select_pairs(ordered)
        if not pairs:
            logger.debug("No complete pair for employee=%s on %s", employee_id, work_date)
            return DayAggregate(
                employee_id=employee_id,
                work_date=work_date,
                worked_minutes=0,
                break_minutes=0,
                has_complete_pair=False,
            )

        raw_minutes = sum(whole_minutes(entry.timestamp, exit_.timestamp) for entry, exit_ in pairs)
        break_minutes = self._break_minutes(ordered)
        worked = max(raw_minutes - break_minutes, 0)
        overtime = max(worked - self._settings.daily_threshold_minutes, 0)

        return DayAggregate(
            employee_id=employee_id,
            work_date=work_date,
            worked_minutes=worked,
            break_minutes=break_minutes,
            has_complete_pair=True,
            overtime_minutes=overtime,
        )

    def _break_minutes(self, ordered: Sequence[PunchRecord]) -> int:
        start = next((p for p in ordered if p.kind == PunchKind.BREAK_START), None)
        end = next((p for p in ordered if p.kind == PunchKind.BREAK_END), None)
        if start is not None and end is not None:
            return whole_minutes(start.timestamp, end.timestamp)
        return self._settings.default_break_minutes
