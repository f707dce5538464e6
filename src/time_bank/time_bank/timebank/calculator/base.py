from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Iterable, Sequence

from ...pairing.model import DayAggregate
from ...punches.model import Employee
from ..model import MonthlyTimeBank, WeekAggregate


class TimeBankCalculator(ABC):
    """Calculator interface (Strategy Pattern for time-bank rules)."""

    @abstractmethod
    def balance_hours(self, worked_hours: float, expected_hours: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def monthly_overtime_minutes(self, weeks: Iterable[WeekAggregate]) -> int:
        raise NotImplementedError

    @abstractmethod
    def build_time_bank(self, employee: Employee, month: date, days: Sequence[DayAggregate]) -> MonthlyTimeBank:
        raise NotImplementedError
