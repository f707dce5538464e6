from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...punches.model import PunchRecord

PunchPair = tuple[PunchRecord, PunchRecord]


class PairingStrategy(ABC):
    """Strategy Pattern: encapsulate how Entry/Exit pairs are chosen for a day."""

    @abstractmethod
    def select_pairs(self, punches: Sequence[PunchRecord]) -> list[PunchPair]:
        """Return (entry, exit) pairs from a day's punches sorted by time."""
        raise NotImplementedError
