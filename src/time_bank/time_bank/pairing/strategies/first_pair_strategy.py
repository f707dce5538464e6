from __future__ import annotations

from typing import Sequence

from ...core.enums import PunchKind
from ...punches.model import PunchRecord
from .base import PairingStrategy, PunchPair


class FirstPairStrategy(PairingStrategy):
    """First Entry with first Exit of the day; later punches are ignored."""

    def select_pairs(self, punches: Sequence[PunchRecord]) -> list[PunchPair]:
        entry = next((p for p in punches if p.kind == PunchKind.ENTRY), None)
        exit_ = next((p for p in punches if p.kind == PunchKind.EXIT), None)
        if entry is None or exit_ is None:
            return []
        return [(entry, exit_)]
