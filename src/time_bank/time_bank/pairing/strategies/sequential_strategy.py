from __future__ import annotations

from typing import Sequence

from ...core.enums import PunchKind
from ...punches.model import PunchRecord
from .base import PairingStrategy, PunchPair


class SequentialStrategy(PairingStrategy):
    """Walk Entry/Exit punches two at a time.

    A slot only counts when it reads Entry then Exit. Misaligned slots are
    skipped, the walk does not re-synchronise.
    """

    def select_pairs(self, punches: Sequence[PunchRecord]) -> list[PunchPair]:
        clock = [p for p in punches if p.kind in (PunchKind.ENTRY, PunchKind.EXIT)]
        pairs: list[PunchPair] = []
        for i in range(0, len(clock) - 1, 2):
            first, second = clock[i], clock[i + 1]
            if first.kind == PunchKind.ENTRY and second.kind == PunchKind.EXIT:
                pairs.append((first, second))
        return pairs
