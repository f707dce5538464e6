from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import PairingPolicy
from .strategies.base import PairingStrategy
from .strategies.first_pair_strategy import FirstPairStrategy
from .strategies.sequential_strategy import SequentialStrategy


@dataclass
class PairingStrategyFactory:
    """Factory Pattern: choose the pairing strategy for the configured policy."""

    def for_policy(self, policy: PairingPolicy) -> PairingStrategy:
        if policy == PairingPolicy.SEQUENTIAL:
            return SequentialStrategy()
        return FirstPairStrategy()
