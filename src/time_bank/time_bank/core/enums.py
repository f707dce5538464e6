from __future__ import annotations

from enum import Enum


class PunchKind(str, Enum):
    """Kind of time-clock event, as stored by the punch store."""

    ENTRY = "entry"
    EXIT = "exit"
    BREAK_START = "break_start"
    BREAK_END = "break_end"


class PairingPolicy(str, Enum):
    """How the Entry/Exit pair of a day is selected."""

    FIRST_PAIR = "first_pair"
    SEQUENTIAL = "sequential"


class AlertSeverity(str, Enum):
    WARNING = "warning"
    DANGER = "danger"
