from __future__ import annotations

from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from . import constants
from .enums import PairingPolicy
from .exceptions import ValidationError


@dataclass(frozen=True)
class EngineSettings:
    """Business policy knobs of the engine, read from the settings module."""

    timezone: str = constants.DEFAULT_TIMEZONE
    default_break_minutes: int = constants.DEFAULT_BREAK_MINUTES
    daily_work_hours: int = constants.DAILY_WORK_HOURS
    weekly_work_hours: int = constants.WEEKLY_WORK_HOURS
    warning_ratio: float = constants.WARNING_RATIO
    pairing_policy: PairingPolicy = PairingPolicy.FIRST_PAIR

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @property
    def daily_threshold_minutes(self) -> int:
        return self.daily_work_hours * constants.MINUTES_PER_HOUR

    @classmethod
    def from_module(cls, settings) -> "EngineSettings":
        timezone = str(getattr(settings, "TIMEZONE", constants.DEFAULT_TIMEZONE))
        try:
            ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValidationError(f"Unknown TIMEZONE setting: {timezone}") from e

        policy = getattr(settings, "PAIRING_POLICY", PairingPolicy.FIRST_PAIR.value)
        try:
            pairing_policy = PairingPolicy(str(policy).lower())
        except ValueError as e:
            raise ValidationError(f"Unknown PAIRING_POLICY setting: {policy}") from e

        return cls(
            timezone=timezone,
            default_break_minutes=int(getattr(settings, "DEFAULT_BREAK_MINUTES", constants.DEFAULT_BREAK_MINUTES)),
            daily_work_hours=int(getattr(settings, "DAILY_WORK_HOURS", constants.DAILY_WORK_HOURS)),
            weekly_work_hours=int(getattr(settings, "WEEKLY_WORK_HOURS", constants.WEEKLY_WORK_HOURS)),
            warning_ratio=float(getattr(settings, "WARNING_RATIO", constants.WARNING_RATIO)),
            pairing_policy=pairing_policy,
        )
