from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date, parse_month


def require_month(value: Optional[str], field_name: str = "month") -> date:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required (YYYY-MM)")
    try:
        return parse_month(value.strip())
    except ValueError as e:
        raise ValidationError(f"{field_name} must be YYYY-MM, got {value!r}") from e


def require_date(value: Optional[str], field_name: str) -> date:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required (YYYY-MM-DD)")
    try:
        return parse_iso_date(value.strip())
    except ValueError as e:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD, got {value!r}") from e


def require_date_range(start: date, end: date) -> tuple[date, date]:
    if end < start:
        raise ValidationError("end date must not be before start date")
    return start, end
