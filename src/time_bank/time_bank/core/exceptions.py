from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when query input is invalid (month, date range, filters)."""


class MalformedPunchError(DomainError):
    """Raised when a punch has an unparseable or impossible field.

    The whole computation for the range fails; no partial aggregate is returned.
    """

    def __init__(self, message: str, record: Any = None):
        super().__init__(message)
        self.record = record
