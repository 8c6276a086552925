"""Typed failure kinds reported by the persistence layer."""

from enum import Enum
from typing import Optional


class StoreErrorKind(str, Enum):
    """What went wrong in the store, so callers can match on kind instead of driver exceptions."""
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


class StoreError(Exception):
    """Store failure with kind context."""
    def __init__(self, kind: StoreErrorKind, message: str, cause: Optional[Exception] = None):
        self.kind = kind
        self.message = message
        self.cause = cause
        super().__init__(f"[{kind.value}] {message}")

    @property
    def is_duplicate(self) -> bool:
        return self.kind is StoreErrorKind.DUPLICATE_KEY
