"""Persistence collaborator: interface, typed errors, and the SQL implementation."""

from .base import CallerStore, ContactRecord, SpamReportRecord, UserRecord
from .errors import StoreError, StoreErrorKind
from .sql import SqlCallerStore

__all__ = [
    "CallerStore",
    "ContactRecord",
    "SpamReportRecord",
    "UserRecord",
    "StoreError",
    "StoreErrorKind",
    "SqlCallerStore",
]
