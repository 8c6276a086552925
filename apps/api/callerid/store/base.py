"""Persistence interface consumed by the search and spam services."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional


@dataclass(frozen=True)
class UserRecord:
    id: int
    name: str
    phone_number: str
    email: Optional[str] = None
    hashed_password: str = ""
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class ContactRecord:
    id: int
    name: str
    phone_number: str
    user_id: int


@dataclass(frozen=True)
class SpamReportRecord:
    id: int
    phone_number: str
    reported_by: int
    created_at: Optional[datetime] = None


class CallerStore(ABC):
    """Read queries for search plus the few writes the auth and spam routes need.

    Implementations raise ``StoreError`` on any failure. Name matching is
    case-insensitive; "substring excluding prefix" returns names that contain the
    fragment but do not start with it.
    """

    @abstractmethod
    async def find_users_by_name_prefix(self, prefix: str) -> list[UserRecord]: ...

    @abstractmethod
    async def find_users_by_name_substring_excluding_prefix(self, fragment: str) -> list[UserRecord]: ...

    @abstractmethod
    async def find_contacts_by_name_prefix(self, prefix: str) -> list[ContactRecord]: ...

    @abstractmethod
    async def find_contacts_by_name_substring_excluding_prefix(self, fragment: str) -> list[ContactRecord]: ...

    @abstractmethod
    async def find_user_by_phone_number(self, phone_number: str) -> Optional[UserRecord]: ...

    @abstractmethod
    async def find_contacts_by_phone_number(self, phone_number: str) -> list[ContactRecord]: ...

    @abstractmethod
    async def contact_exists(self, owner_user_id: int, phone_number: str) -> bool: ...

    @abstractmethod
    async def count_spam_reports(self, phone_number: str) -> int: ...

    @abstractmethod
    async def count_spam_reports_batch(self, phone_numbers: Iterable[str]) -> dict[str, int]:
        """Report counts keyed by phone number; numbers without reports may be absent."""

    @abstractmethod
    async def get_user_by_id(self, user_id: int) -> Optional[UserRecord]: ...

    @abstractmethod
    async def create_user(
        self,
        name: str,
        phone_number: str,
        email: Optional[str],
        hashed_password: str,
    ) -> UserRecord: ...

    @abstractmethod
    async def find_spam_report(self, phone_number: str, reported_by: int) -> Optional[SpamReportRecord]: ...

    @abstractmethod
    async def create_spam_report(self, phone_number: str, reported_by: int) -> SpamReportRecord: ...
