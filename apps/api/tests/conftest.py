"""
Pytest configuration and shared fixtures for the caller ID API tests.

Everything runs against FakeCallerStore, an in-memory implementation of the
store interface, so no database is needed:
- pytest -m unit   # services and helpers only
- pytest -m api    # requests through the FastAPI app
- pytest           # all tests
"""
from collections import Counter
from functools import lru_cache
from datetime import datetime, timezone
from typing import Iterable, Optional

import pytest
from fastapi.testclient import TestClient

from callerid.core import create_access_token, hash_password, limiter
from callerid.store import (
    CallerStore,
    ContactRecord,
    SpamReportRecord,
    StoreError,
    StoreErrorKind,
    UserRecord,
)


@lru_cache
def _hashed(password: str) -> str:
    return hash_password(password)


class FakeCallerStore(CallerStore):
    """In-memory store. Set ``fail_on`` to a method name to make that call raise."""

    def __init__(self):
        self.users: list[UserRecord] = []
        self.contacts: list[ContactRecord] = []
        self.spam_reports: list[SpamReportRecord] = []
        self.calls: Counter = Counter()
        self.fail_on: Optional[str] = None
        self.fail_kind = StoreErrorKind.UNAVAILABLE

    def _record(self, method: str) -> None:
        self.calls[method] += 1
        if self.fail_on == method:
            raise StoreError(self.fail_kind, f"{method} failed")

    # -- helpers for arranging data --

    def add_user(self, name: str, phone_number: str, email: Optional[str] = None, password: str = "secret123") -> UserRecord:
        user = UserRecord(
            id=len(self.users) + 1,
            name=name,
            phone_number=phone_number,
            email=email,
            hashed_password=_hashed(password),
            created_at=datetime.now(timezone.utc),
        )
        self.users.append(user)
        return user

    def add_contact(self, owner: UserRecord, name: str, phone_number: str) -> ContactRecord:
        contact = ContactRecord(
            id=len(self.contacts) + 1,
            name=name,
            phone_number=phone_number,
            user_id=owner.id,
        )
        self.contacts.append(contact)
        return contact

    def add_reports(self, phone_number: str, count: int) -> None:
        for i in range(count):
            self.spam_reports.append(
                SpamReportRecord(
                    id=len(self.spam_reports) + 1,
                    phone_number=phone_number,
                    reported_by=10_000 + i,
                    created_at=datetime.now(timezone.utc),
                )
            )

    # -- CallerStore --

    async def find_users_by_name_prefix(self, prefix: str) -> list[UserRecord]:
        self._record("find_users_by_name_prefix")
        p = prefix.lower()
        return [u for u in self.users if u.name.lower().startswith(p)]

    async def find_users_by_name_substring_excluding_prefix(self, fragment: str) -> list[UserRecord]:
        self._record("find_users_by_name_substring_excluding_prefix")
        f = fragment.lower()
        return [u for u in self.users if f in u.name.lower() and not u.name.lower().startswith(f)]

    async def find_contacts_by_name_prefix(self, prefix: str) -> list[ContactRecord]:
        self._record("find_contacts_by_name_prefix")
        p = prefix.lower()
        return [c for c in self.contacts if c.name.lower().startswith(p)]

    async def find_contacts_by_name_substring_excluding_prefix(self, fragment: str) -> list[ContactRecord]:
        self._record("find_contacts_by_name_substring_excluding_prefix")
        f = fragment.lower()
        return [c for c in self.contacts if f in c.name.lower() and not c.name.lower().startswith(f)]

    async def find_user_by_phone_number(self, phone_number: str) -> Optional[UserRecord]:
        self._record("find_user_by_phone_number")
        return next((u for u in self.users if u.phone_number == phone_number), None)

    async def find_contacts_by_phone_number(self, phone_number: str) -> list[ContactRecord]:
        self._record("find_contacts_by_phone_number")
        return [c for c in self.contacts if c.phone_number == phone_number]

    async def contact_exists(self, owner_user_id: int, phone_number: str) -> bool:
        self._record("contact_exists")
        return any(c.user_id == owner_user_id and c.phone_number == phone_number for c in self.contacts)

    async def count_spam_reports(self, phone_number: str) -> int:
        self._record("count_spam_reports")
        return sum(1 for r in self.spam_reports if r.phone_number == phone_number)

    async def count_spam_reports_batch(self, phone_numbers: Iterable[str]) -> dict[str, int]:
        self._record("count_spam_reports_batch")
        wanted = set(phone_numbers)
        counts = Counter(r.phone_number for r in self.spam_reports if r.phone_number in wanted)
        return dict(counts)

    async def get_user_by_id(self, user_id: int) -> Optional[UserRecord]:
        self._record("get_user_by_id")
        return next((u for u in self.users if u.id == user_id), None)

    async def create_user(
        self,
        name: str,
        phone_number: str,
        email: Optional[str],
        hashed_password: str,
    ) -> UserRecord:
        self._record("create_user")
        if any(u.phone_number == phone_number for u in self.users):
            raise StoreError(StoreErrorKind.DUPLICATE_KEY, "users.phone_number")
        user = UserRecord(
            id=len(self.users) + 1,
            name=name,
            phone_number=phone_number,
            email=email,
            hashed_password=hashed_password,
            created_at=datetime.now(timezone.utc),
        )
        self.users.append(user)
        return user

    async def find_spam_report(self, phone_number: str, reported_by: int) -> Optional[SpamReportRecord]:
        self._record("find_spam_report")
        return next(
            (r for r in self.spam_reports if r.phone_number == phone_number and r.reported_by == reported_by),
            None,
        )

    async def create_spam_report(self, phone_number: str, reported_by: int) -> SpamReportRecord:
        self._record("create_spam_report")
        if any(r.phone_number == phone_number and r.reported_by == reported_by for r in self.spam_reports):
            raise StoreError(StoreErrorKind.DUPLICATE_KEY, "spam_reports.phone_number_reported_by")
        report = SpamReportRecord(
            id=len(self.spam_reports) + 1,
            phone_number=phone_number,
            reported_by=reported_by,
            created_at=datetime.now(timezone.utc),
        )
        self.spam_reports.append(report)
        return report


@pytest.fixture
def store() -> FakeCallerStore:
    return FakeCallerStore()


@pytest.fixture
def requester(store) -> UserRecord:
    """The authenticated caller in most tests."""
    return store.add_user("Zed Requester", "+15550001111", email="zed@example.com")


@pytest.fixture
def client(store):
    """Test client with the in-memory store injected and rate limiting off."""
    from callerid.dependencies import get_store
    from callerid.main import app

    app.dependency_overrides[get_store] = lambda: store
    limiter.enabled = False
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        limiter.enabled = True


@pytest.fixture
def auth_headers(requester) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(str(requester.id))}"}
