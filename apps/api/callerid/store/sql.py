"""SQLAlchemy (asyncpg) implementation of the caller store."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Iterable, Optional

from sqlalchemy import and_, func, not_, select
from sqlalchemy.exc import (
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    NoResultFound,
    OperationalError,
    SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from callerid.db.models import Contact, SpamReport, User
from callerid.store.base import CallerStore, ContactRecord, SpamReportRecord, UserRecord
from callerid.store.errors import StoreError, StoreErrorKind

logger = logging.getLogger(__name__)

_LIKE_ESCAPE = "\\"


def _escape_like(value: str) -> str:
    return (
        value.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


def _starts_with(column, prefix: str):
    return column.ilike(f"{_escape_like(prefix)}%", escape=_LIKE_ESCAPE)


def _contains_not_starting(column, fragment: str):
    escaped = _escape_like(fragment)
    return and_(
        column.ilike(f"%{escaped}%", escape=_LIKE_ESCAPE),
        not_(column.ilike(f"{escaped}%", escape=_LIKE_ESCAPE)),
    )


def translate_error(exc: BaseException) -> StoreError:
    """Map a driver/ORM exception onto a StoreErrorKind."""
    if isinstance(exc, IntegrityError):
        kind = StoreErrorKind.DUPLICATE_KEY
    elif isinstance(exc, NoResultFound):
        kind = StoreErrorKind.NOT_FOUND
    elif isinstance(exc, (OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError)):
        kind = StoreErrorKind.UNAVAILABLE
    elif isinstance(exc, (OSError, asyncio.TimeoutError)):
        kind = StoreErrorKind.UNAVAILABLE
    else:
        kind = StoreErrorKind.UNKNOWN
    return StoreError(kind, str(exc).splitlines()[0] if str(exc) else type(exc).__name__, cause=exc)


def _user(row: User) -> UserRecord:
    return UserRecord(
        id=row.id,
        name=row.name,
        phone_number=row.phone_number,
        email=row.email,
        hashed_password=row.password,
        created_at=row.created_at,
    )


def _contact(row: Contact) -> ContactRecord:
    return ContactRecord(id=row.id, name=row.name, phone_number=row.phone_number, user_id=row.user_id)


def _spam_report(row: SpamReport) -> SpamReportRecord:
    return SpamReportRecord(
        id=row.id,
        phone_number=row.phone_number,
        reported_by=row.reported_by,
        created_at=row.created_at,
    )


class SqlCallerStore(CallerStore):
    """Every call opens its own short-lived session, so concurrent reads never share one."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        try:
            async with self._session_factory() as db:
                yield db
        except StoreError:
            raise
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as exc:
            raise translate_error(exc) from exc

    async def _users(self, *criteria) -> list[UserRecord]:
        async with self._session() as db:
            result = await db.execute(select(User).where(*criteria).order_by(User.id))
            return [_user(u) for u in result.scalars().all()]

    async def _contacts(self, *criteria) -> list[ContactRecord]:
        async with self._session() as db:
            result = await db.execute(select(Contact).where(*criteria).order_by(Contact.id))
            return [_contact(c) for c in result.scalars().all()]

    async def find_users_by_name_prefix(self, prefix: str) -> list[UserRecord]:
        return await self._users(_starts_with(User.name, prefix))

    async def find_users_by_name_substring_excluding_prefix(self, fragment: str) -> list[UserRecord]:
        return await self._users(_contains_not_starting(User.name, fragment))

    async def find_contacts_by_name_prefix(self, prefix: str) -> list[ContactRecord]:
        return await self._contacts(_starts_with(Contact.name, prefix))

    async def find_contacts_by_name_substring_excluding_prefix(self, fragment: str) -> list[ContactRecord]:
        return await self._contacts(_contains_not_starting(Contact.name, fragment))

    async def find_user_by_phone_number(self, phone_number: str) -> Optional[UserRecord]:
        async with self._session() as db:
            result = await db.execute(select(User).where(User.phone_number == phone_number))
            user = result.scalar_one_or_none()
            return _user(user) if user else None

    async def find_contacts_by_phone_number(self, phone_number: str) -> list[ContactRecord]:
        return await self._contacts(Contact.phone_number == phone_number)

    async def contact_exists(self, owner_user_id: int, phone_number: str) -> bool:
        async with self._session() as db:
            result = await db.execute(
                select(Contact.id)
                .where(Contact.user_id == owner_user_id, Contact.phone_number == phone_number)
                .limit(1)
            )
            return result.scalar_one_or_none() is not None

    async def count_spam_reports(self, phone_number: str) -> int:
        async with self._session() as db:
            result = await db.execute(
                select(func.count(SpamReport.id)).where(SpamReport.phone_number == phone_number)
            )
            return int(result.scalar_one() or 0)

    async def count_spam_reports_batch(self, phone_numbers: Iterable[str]) -> dict[str, int]:
        numbers = list(dict.fromkeys(phone_numbers))
        if not numbers:
            return {}
        async with self._session() as db:
            result = await db.execute(
                select(SpamReport.phone_number, func.count(SpamReport.id))
                .where(SpamReport.phone_number.in_(numbers))
                .group_by(SpamReport.phone_number)
            )
            return {phone: int(count) for phone, count in result.all()}

    async def get_user_by_id(self, user_id: int) -> Optional[UserRecord]:
        async with self._session() as db:
            user = await db.get(User, user_id)
            return _user(user) if user else None

    async def create_user(
        self,
        name: str,
        phone_number: str,
        email: Optional[str],
        hashed_password: str,
    ) -> UserRecord:
        async with self._session() as db:
            user = User(name=name, phone_number=phone_number, email=email, password=hashed_password)
            db.add(user)
            await db.commit()
            await db.refresh(user)
            logger.info("Created user %s", user.id)
            return _user(user)

    async def find_spam_report(self, phone_number: str, reported_by: int) -> Optional[SpamReportRecord]:
        async with self._session() as db:
            result = await db.execute(
                select(SpamReport).where(
                    SpamReport.phone_number == phone_number,
                    SpamReport.reported_by == reported_by,
                )
            )
            report = result.scalar_one_or_none()
            return _spam_report(report) if report else None

    async def create_spam_report(self, phone_number: str, reported_by: int) -> SpamReportRecord:
        async with self._session() as db:
            report = SpamReport(phone_number=phone_number, reported_by=reported_by)
            db.add(report)
            await db.commit()
            await db.refresh(report)
            return _spam_report(report)
