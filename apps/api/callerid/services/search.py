"""Name and phone lookups: fan-out queries, dedup, privacy gate, spam scoring."""

import asyncio
import logging
from typing import Optional

from callerid.schemas import (
    NameSearchResponse,
    NameSearchResult,
    PhoneSearchResponse,
    PhoneSearchResult,
)
from callerid.services.dedup import Candidate, merge_candidates
from callerid.services.phone import normalize_lookup_phone
from callerid.services.privacy import can_disclose_email
from callerid.services.spam_score import spam_likelihood
from callerid.store import CallerStore, UserRecord

logger = logging.getLogger(__name__)


async def search_by_name(
    store: CallerStore,
    name: str,
    requester: Optional[UserRecord] = None,
) -> NameSearchResponse:
    """Registered users and contacts whose name starts with, then contains, ``name``.

    Prefix matches rank ahead of substring matches; within each tier registered
    users come before contacts. One row per phone number, never an email.
    A failure in any of the underlying queries fails the whole search.
    """
    fragment = (name or "").strip()
    if not fragment:
        return NameSearchResponse(results=[], count=0)

    users_prefix, users_substring, contacts_prefix, contacts_substring = await asyncio.gather(
        store.find_users_by_name_prefix(fragment),
        store.find_users_by_name_substring_excluding_prefix(fragment),
        store.find_contacts_by_name_prefix(fragment),
        store.find_contacts_by_name_substring_excluding_prefix(fragment),
    )

    candidates = merge_candidates(
        [Candidate.from_user(u) for u in users_prefix],
        [Candidate.from_contact(c) for c in contacts_prefix],
        [Candidate.from_user(u) for u in users_substring],
        [Candidate.from_contact(c) for c in contacts_substring],
    )
    if not candidates:
        return NameSearchResponse(results=[], count=0)

    counts = await store.count_spam_reports_batch([c.phone_number for c in candidates])
    results = [
        NameSearchResult(
            name=c.name,
            phone_number=c.phone_number,
            spam_likelihood=spam_likelihood(counts.get(c.phone_number, 0)),
            is_registered=c.is_registered,
        )
        for c in candidates
    ]
    logger.debug(
        "Name search by user %s matched %d rows",
        requester.id if requester else None,
        len(results),
    )
    return NameSearchResponse(results=results, count=len(results))


async def search_by_phone(
    store: CallerStore,
    phone_number: str,
    requester: Optional[UserRecord] = None,
) -> PhoneSearchResponse:
    """Resolve a number to its registered owner, else to every contact-book sighting.

    A registered owner yields exactly one row whose email passes the reciprocal
    contact check. Without an owner, each sighting is a row with no email and the
    same spam likelihood. Unknown numbers return an empty result.
    """
    phone_number = normalize_lookup_phone(phone_number)

    owner = await store.find_user_by_phone_number(phone_number)
    if owner:
        candidate = Candidate.from_user(owner)
        disclose, report_count = await asyncio.gather(
            can_disclose_email(store, candidate, requester),
            store.count_spam_reports(phone_number),
        )
        result = PhoneSearchResult(
            name=candidate.name,
            phone_number=candidate.phone_number,
            email=candidate.email if disclose else None,
            spam_likelihood=spam_likelihood(report_count),
            is_registered=True,
        )
        return PhoneSearchResponse(results=[result], count=1)

    contacts, report_count = await asyncio.gather(
        store.find_contacts_by_phone_number(phone_number),
        store.count_spam_reports(phone_number),
    )
    likelihood = spam_likelihood(report_count)
    results = [
        PhoneSearchResult(
            name=c.name,
            phone_number=c.phone_number,
            email=None,
            spam_likelihood=likelihood,
            is_registered=False,
        )
        for c in contacts
    ]
    return PhoneSearchResponse(results=results, count=len(results))


class SearchService:
    """Facade for search operations."""

    @staticmethod
    async def search_by_name(
        store: CallerStore, name: str, requester: Optional[UserRecord] = None
    ) -> NameSearchResponse:
        return await search_by_name(store, name, requester)

    @staticmethod
    async def search_by_phone(
        store: CallerStore, phone_number: str, requester: Optional[UserRecord] = None
    ) -> PhoneSearchResponse:
        return await search_by_phone(store, phone_number, requester)


search_service = SearchService()
