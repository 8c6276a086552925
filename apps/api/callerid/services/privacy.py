"""Reciprocal-contact rule for email disclosure."""

from typing import Optional

from callerid.store import CallerStore, UserRecord
from callerid.services.dedup import Candidate


async def can_disclose_email(
    store: CallerStore,
    matched: Candidate,
    requester: Optional[UserRecord],
) -> bool:
    """True only when a registered match has the requester's own number saved in its contacts.

    Contact-only sightings and anonymous requesters never see an email, and
    neither case touches the store.
    """
    if requester is None or not matched.is_registered or matched.user_id is None:
        return False
    return await store.contact_exists(matched.user_id, requester.phone_number)
