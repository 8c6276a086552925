"""Candidate merging keyed by phone number, registered users first."""

from dataclasses import dataclass
from typing import Iterable, Optional

from callerid.store import ContactRecord, UserRecord


@dataclass(frozen=True)
class Candidate:
    """Unscored match from a single source query."""
    name: str
    phone_number: str
    is_registered: bool
    email: Optional[str] = None
    user_id: Optional[int] = None  # registered user id; None for contact sightings

    @classmethod
    def from_user(cls, user: UserRecord) -> "Candidate":
        return cls(
            name=user.name,
            phone_number=user.phone_number,
            is_registered=True,
            email=user.email,
            user_id=user.id,
        )

    @classmethod
    def from_contact(cls, contact: ContactRecord) -> "Candidate":
        return cls(name=contact.name, phone_number=contact.phone_number, is_registered=False)


def merge_candidates(*batches: Iterable[Candidate]) -> list[Candidate]:
    """Merge batches in order, keeping one candidate per phone number.

    The first candidate seen for a number holds its position. An unregistered
    entry is replaced in place by the first registered candidate that arrives
    for the same number; a registered entry is never replaced.
    """
    merged: list[Candidate] = []
    index_by_phone: dict[str, int] = {}
    for batch in batches:
        for candidate in batch:
            idx = index_by_phone.get(candidate.phone_number)
            if idx is None:
                index_by_phone[candidate.phone_number] = len(merged)
                merged.append(candidate)
            elif candidate.is_registered and not merged[idx].is_registered:
                merged[idx] = candidate
    return merged
