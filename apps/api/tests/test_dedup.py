"""Tests for candidate merging by phone number."""
import pytest

from callerid.services.dedup import Candidate, merge_candidates
from callerid.store import ContactRecord, UserRecord

pytestmark = pytest.mark.unit


def registered(name, phone, user_id=1):
    return Candidate(name=name, phone_number=phone, is_registered=True, user_id=user_id)


def contact(name, phone):
    return Candidate(name=name, phone_number=phone, is_registered=False)


class TestMergeCandidates:

    def test_empty_batches(self):
        assert merge_candidates([], [], [], []) == []

    def test_keeps_insertion_order_across_batches(self):
        merged = merge_candidates(
            [registered("Alice", "111")],
            [contact("Albert", "222")],
            [registered("Malcolm", "333")],
            [contact("Carlalice", "444")],
        )
        assert [c.name for c in merged] == ["Alice", "Albert", "Malcolm", "Carlalice"]

    def test_registered_replaces_earlier_contact_in_place(self):
        merged = merge_candidates(
            [registered("Alice", "111")],
            [contact("Albert", "222"), contact("Alfred", "555")],
            [registered("Sally Bert", "222", user_id=7)],
            [],
        )
        assert [c.name for c in merged] == ["Alice", "Sally Bert", "Alfred"]
        assert merged[1].is_registered is True
        assert merged[1].user_id == 7

    def test_later_contact_never_replaces_contact(self):
        merged = merge_candidates([contact("First", "222")], [contact("Second", "222")])
        assert len(merged) == 1
        assert merged[0].name == "First"

    def test_later_registered_never_replaces_registered(self):
        merged = merge_candidates([registered("First", "222", 1)], [registered("Second", "222", 2)])
        assert len(merged) == 1
        assert merged[0].name == "First"

    def test_contact_after_registered_is_dropped(self):
        merged = merge_candidates([registered("Alice", "111")], [contact("Ally from work", "111")])
        assert merged == [registered("Alice", "111")]

    def test_phone_numbers_unique(self):
        batches = [
            [contact("A", "1"), contact("B", "2"), contact("C", "1")],
            [registered("D", "2"), registered("E", "3")],
            [contact("F", "3"), registered("G", "1")],
        ]
        merged = merge_candidates(*batches)
        phones = [c.phone_number for c in merged]
        assert len(phones) == len(set(phones)) == 3
        assert all(c.is_registered for c in merged)


class TestCandidateFactories:

    def test_from_user_carries_email_and_id(self):
        user = UserRecord(id=4, name="Alice", phone_number="111", email="alice@example.com")
        c = Candidate.from_user(user)
        assert c.is_registered is True
        assert c.email == "alice@example.com"
        assert c.user_id == 4

    def test_from_contact_has_no_email(self):
        record = ContactRecord(id=9, name="Albert", phone_number="222", user_id=4)
        c = Candidate.from_contact(record)
        assert c.is_registered is False
        assert c.email is None
        assert c.user_id is None
