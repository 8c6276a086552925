"""Spam reporting and status business logic."""

import logging

from fastapi import HTTPException, status

from callerid.schemas import SpamReportItem, SpamReportResponse, SpamStatusResponse
from callerid.services.phone import normalize_lookup_phone
from callerid.services.spam_score import is_spam, spam_likelihood
from callerid.store import CallerStore, StoreError, UserRecord

logger = logging.getLogger(__name__)

ALREADY_REPORTED_DETAIL = "You have already reported this number as spam"


async def report_spam(store: CallerStore, reporter: UserRecord, phone_number: str) -> SpamReportResponse:
    """Record one report per (number, reporter). A repeat report is a 400."""
    existing = await store.find_spam_report(phone_number, reporter.id)
    if existing:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ALREADY_REPORTED_DETAIL)

    try:
        report = await store.create_spam_report(phone_number, reporter.id)
    except StoreError as e:
        if e.is_duplicate:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ALREADY_REPORTED_DETAIL)
        raise

    total = await store.count_spam_reports(phone_number)
    logger.info("User %s reported %s as spam (%d total)", reporter.id, phone_number, total)
    return SpamReportResponse(
        message="Phone number reported as spam successfully",
        spam_report=SpamReportItem(
            id=report.id,
            phone_number=report.phone_number,
            reported_at=report.created_at,
        ),
        total_spam_reports=total,
    )


async def get_spam_status(store: CallerStore, phone_number: str) -> SpamStatusResponse:
    phone_number = normalize_lookup_phone(phone_number)
    logger.debug("Checking spam status for %s", phone_number)
    count = await store.count_spam_reports(phone_number)
    likelihood = spam_likelihood(count)
    return SpamStatusResponse(
        phone_number=phone_number,
        spam_reports=count,
        spam_likelihood=likelihood,
        is_spam=is_spam(likelihood),
    )


class SpamService:
    """Facade for spam operations."""

    @staticmethod
    async def report_spam(store: CallerStore, reporter: UserRecord, phone_number: str) -> SpamReportResponse:
        return await report_spam(store, reporter, phone_number)

    @staticmethod
    async def get_spam_status(store: CallerStore, phone_number: str) -> SpamStatusResponse:
        return await get_spam_status(store, phone_number)


spam_service = SpamService()
