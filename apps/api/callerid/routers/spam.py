from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status

from callerid.core import default_rate_limit, limiter
from callerid.dependencies import get_current_user, get_store
from callerid.schemas import (
    PhoneSearchQuery,
    SpamReportRequest,
    SpamReportResponse,
    SpamStatusResponse,
)
from callerid.services.spam import spam_service
from callerid.store import CallerStore, UserRecord

router = APIRouter(prefix="/api/spam", tags=["spam"])


@router.post("/report", response_model=SpamReportResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(default_rate_limit)
async def report_spam(
    request: Request,
    body: SpamReportRequest,
    current_user: UserRecord = Depends(get_current_user),
    store: CallerStore = Depends(get_store),
):
    return await spam_service.report_spam(store, current_user, body.phone_number)


@router.get("/status", response_model=SpamStatusResponse)
@limiter.limit(default_rate_limit)
async def get_spam_status(
    request: Request,
    query: Annotated[PhoneSearchQuery, Query()],
    current_user: UserRecord = Depends(get_current_user),
    store: CallerStore = Depends(get_store),
):
    return await spam_service.get_spam_status(store, query.phone_number)
