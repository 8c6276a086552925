from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from callerid.core import default_rate_limit, limiter
from callerid.dependencies import get_current_user, get_store
from callerid.schemas import (
    NameSearchQuery,
    NameSearchResponse,
    PhoneSearchQuery,
    PhoneSearchResponse,
)
from callerid.services.search import search_service
from callerid.store import CallerStore, UserRecord

router = APIRouter(prefix="/api/search", tags=["search"])


@router.get("/name", response_model=NameSearchResponse)
@limiter.limit(default_rate_limit)
async def search_by_name(
    request: Request,
    query: Annotated[NameSearchQuery, Query()],
    current_user: UserRecord = Depends(get_current_user),
    store: CallerStore = Depends(get_store),
):
    return await search_service.search_by_name(store, query.name, current_user)


@router.get("/phone", response_model=PhoneSearchResponse)
@limiter.limit(default_rate_limit)
async def search_by_phone(
    request: Request,
    query: Annotated[PhoneSearchQuery, Query()],
    current_user: UserRecord = Depends(get_current_user),
    store: CallerStore = Depends(get_store),
):
    return await search_service.search_by_phone(store, query.phone_number, current_user)
