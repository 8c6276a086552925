"""Pydantic request/response schemas."""

from callerid.schemas.auth import RegisterRequest, LoginRequest, UserResponse, AuthResponse
from callerid.schemas.search import (
    NameSearchQuery,
    PhoneSearchQuery,
    NameSearchResult,
    PhoneSearchResult,
    NameSearchResponse,
    PhoneSearchResponse,
)
from callerid.schemas.spam import (
    SpamReportRequest,
    SpamReportItem,
    SpamReportResponse,
    SpamStatusResponse,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "AuthResponse",
    "NameSearchQuery",
    "PhoneSearchQuery",
    "NameSearchResult",
    "PhoneSearchResult",
    "NameSearchResponse",
    "PhoneSearchResponse",
    "SpamReportRequest",
    "SpamReportItem",
    "SpamReportResponse",
    "SpamStatusResponse",
]
