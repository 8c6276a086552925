"""Core configuration, auth, and shared infrastructure."""

from callerid.core.config import Settings, get_settings
from callerid.core.constants import (
    GENERIC_ERROR_DETAIL,
    MAX_SPAM_LIKELIHOOD,
    SPAM_POINTS_PER_REPORT,
    SPAM_THRESHOLD,
)
from callerid.core.auth import (
    verify_password,
    hash_password,
    create_access_token,
    decode_access_token,
)
from callerid.core.limiter import limiter, default_rate_limit, auth_rate_limit
from callerid.core.logging_config import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "GENERIC_ERROR_DETAIL",
    "MAX_SPAM_LIKELIHOOD",
    "SPAM_POINTS_PER_REPORT",
    "SPAM_THRESHOLD",
    "verify_password",
    "hash_password",
    "create_access_token",
    "decode_access_token",
    "limiter",
    "default_rate_limit",
    "auth_rate_limit",
    "configure_logging",
]
