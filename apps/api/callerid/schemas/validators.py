"""Field rules shared by request schemas (phone numbers, names)."""

import re

_PHONE_ALLOWED = re.compile(r"^[0-9#*+]*$")
_NAME_FORBIDDEN = re.compile(r"[0-9@#!$&]")

MIN_PHONE_DIGITS = 7
MAX_PHONE_DIGITS = 15
MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 254
MIN_PASSWORD_LENGTH = 6


def check_phone_number(value: str) -> str:
    """Return the trimmed phone number or raise ValueError."""
    trimmed = (value or "").strip()
    if not trimmed:
        raise ValueError(f"Phone number must contain between {MIN_PHONE_DIGITS} and {MAX_PHONE_DIGITS} digits.")
    if not _PHONE_ALLOWED.match(trimmed):
        raise ValueError("Phone number can only contain digits (0-9) and special characters (+, #, *).")
    digits = sum(1 for ch in trimmed if ch.isdigit())
    if not MIN_PHONE_DIGITS <= digits <= MAX_PHONE_DIGITS:
        raise ValueError(f"Phone number must contain between {MIN_PHONE_DIGITS} and {MAX_PHONE_DIGITS} digits.")
    return trimmed


def check_phone_query(value: str) -> str:
    """Validate like ``check_phone_number`` but keep one leading space.

    An unencoded ``+`` in a query string arrives as a space; the lookup services
    turn that space back into ``+``.
    """
    trimmed = check_phone_number(value)
    if value.startswith(" "):
        return " " + trimmed
    return trimmed


def check_name(value: str, min_length: int) -> str:
    trimmed = (value or "").strip()
    if _NAME_FORBIDDEN.search(trimmed):
        raise ValueError("Name cannot contain numbers or special characters like @, #, !, $, &.")
    if not min_length <= len(trimmed) <= MAX_NAME_LENGTH:
        raise ValueError(f"Name must be between {min_length} and {MAX_NAME_LENGTH} characters")
    return trimmed
