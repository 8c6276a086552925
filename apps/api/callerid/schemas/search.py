from typing import Optional

from pydantic import field_validator

from callerid.schemas.base import CamelModel
from callerid.schemas.validators import check_name, check_phone_query


class NameSearchQuery(CamelModel):
    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return check_name(value, min_length=1)


class PhoneSearchQuery(CamelModel):
    phone_number: str

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, value: str) -> str:
        return check_phone_query(value)


class NameSearchResult(CamelModel):
    """Name search row. Never carries an email."""
    name: str
    phone_number: str
    spam_likelihood: int
    is_registered: bool


class PhoneSearchResult(NameSearchResult):
    email: Optional[str] = None  # only for a registered match that has the requester in its contacts


class NameSearchResponse(CamelModel):
    results: list[NameSearchResult] = []
    count: int = 0


class PhoneSearchResponse(CamelModel):
    results: list[PhoneSearchResult] = []
    count: int = 0
