from datetime import datetime
from typing import Optional

from pydantic import field_validator

from callerid.schemas.base import CamelModel
from callerid.schemas.validators import check_phone_number


class SpamReportRequest(CamelModel):
    phone_number: str

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, value: str) -> str:
        return check_phone_number(value)


class SpamReportItem(CamelModel):
    id: int
    phone_number: str
    reported_at: Optional[datetime] = None


class SpamReportResponse(CamelModel):
    message: str
    spam_report: SpamReportItem
    total_spam_reports: int


class SpamStatusResponse(CamelModel):
    phone_number: str
    spam_reports: int
    spam_likelihood: int
    is_spam: bool
