from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, EmailStr, field_validator
from pydantic.alias_generators import to_camel

from callerid.schemas.base import CamelModel
from callerid.schemas.validators import (
    MAX_EMAIL_LENGTH,
    MIN_PASSWORD_LENGTH,
    check_name,
    check_phone_number,
)


class RegisterRequest(CamelModel):
    name: str
    phone_number: str
    email: Optional[EmailStr] = None
    password: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return check_name(value, min_length=2)

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, value: str) -> str:
        return check_phone_number(value)

    @field_validator("email")
    @classmethod
    def validate_email_length(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and len(value) > MAX_EMAIL_LENGTH:
            raise ValueError(f"Email must be {MAX_EMAIL_LENGTH} characters or less")
        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
        return value


class LoginRequest(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    phone_number: str
    password: str

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, value: str) -> str:
        return check_phone_number(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise ValueError("Password is required")
        return value


class UserResponse(CamelModel):
    id: int
    name: str
    phone_number: str
    email: Optional[str] = None
    created_at: Optional[datetime] = None


class AuthResponse(CamelModel):
    message: str
    user: UserResponse
    token: str
