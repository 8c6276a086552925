"""Tests for request field rules."""
import pytest
from pydantic import ValidationError

from callerid.schemas import LoginRequest, NameSearchQuery, PhoneSearchQuery, RegisterRequest
from callerid.schemas.validators import check_name, check_phone_number, check_phone_query

pytestmark = pytest.mark.unit


class TestPhoneNumber:

    @pytest.mark.parametrize("value", ["5551234", "+15551234", "  +15551234  ", "*67#5551234", "123456789012345"])
    def test_accepts(self, value):
        assert check_phone_number(value) == value.strip()

    @pytest.mark.parametrize(
        "value,message",
        [
            ("", "between 7 and 15 digits"),
            ("   ", "between 7 and 15 digits"),
            ("555-1234", "can only contain digits"),
            ("555 1234", "can only contain digits"),
            ("+123456", "between 7 and 15 digits"),
            ("1234567890123456", "between 7 and 15 digits"),
        ],
    )
    def test_rejects(self, value, message):
        with pytest.raises(ValueError, match=message):
            check_phone_number(value)

    def test_query_keeps_single_leading_space(self):
        assert check_phone_query(" 15551234") == " 15551234"
        assert check_phone_query("15551234 ") == "15551234"


class TestName:

    def test_trims(self):
        assert check_name("  Alice  ", min_length=2) == "Alice"

    @pytest.mark.parametrize("value", ["Al1ce", "al@ce", "Bob!", "R$", "A&B", "#hash"])
    def test_rejects_digits_and_symbols(self, value):
        with pytest.raises(ValueError, match="cannot contain numbers"):
            check_name(value, min_length=1)

    def test_length_bounds(self):
        assert check_name("A", min_length=1) == "A"
        with pytest.raises(ValueError, match="between 2 and 100"):
            check_name("A", min_length=2)
        with pytest.raises(ValueError, match="between 1 and 100"):
            check_name("a" * 101, min_length=1)


class TestSchemas:

    def test_register_accepts_camel_case(self):
        body = RegisterRequest.model_validate(
            {"name": "Alice", "phoneNumber": "+15551234", "email": "alice@example.com", "password": "secret1"}
        )
        assert body.phone_number == "+15551234"
        assert body.email == "alice@example.com"

    def test_register_email_optional(self):
        body = RegisterRequest.model_validate({"name": "Alice", "phoneNumber": "5551234", "password": "secret1"})
        assert body.email is None

    def test_register_rejects_short_password(self):
        with pytest.raises(ValidationError):
            RegisterRequest.model_validate({"name": "Alice", "phoneNumber": "5551234", "password": "abc"})

    def test_register_rejects_bad_email(self):
        with pytest.raises(ValidationError):
            RegisterRequest.model_validate(
                {"name": "Alice", "phoneNumber": "5551234", "email": "not-an-email", "password": "secret1"}
            )

    def test_login_forbids_extra_fields(self):
        with pytest.raises(ValidationError):
            LoginRequest.model_validate({"phoneNumber": "5551234", "password": "x", "name": "Alice"})

    def test_login_requires_password(self):
        with pytest.raises(ValidationError):
            LoginRequest.model_validate({"phoneNumber": "5551234", "password": ""})

    def test_query_models(self):
        assert NameSearchQuery.model_validate({"name": " Al "}).name == "Al"
        assert PhoneSearchQuery.model_validate({"phoneNumber": " 15551234"}).phone_number == " 15551234"
