"""Auth (register, login) business logic."""

import logging

from fastapi import HTTPException, status

from callerid.core import create_access_token, hash_password, verify_password
from callerid.schemas import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from callerid.store import CallerStore, StoreError, UserRecord

logger = logging.getLogger(__name__)

PHONE_TAKEN_DETAIL = "Phone number already registered"


def _user_response(user: UserRecord) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        phone_number=user.phone_number,
        email=user.email,
        created_at=user.created_at,
    )


async def register(store: CallerStore, body: RegisterRequest) -> AuthResponse:
    """Create a user account keyed by phone number."""
    existing = await store.find_user_by_phone_number(body.phone_number)
    if existing:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=PHONE_TAKEN_DETAIL)

    try:
        user = await store.create_user(
            name=body.name,
            phone_number=body.phone_number,
            email=str(body.email) if body.email else None,
            hashed_password=hash_password(body.password),
        )
    except StoreError as e:
        if e.is_duplicate:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=PHONE_TAKEN_DETAIL)
        raise

    token = create_access_token(subject=str(user.id))
    return AuthResponse(message="User registered successfully", user=_user_response(user), token=token)


async def login(store: CallerStore, body: LoginRequest) -> AuthResponse:
    """Authenticate and return a token. Raises HTTPException if invalid credentials."""
    user = await store.find_user_by_phone_number(body.phone_number)
    if not user or not verify_password(body.password, user.hashed_password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = create_access_token(subject=str(user.id))
    return AuthResponse(message="Login successful", user=_user_response(user), token=token)


class AuthService:
    """Facade for auth operations."""

    @staticmethod
    async def register(store: CallerStore, body: RegisterRequest) -> AuthResponse:
        return await register(store, body)

    @staticmethod
    async def login(store: CallerStore, body: LoginRequest) -> AuthResponse:
        return await login(store, body)


auth_service = AuthService()
