from fastapi import APIRouter, Depends, Request, status

from callerid.core import auth_rate_limit, limiter
from callerid.dependencies import get_store
from callerid.schemas import AuthResponse, LoginRequest, RegisterRequest
from callerid.services.auth import auth_service
from callerid.store import CallerStore

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(auth_rate_limit)
async def register(
    request: Request,
    body: RegisterRequest,
    store: CallerStore = Depends(get_store),
):
    return await auth_service.register(store, body)


@router.post("/login", response_model=AuthResponse)
@limiter.limit(auth_rate_limit)
async def login(
    request: Request,
    body: LoginRequest,
    store: CallerStore = Depends(get_store),
):
    return await auth_service.login(store, body)
