from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from callerid.core import decode_access_token
from callerid.db.session import async_session
from callerid.store import CallerStore, SqlCallerStore, UserRecord

security = HTTPBearer(auto_error=False)


@lru_cache
def get_store() -> CallerStore:
    return SqlCallerStore(async_session)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    store: Annotated[CallerStore, Depends(get_store)],
) -> UserRecord:
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    subject = decode_access_token(credentials.credentials)
    if not subject or not subject.isdigit():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )
    user = await store.get_user_by_id(int(subject))
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token: User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
