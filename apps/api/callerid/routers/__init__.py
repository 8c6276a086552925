from .auth import router as auth_router
from .search import router as search_router
from .spam import router as spam_router

ROUTERS = (auth_router, search_router, spam_router)

__all__ = [
    "ROUTERS",
    "auth_router",
    "search_router",
    "spam_router",
]
