from .auth import auth_service
from .search import search_service
from .spam import spam_service

__all__ = ["auth_service", "search_service", "spam_service"]
