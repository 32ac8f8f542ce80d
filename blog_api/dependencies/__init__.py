"""FastAPI dependencies."""

from .auth import get_current_identity, get_jwt_service, get_optional_identity
from .database import get_db
from .services import (
    get_category_service,
    get_comment_service,
    get_post_service,
    get_store,
    get_user_service,
)

__all__ = [
    "get_db",
    "get_store",
    "get_jwt_service",
    "get_optional_identity",
    "get_current_identity",
    "get_user_service",
    "get_post_service",
    "get_comment_service",
    "get_category_service",
]
