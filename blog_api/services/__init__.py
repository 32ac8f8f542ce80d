"""Service layer for business logic."""

from .base import BaseService, service_operation
from .category_service import CategoryService
from .comment_service import CommentService
from .jwt_service import JWTService
from .post_service import PostService
from .store import Store
from .user_service import UserService

__all__ = [
    "BaseService",
    "service_operation",
    "Store",
    "JWTService",
    "UserService",
    "PostService",
    "CommentService",
    "CategoryService",
]
