"""Request and response schemas."""

from .auth import LoginRequest, TokenResponse
from .category import CategoryCreate, CategoryResponse, CategoryUpdate
from .comment import CommentCreate, CommentResponse, CommentUpdate
from .common import Envelope, ErrorResponse, HealthResponse
from .post import PostCreate, PostResponse, PostUpdate
from .user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "Envelope",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "TokenResponse",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "CommentCreate",
    "CommentUpdate",
    "CommentResponse",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
]
