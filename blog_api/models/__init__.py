"""Database models."""

from .base import Base, CreatedAtMixin, TimestampMixin
from .category import Category
from .comment import Comment
from .post import Post
from .user import User

__all__ = [
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "User",
    "Post",
    "Comment",
    "Category",
]
