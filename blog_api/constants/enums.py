"""Enumerated field values shared by models, validators and policies."""

from enum import Enum


class Role(str, Enum):
    """User roles."""

    USER = "user"
    ADMIN = "admin"


class PostStatus(str, Enum):
    """Publication state of a post."""

    DRAFT = "draft"
    PUBLISHED = "published"
