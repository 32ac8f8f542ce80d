"""API routers."""

from . import categories, comments, posts, users

__all__ = ["users", "posts", "comments", "categories"]
