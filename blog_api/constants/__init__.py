"""Constants package."""

from .enums import PostStatus, Role
from .status_codes import APIStatus

__all__ = ["APIStatus", "Role", "PostStatus"]
