"""Base policy classes and types."""

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from blog_api.constants import Role


class Action(str, Enum):
    """Standard actions for authorization."""

    CREATE = "create"
    READ = "read"
    LIST = "list"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, as recovered from a bearer token."""

    id: uuid.UUID
    username: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


@dataclass
class PolicyContext:
    """Context for policy evaluation."""

    identity: Optional[Identity]
    resource: Optional[Any] = None
    resource_id: Optional[Any] = None

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    def is_admin(self) -> bool:
        """Check if the caller holds the admin role."""
        return self.identity is not None and self.identity.is_admin

    def is_author(self, record: Any) -> bool:
        """Check if the caller wrote ``record``."""
        if self.identity is None or record is None:
            return False
        return getattr(record, "author_id", None) == self.identity.id


@dataclass
class PolicyResult:
    """Result of policy evaluation."""

    allowed: bool
    reason: Optional[str] = None

    @classmethod
    def allow(cls, reason: Optional[str] = None) -> "PolicyResult":
        """Create an allow result."""
        return cls(allowed=True, reason=reason)

    @classmethod
    def deny(cls, reason: str) -> "PolicyResult":
        """Create a deny result."""
        return cls(allowed=False, reason=reason)


class BasePolicy(ABC):
    """Base class for all authorization policies."""

    resource_name: str = "resource"

    @abstractmethod
    def check(self, action: Action, context: PolicyContext) -> PolicyResult:
        """Check if action is allowed in the given context."""

    def _require_authentication(self, context: PolicyContext) -> Optional[PolicyResult]:
        """Check if the caller is authenticated."""
        if not context.is_authenticated:
            return PolicyResult.deny("Access token is required")
        return None

    def _require_admin(self, context: PolicyContext) -> Optional[PolicyResult]:
        """Check if the caller is an admin."""
        auth_check = self._require_authentication(context)
        if auth_check:
            return auth_check

        if not context.is_admin():
            return PolicyResult.deny("Access denied")
        return None

    def _not_authorized(self, action: Action) -> PolicyResult:
        return PolicyResult.deny(f"You are not authorized to {action.value} this {self.resource_name}")
