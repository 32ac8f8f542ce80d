"""Guard helpers for authorization checks."""

from typing import Any

from blog_api.utils.exceptions import ForbiddenError, UnauthorizedError

from .base_policy import Action, Identity, PolicyContext, PolicyResult
from .category_policy import CategoryPolicy
from .comment_policy import CommentPolicy
from .post_policy import PostPolicy
from .user_policy import UserPolicy

# Policy registry
POLICY_REGISTRY = {
    "user": UserPolicy,
    "post": PostPolicy,
    "comment": CommentPolicy,
    "category": CategoryPolicy,
}


def _evaluate(
    identity: Identity | None,
    action: Action,
    resource_type: str,
    resource: Any | None,
    resource_id: Any | None,
) -> PolicyResult:
    try:
        policy_class = POLICY_REGISTRY[resource_type]
    except KeyError:
        raise ValueError(f"No policy registered for resource type '{resource_type}'")

    context = PolicyContext(identity=identity, resource=resource, resource_id=resource_id)
    return policy_class().check(action, context)


def can(
    identity: Identity | None,
    action: Action,
    resource_type: str,
    resource: Any | None = None,
    resource_id: Any | None = None,
) -> bool:
    """
    Check if the caller can perform action on resource.

    Usage:
        can(identity, Action.UPDATE, "post", resource=post)
        can(identity, Action.UPDATE, "user", resource_id=user_id)
        can(None, Action.LIST, "category")
    """
    return _evaluate(identity, action, resource_type, resource, resource_id).allowed


def require(
    identity: Identity | None,
    action: Action,
    resource_type: str,
    resource: Any | None = None,
    resource_id: Any | None = None,
) -> None:
    """
    Require that the caller can perform action on resource.

    Raises UnauthorizedError when there is no caller at all and
    ForbiddenError when the caller is known but not permitted.
    """
    result = _evaluate(identity, action, resource_type, resource, resource_id)
    if result.allowed:
        return

    if identity is None:
        raise UnauthorizedError(result.reason or "Access token is required")
    raise ForbiddenError(result.reason or "Access denied")
