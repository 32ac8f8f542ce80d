"""Authorization policies system."""

from .base_policy import Action, BasePolicy, Identity, PolicyContext, PolicyResult
from .category_policy import CategoryPolicy
from .comment_policy import CommentPolicy
from .guards import POLICY_REGISTRY, can, require
from .post_policy import PostPolicy
from .user_policy import UserPolicy

__all__ = [
    "Action",
    "Identity",
    "BasePolicy",
    "PolicyContext",
    "PolicyResult",
    "UserPolicy",
    "PostPolicy",
    "CommentPolicy",
    "CategoryPolicy",
    "POLICY_REGISTRY",
    "can",
    "require",
]
