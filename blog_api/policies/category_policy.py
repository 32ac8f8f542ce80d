"""Category authorization policies."""

from .base_policy import Action, BasePolicy, PolicyContext, PolicyResult


class CategoryPolicy(BasePolicy):
    """Categories are public to read and admin-only to change."""

    resource_name = "category"

    def check(self, action: Action, context: PolicyContext) -> PolicyResult:
        if action in (Action.READ, Action.LIST):
            return PolicyResult.allow("Public access")

        if action in (Action.CREATE, Action.UPDATE, Action.DELETE):
            return self._require_admin(context) or PolicyResult.allow("Admin access")

        return PolicyResult.deny(f"Unknown action: {action}")
