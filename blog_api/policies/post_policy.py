"""Post authorization policies."""

from .base_policy import Action, BasePolicy, PolicyContext, PolicyResult


class PostPolicy(BasePolicy):
    """Anyone may read posts; only the author or an admin may change one."""

    resource_name = "post"

    def check(self, action: Action, context: PolicyContext) -> PolicyResult:
        if action in (Action.READ, Action.LIST):
            return PolicyResult.allow("Public access")

        auth_check = self._require_authentication(context)
        if auth_check:
            return auth_check

        if action == Action.CREATE:
            return PolicyResult.allow("Authenticated access")
        elif action in (Action.UPDATE, Action.DELETE):
            if context.is_admin():
                return PolicyResult.allow("Admin access")
            if context.is_author(context.resource):
                return PolicyResult.allow("Author access")
            return self._not_authorized(action)
        else:
            return PolicyResult.deny(f"Unknown action: {action}")
