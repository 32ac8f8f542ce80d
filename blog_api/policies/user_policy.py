"""User-related authorization policies."""

from .base_policy import Action, BasePolicy, PolicyContext, PolicyResult


class UserPolicy(BasePolicy):
    """Authorization policies for user operations."""

    resource_name = "user"

    def check(self, action: Action, context: PolicyContext) -> PolicyResult:
        """Check user authorization."""

        # Registration is open
        if action == Action.CREATE:
            return PolicyResult.allow("Public registration")

        auth_check = self._require_authentication(context)
        if auth_check:
            return auth_check

        if action in (Action.READ, Action.LIST):
            return PolicyResult.allow("Authenticated access")
        elif action == Action.UPDATE:
            return self._check_update(context)
        elif action == Action.DELETE:
            return self._require_admin(context) or PolicyResult.allow("Admin access")
        else:
            return PolicyResult.deny(f"Unknown action: {action}")

    def _check_update(self, context: PolicyContext) -> PolicyResult:
        """Users may edit themselves; admins may edit anyone."""
        if context.is_admin():
            return PolicyResult.allow("Admin access")

        if context.resource_id is not None and context.resource_id == context.identity.id:
            return PolicyResult.allow("Self access")

        return self._not_authorized(Action.UPDATE)
