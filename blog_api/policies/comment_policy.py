"""Comment authorization policies."""

from .base_policy import Action, BasePolicy, PolicyContext, PolicyResult


class CommentPolicy(BasePolicy):
    """Authorization policies for comment operations.

    Every comment operation requires an authenticated caller. Edits are
    reserved to the comment's author and admins; deletion is additionally
    open to the author of the post the comment sits on, so post authors can
    moderate their own threads. The comment passed as ``resource`` must have
    its ``post`` relationship loaded for that last rule.
    """

    resource_name = "comment"

    def check(self, action: Action, context: PolicyContext) -> PolicyResult:
        auth_check = self._require_authentication(context)
        if auth_check:
            return auth_check

        if action in (Action.READ, Action.LIST, Action.CREATE):
            return PolicyResult.allow("Authenticated access")
        elif action == Action.UPDATE:
            return self._check_update(context)
        elif action == Action.DELETE:
            return self._check_delete(context)
        else:
            return PolicyResult.deny(f"Unknown action: {action}")

    def _check_update(self, context: PolicyContext) -> PolicyResult:
        if context.is_admin():
            return PolicyResult.allow("Admin access")
        if context.is_author(context.resource):
            return PolicyResult.allow("Author access")
        return self._not_authorized(Action.UPDATE)

    def _check_delete(self, context: PolicyContext) -> PolicyResult:
        if context.is_admin():
            return PolicyResult.allow("Admin access")
        if context.is_author(context.resource):
            return PolicyResult.allow("Author access")

        # Post authors moderate comments on their posts
        post = getattr(context.resource, "post", None)
        if context.is_author(post):
            return PolicyResult.allow("Post author access")

        return self._not_authorized(Action.DELETE)
