"""Comment management service."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import selectinload

from blog_api.models import Comment, Post
from blog_api.policies import Action, Identity, require
from blog_api.utils.exceptions import NotFoundError
from blog_api.utils.validators import validate_comment_content, validate_comment_update, validate_uuid

from .base import BaseService, service_operation

logger = logging.getLogger(__name__)

INVALID_COMMENT_ID = "Invalid comment ID"


class CommentService(BaseService):
    """Service for comment operations."""

    async def _get_post(self, post_id: Any) -> Post:
        pid = validate_uuid(post_id, "Invalid post ID")
        post = await self.store.find_by_id(Post, pid)
        if not post:
            raise NotFoundError("Post not found")
        return post

    @service_operation("Error creating comment")
    async def create_comment(self, payload: Mapping[str, Any], identity: Identity | None) -> Comment:
        """Comment on an existing post as the caller."""
        require(identity, Action.CREATE, "comment")
        post = await self._get_post(payload.get("post_id"))
        content = validate_comment_content(payload)

        comment = await self.store.create(
            Comment, {"content": content, "post_id": post.id, "author_id": identity.id}
        )
        logger.info(
            "Comment created",
            extra={"comment_id": str(comment.id), "post_id": str(post.id), "author_id": str(identity.id)},
        )
        return comment

    @service_operation("Error fetching comments")
    async def list_comments_by_post(self, post_id: Any, identity: Identity | None) -> list[Comment]:
        """List the comments on a post, oldest first."""
        require(identity, Action.LIST, "comment")
        post = await self._get_post(post_id)

        comments = await self.store.find_all(Comment, order_by=Comment.created_at, post_id=post.id)
        if not comments:
            raise NotFoundError("No comments found for this post")
        return comments

    @service_operation("Error fetching comments")
    async def get_comment(self, comment_id: Any, identity: Identity | None) -> Comment:
        """Get a comment by id."""
        require(identity, Action.READ, "comment")
        cid = validate_uuid(comment_id, INVALID_COMMENT_ID)

        comment = await self.store.find_by_id(Comment, cid)
        if not comment:
            raise NotFoundError("Comment not found")
        return comment

    @service_operation("Error updating comments")
    async def update_comment(
        self, comment_id: Any, payload: Mapping[str, Any], identity: Identity | None
    ) -> Comment:
        """Edit a comment. Only its author or an admin may do so."""
        cid = validate_uuid(comment_id, INVALID_COMMENT_ID)
        changes = validate_comment_update(payload)

        async with self.store.transaction():
            comment = await self.store.find_by_id(Comment, cid, for_update=True)
            if not comment:
                raise NotFoundError("Comment not found")

            require(identity, Action.UPDATE, "comment", resource=comment)

            if not await self.store.update(Comment, cid, changes):
                raise NotFoundError("Comment not found")
            comment = await self.store.find_by_id(Comment, cid)

        logger.info("Comment updated", extra={"comment_id": str(cid), "actor_id": str(identity.id)})
        return comment

    @service_operation("Error deleting comments")
    async def delete_comment(self, comment_id: Any, identity: Identity | None) -> None:
        """Delete a comment. Its author, an admin or the post's author may do so."""
        cid = validate_uuid(comment_id, INVALID_COMMENT_ID)

        async with self.store.transaction():
            comment = await self.store.find_by_id(
                Comment, cid, options=(selectinload(Comment.post),), for_update=True
            )
            if not comment:
                raise NotFoundError("Comment not found")

            require(identity, Action.DELETE, "comment", resource=comment)

            if not await self.store.destroy(Comment, cid):
                raise NotFoundError("Comment not found")

        logger.info("Comment deleted", extra={"comment_id": str(cid), "actor_id": str(identity.id)})
