"""Post management service."""

import logging
from collections.abc import Mapping
from typing import Any

from blog_api.models import Category, Post
from blog_api.policies import Action, Identity, require
from blog_api.utils.exceptions import NotFoundError
from blog_api.utils.validators import (
    validate_numeric_id,
    validate_post_create,
    validate_post_update,
    validate_uuid,
)

from .base import BaseService, service_operation

logger = logging.getLogger(__name__)

INVALID_POST_ID = "Invalid post ID"


class PostService(BaseService):
    """Service for post operations."""

    async def _ensure_category(self, category_id: int) -> None:
        if await self.store.find_by_id(Category, category_id) is None:
            raise NotFoundError("Category not found")

    @service_operation("Error creating post")
    async def create_post(self, payload: Mapping[str, Any], identity: Identity | None) -> Post:
        """Create a post authored by the caller."""
        require(identity, Action.CREATE, "post")
        data = validate_post_create(payload)

        if "category_id" in data:
            await self._ensure_category(data["category_id"])

        post = await self.store.create(Post, {**data, "author_id": identity.id})
        logger.info("Post created", extra={"post_id": str(post.id), "author_id": str(identity.id)})
        return post

    @service_operation("Error fetching posts")
    async def list_posts(self) -> list[Post]:
        """List every post, newest first."""
        posts = await self.store.find_all(Post, order_by=Post.created_at.desc())
        if not posts:
            raise NotFoundError("No posts found")
        return posts

    @service_operation("Error fetching posts")
    async def get_post(self, post_id: Any) -> Post:
        """Get a post by id."""
        pid = validate_uuid(post_id, INVALID_POST_ID)

        post = await self.store.find_by_id(Post, pid)
        if not post:
            raise NotFoundError("Post not found")
        return post

    @service_operation("Error fetching posts")
    async def list_posts_by_category(self, category_id: Any) -> list[Post]:
        """List the posts filed under a category."""
        cid = validate_numeric_id(category_id, "Invalid category ID")

        posts = await self.store.find_all(
            Post, order_by=Post.created_at.desc(), category_id=cid
        )
        if not posts:
            raise NotFoundError("No Posts found for specified category")
        return posts

    @service_operation("Error updating post")
    async def update_post(
        self, post_id: Any, payload: Mapping[str, Any], identity: Identity | None
    ) -> Post:
        """Update a post. Only its author or an admin may do so."""
        pid = validate_uuid(post_id, INVALID_POST_ID)

        async with self.store.transaction():
            post = await self.store.find_by_id(Post, pid, for_update=True)
            if not post:
                raise NotFoundError("Post not found for update")

            require(identity, Action.UPDATE, "post", resource=post)

            changes = validate_post_update(payload)
            if "category_id" in changes:
                await self._ensure_category(changes["category_id"])

            if not await self.store.update(Post, pid, changes):
                raise NotFoundError("Post not found for update")
            post = await self.store.find_by_id(Post, pid)

        logger.info(
            "Post updated",
            extra={"post_id": str(pid), "fields": sorted(changes), "actor_id": str(identity.id)},
        )
        return post

    @service_operation("Error deleting post")
    async def delete_post(self, post_id: Any, identity: Identity | None) -> None:
        """Delete a post and its comments. Only its author or an admin may do so."""
        pid = validate_uuid(post_id, INVALID_POST_ID)

        async with self.store.transaction():
            post = await self.store.find_by_id(Post, pid, for_update=True)
            if not post:
                raise NotFoundError("Post not found")

            require(identity, Action.DELETE, "post", resource=post)

            if not await self.store.destroy(Post, pid):
                raise NotFoundError("Post not found")

        logger.info("Post deleted", extra={"post_id": str(pid), "actor_id": str(identity.id)})
