"""Category management service."""

import logging
from collections.abc import Mapping
from typing import Any

from blog_api.models import Category
from blog_api.policies import Action, Identity, require
from blog_api.utils.exceptions import NotFoundError
from blog_api.utils.validators import (
    validate_category_batch,
    validate_category_update,
    validate_numeric_id,
)

from .base import BaseService, service_operation

logger = logging.getLogger(__name__)

INVALID_CATEGORY_ID = "Invalid category ID"


class CategoryService(BaseService):
    """Service for category operations. Every write is admin only."""

    @service_operation("Error creating category")
    async def create_categories(self, payload: Any, identity: Identity | None) -> list[Category]:
        """
        Create one category or a batch of them.

        The whole batch is validated before anything is written. Each item is
        then created on its own, so a store failure stops the batch but keeps
        the items created before it.
        """
        require(identity, Action.CREATE, "category")
        items = validate_category_batch(payload)

        created = []
        for item in items:
            created.append(await self.store.create(Category, item))

        logger.info(
            "Categories created",
            extra={"category_ids": [c.id for c in created], "actor_id": str(identity.id)},
        )
        return created

    @service_operation("Error fetching categories")
    async def list_categories(self) -> list[Category]:
        """List every category."""
        categories = await self.store.find_all(Category, order_by=Category.id)
        if not categories:
            raise NotFoundError("No categories found")
        return categories

    @service_operation("Error fetching category")
    async def get_category(self, category_id: Any) -> Category:
        """Get a category by id."""
        cid = validate_numeric_id(category_id, INVALID_CATEGORY_ID)

        category = await self.store.find_by_id(Category, cid)
        if not category:
            raise NotFoundError("Category not found")
        return category

    @service_operation("Error updating category")
    async def update_category(
        self, category_id: Any, payload: Mapping[str, Any], identity: Identity | None
    ) -> Category:
        """Rename or redescribe a category."""
        require(identity, Action.UPDATE, "category")
        cid = validate_numeric_id(category_id, INVALID_CATEGORY_ID)
        changes = validate_category_update(payload)

        async with self.store.transaction():
            if not await self.store.update(Category, cid, changes):
                raise NotFoundError("Category not found")
            category = await self.store.find_by_id(Category, cid)

        logger.info(
            "Category updated",
            extra={"category_id": cid, "fields": sorted(changes), "actor_id": str(identity.id)},
        )
        return category

    @service_operation("Error deleting category")
    async def delete_category(self, category_id: Any, identity: Identity | None) -> None:
        """Delete a category. Its posts stay, uncategorized."""
        require(identity, Action.DELETE, "category")
        cid = validate_numeric_id(category_id, INVALID_CATEGORY_ID)

        if not await self.store.destroy(Category, cid):
            raise NotFoundError("Category not found")

        logger.info("Category deleted", extra={"category_id": cid, "actor_id": str(identity.id)})
