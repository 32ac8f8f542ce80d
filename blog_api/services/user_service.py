"""User management service."""

import logging
from collections.abc import Mapping
from typing import Any

from blog_api.constants import Role
from blog_api.models import User
from blog_api.policies import Action, Identity, require
from blog_api.utils.exceptions import NotFoundError, UnauthorizedError
from blog_api.utils.security import hash_password, verify_password
from blog_api.utils.validators import (
    validate_login,
    validate_user_create,
    validate_user_update,
    validate_uuid,
)

from .base import BaseService, service_operation
from .jwt_service import JWTService
from .store import Store

logger = logging.getLogger(__name__)

INVALID_USER_ID = "Invalid user ID format"


class UserService(BaseService):
    """Service for user management operations."""

    def __init__(self, store: Store, jwt_service: JWTService | None = None):
        super().__init__(store)
        self.jwt_service = jwt_service or JWTService()

    @service_operation("Error creating user")
    async def create_user(self, payload: Mapping[str, Any]) -> User:
        """Register a new user. The password is stored as a bcrypt hash only."""
        data = validate_user_create(payload)

        user = await self.store.create(
            User,
            {
                "username": data["username"],
                "email": data["email"],
                "password_hash": hash_password(data["password"]),
                "role": data.get("role", Role.USER),
            },
        )

        logger.info("User created", extra={"user_id": str(user.id), "role": user.role.value})
        return user

    @service_operation("Error fetching users")
    async def list_users(self, identity: Identity | None) -> list[User]:
        """List every user."""
        require(identity, Action.LIST, "user")
        return await self.store.find_all(User, order_by=User.created_at)

    @service_operation("Error fetching user")
    async def get_user(self, user_id: Any, identity: Identity | None) -> User:
        """Get a user by id."""
        require(identity, Action.READ, "user")
        uid = validate_uuid(user_id, INVALID_USER_ID)

        user = await self.store.find_by_id(User, uid)
        if not user:
            raise NotFoundError("User not found")
        return user

    @service_operation("Error updating user")
    async def update_user(
        self, user_id: Any, payload: Mapping[str, Any], identity: Identity | None
    ) -> User:
        """Update a user. Callers may edit themselves; admins may edit anyone."""
        uid = validate_uuid(user_id, INVALID_USER_ID)
        require(identity, Action.UPDATE, "user", resource_id=uid)

        changes = validate_user_update(payload)
        if "password" in changes:
            changes["password_hash"] = hash_password(changes.pop("password"))

        async with self.store.transaction():
            updated = await self.store.update(User, uid, changes)
            if not updated:
                raise NotFoundError("User not found")
            user = await self.store.find_by_id(User, uid)

        logger.info(
            "User updated",
            extra={"user_id": str(uid), "fields": sorted(changes), "actor_id": str(identity.id)},
        )
        return user

    @service_operation("Error deleting user")
    async def delete_user(self, user_id: Any, identity: Identity | None) -> None:
        """Delete a user along with their posts and comments. Admin only."""
        require(identity, Action.DELETE, "user")
        uid = validate_uuid(user_id, INVALID_USER_ID)

        deleted = await self.store.destroy(User, uid)
        if not deleted:
            raise NotFoundError("User not found")

        logger.info("User deleted", extra={"user_id": str(uid), "actor_id": str(identity.id)})

    @service_operation("Error logging user")
    async def login(self, payload: Mapping[str, Any]) -> tuple[str, User]:
        """Check credentials and issue an access token."""
        credentials = validate_login(payload)

        user = await self.store.find_one(User, username=credentials["username"])
        if not user:
            raise NotFoundError("User not found")

        if not verify_password(credentials["password"], user.password_hash):
            logger.info("Login rejected", extra={"user_id": str(user.id)})
            raise UnauthorizedError("Invalid password")

        token = self.jwt_service.create_access_token(user)
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return token, user
