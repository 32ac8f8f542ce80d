"""Service dependency injection."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.dependencies.auth import get_jwt_service
from blog_api.dependencies.database import get_db
from blog_api.services.category_service import CategoryService
from blog_api.services.comment_service import CommentService
from blog_api.services.jwt_service import JWTService
from blog_api.services.post_service import PostService
from blog_api.services.store import Store
from blog_api.services.user_service import UserService


async def get_store(db: AsyncSession = Depends(get_db)) -> AsyncGenerator[Store, None]:
    """Get a Store bound to the request's session."""
    yield Store(db)


async def get_user_service(
    store: Store = Depends(get_store),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> AsyncGenerator[UserService, None]:
    """Get UserService instance."""
    yield UserService(store, jwt_service)


async def get_post_service(store: Store = Depends(get_store)) -> AsyncGenerator[PostService, None]:
    """Get PostService instance."""
    yield PostService(store)


async def get_comment_service(
    store: Store = Depends(get_store),
) -> AsyncGenerator[CommentService, None]:
    """Get CommentService instance."""
    yield CommentService(store)


async def get_category_service(
    store: Store = Depends(get_store),
) -> AsyncGenerator[CategoryService, None]:
    """Get CategoryService instance."""
    yield CategoryService(store)
