"""Test configuration and fixtures."""

import os

# Settings are read at import time
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-super-long-for-testing-purposes-only")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("TESTING", "true")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import uuid  # noqa: E402
from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from blog_api.config.database import build_async_engine, build_session_factory  # noqa: E402
from blog_api.constants import Role  # noqa: E402
from blog_api.dependencies.database import get_db  # noqa: E402
from blog_api.main import app  # noqa: E402
from blog_api.models import Base, Category, Post, User  # noqa: E402
from blog_api.policies import Identity  # noqa: E402
from blog_api.services import (  # noqa: E402
    CategoryService,
    CommentService,
    JWTService,
    PostService,
    Store,
    UserService,
)

TEST_PASSWORD = "TestPassword123!"


# Database
@pytest_asyncio.fixture
async def engine():
    """In-memory SQLite engine shared by every session of one test."""
    test_engine = build_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Create async database session for testing."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def store(db_session) -> Store:
    return Store(db_session)


# Services
@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService()


@pytest.fixture
def user_service(store, jwt_service) -> UserService:
    return UserService(store, jwt_service)


@pytest.fixture
def post_service(store) -> PostService:
    return PostService(store)


@pytest.fixture
def comment_service(store) -> CommentService:
    return CommentService(store)


@pytest.fixture
def category_service(store) -> CategoryService:
    return CategoryService(store)


# Async test client
@pytest_asyncio.fixture
async def async_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client bound to the in-memory database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# Data helpers
def identity_of(user: User) -> Identity:
    """Build the identity a token for ``user`` would carry."""
    return Identity(id=user.id, username=user.username, role=user.role)


@pytest.fixture
def make_user(session_factory):
    """Factory that registers a user in its own session."""

    async def _make_user(role: Role = Role.USER, password: str = TEST_PASSWORD, **overrides) -> User:
        unique_id = uuid.uuid4().hex[:8]
        payload = {
            "username": f"user_{unique_id}",
            "email": f"user_{unique_id}@example.com",
            "password": password,
            "role": role.value,
            **overrides,
        }
        async with session_factory() as session:
            return await UserService(Store(session)).create_user(payload)

    return _make_user


@pytest.fixture
def make_category(session_factory):
    """Factory that creates a category directly in the store."""

    async def _make_category(name: str | None = None, description: str = "A category") -> Category:
        async with session_factory() as session:
            return await Store(session).create(
                Category, {"name": name or f"category-{uuid.uuid4().hex[:8]}", "description": description}
            )

    return _make_category


@pytest.fixture
def make_post(session_factory):
    """Factory that creates a post authored by ``author``."""

    async def _make_post(author: User, **fields) -> Post:
        payload = {"title": "A title", "content": "Some content", **fields}
        async with session_factory() as session:
            return await PostService(Store(session)).create_post(payload, identity_of(author))

    return _make_post


@pytest.fixture
def make_comment(session_factory):
    """Factory that creates a comment by ``author`` on ``post``."""

    async def _make_comment(post: Post, author: User, content: str = "Nice post"):
        async with session_factory() as session:
            return await CommentService(Store(session)).create_comment(
                {"post_id": str(post.id), "content": content}, identity_of(author)
            )

    return _make_comment


@pytest_asyncio.fixture
async def test_user(make_user) -> User:
    return await make_user()


@pytest_asyncio.fixture
async def other_user(make_user) -> User:
    return await make_user()


@pytest_asyncio.fixture
async def admin_user(make_user) -> User:
    return await make_user(role=Role.ADMIN)


# Authentication helpers
def bearer(user: User) -> dict[str, str]:
    """Authorization header carrying a fresh token for ``user``."""
    return {"Authorization": f"Bearer {JWTService().create_access_token(user)}"}


@pytest.fixture
def auth_headers(test_user):
    return bearer(test_user)


@pytest.fixture
def other_auth_headers(other_user):
    return bearer(other_user)


@pytest.fixture
def admin_auth_headers(admin_user):
    return bearer(admin_user)


@pytest.fixture
def identity_for():
    return identity_of


@pytest.fixture
def headers_for():
    return bearer
