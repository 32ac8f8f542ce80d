"""Unit tests for the error normalization shared by every service."""

import pytest
from sqlalchemy.exc import OperationalError

from blog_api.constants import APIStatus
from blog_api.services import CategoryService
from blog_api.services.base import service_operation
from blog_api.utils.exceptions import (
    ConflictError,
    DatabaseError,
    FieldValidationError,
    InternalError,
    NotFoundError,
    UniqueConstraintViolation,
    UnprocessableEntityError,
)

pytestmark = pytest.mark.asyncio


class FailingStore:
    """Store stand-in whose reads raise ``error``."""

    def __init__(self, error: Exception):
        self.error = error

    async def find_all(self, *args, **kwargs):
        raise self.error

    async def find_by_id(self, *args, **kwargs):
        raise self.error


class TestStoreFailures:
    """Store errors surface as Internal, Conflict or UnprocessableEntity."""

    async def test_database_error_is_internal(self):
        service = CategoryService(FailingStore(DatabaseError("disk I/O error")))

        with pytest.raises(InternalError) as exc_info:
            await service.list_categories()
        assert exc_info.value.status_code == APIStatus.INTERNAL_ERROR
        assert exc_info.value.message == "Database error"

    async def test_driver_error_is_internal(self):
        error = OperationalError("SELECT 1", {}, Exception("database is locked"))
        service = CategoryService(FailingStore(error))

        with pytest.raises(InternalError) as exc_info:
            await service.get_category("1")
        assert exc_info.value.message == "Database error"

    async def test_unique_violation_is_conflict(self):
        service = CategoryService(FailingStore(UniqueConstraintViolation(["name"])))

        with pytest.raises(ConflictError) as exc_info:
            await service.list_categories()
        assert exc_info.value.status_code == APIStatus.CONFLICT
        assert exc_info.value.message == "name already exists"

    async def test_field_validation_is_unprocessable(self):
        service = CategoryService(FailingStore(FieldValidationError(["email"])))

        with pytest.raises(UnprocessableEntityError) as exc_info:
            await service.list_categories()
        assert exc_info.value.status_code == APIStatus.UNPROCESSABLE_ENTITY
        assert exc_info.value.message == "Invalid email"


class TestUnexpectedFailures:
    """Anything outside the taxonomy becomes Internal."""

    async def test_keeps_exception_message(self):
        service = CategoryService(FailingStore(RuntimeError("cache exploded")))

        with pytest.raises(InternalError) as exc_info:
            await service.list_categories()
        assert exc_info.value.status_code == APIStatus.INTERNAL_ERROR
        assert exc_info.value.message == "cache exploded"

    async def test_blank_message_uses_fallback(self):
        service = CategoryService(FailingStore(RuntimeError()))

        with pytest.raises(InternalError) as exc_info:
            await service.list_categories()
        assert exc_info.value.message == "Error fetching categories"

    async def test_taxonomy_errors_pass_through(self):
        @service_operation("Error doing work")
        async def work():
            raise NotFoundError("Post not found")

        with pytest.raises(NotFoundError) as exc_info:
            await work()
        assert exc_info.value.message == "Post not found"

    async def test_return_value_is_untouched(self):
        @service_operation("Error doing work")
        async def work(value):
            return value * 2

        assert await work(21) == 42
