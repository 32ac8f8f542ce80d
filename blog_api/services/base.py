"""Shared plumbing for the resource services."""

import functools
import logging
from collections.abc import Callable

from sqlalchemy.exc import SQLAlchemyError

from blog_api.utils.exceptions import (
    BlogAPIError,
    ConflictError,
    DatabaseError,
    FieldValidationError,
    InternalError,
    UniqueConstraintViolation,
    UnprocessableEntityError,
)

from .store import Store

logger = logging.getLogger(__name__)


def service_operation(fallback: str):
    """
    Normalize every failure of a service method into the error taxonomy.

    Taxonomy errors pass through untouched. Store errors become Conflict,
    UnprocessableEntity or a "Database error" Internal; anything else becomes
    Internal carrying its own message, or ``fallback`` when it has none.

    Usage:
        @service_operation("Error deleting post")
        async def delete_post(self, post_id, identity):
            ...
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except BlogAPIError:
                raise
            except UniqueConstraintViolation as e:
                raise ConflictError(str(e), details={"fields": e.fields})
            except FieldValidationError as e:
                raise UnprocessableEntityError(str(e), details={"fields": e.fields})
            except (DatabaseError, SQLAlchemyError) as e:
                logger.error(f"{func.__qualname__} failed: {e}", exc_info=True)
                raise InternalError("Database error")
            except Exception as e:
                logger.exception(f"Unexpected error in {func.__qualname__}")
                raise InternalError(str(e) or fallback)

        return wrapper

    return decorator


class BaseService:
    """A service bound to one request's store."""

    def __init__(self, store: Store):
        self.store = store
