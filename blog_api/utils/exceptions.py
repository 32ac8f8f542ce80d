"""Custom exceptions for the application."""

from typing import Any, Dict, Optional, Sequence

from blog_api.constants import APIStatus


class BlogAPIError(Exception):
    """Base exception for every error that crosses the service boundary."""

    status_code: int = APIStatus.INTERNAL_ERROR
    default_message: str = "Internal server error"
    default_error_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidInputError(BlogAPIError):
    """Raised when input is malformed, missing or blank."""

    status_code = APIStatus.BAD_REQUEST
    default_message = "Invalid input"
    default_error_code = "INVALID_INPUT"


class InvalidIdentifierError(InvalidInputError):
    """Raised when an identifier does not have the expected shape."""

    default_message = "Invalid identifier"
    default_error_code = "INVALID_IDENTIFIER"


class InvalidFieldError(InvalidInputError):
    """Raised when a field holds a value outside its allowed set."""

    default_error_code = "INVALID_FIELD"

    def __init__(self, field: str, message: Optional[str] = None, **kwargs):
        self.field = field
        super().__init__(message or f"Invalid {field}", **kwargs)


class BlankFieldError(InvalidInputError):
    """Raised when a supplied field is empty after trimming."""

    default_error_code = "BLANK_FIELD"

    def __init__(self, field: str, **kwargs):
        self.field = field
        super().__init__(f"{field} cannot be blank", **kwargs)


class UnauthorizedError(BlogAPIError):
    """Raised when credentials are missing or do not match."""

    status_code = APIStatus.UNAUTHORIZED
    default_message = "Authentication failed"
    default_error_code = "UNAUTHORIZED"


class ForbiddenError(BlogAPIError):
    """Raised when an authenticated caller is not permitted to act."""

    status_code = APIStatus.FORBIDDEN
    default_message = "Access denied"
    default_error_code = "FORBIDDEN"


class InvalidCredentialError(ForbiddenError):
    """Raised when a bearer token cannot be verified."""

    default_message = "Invalid or expired token"
    default_error_code = "INVALID_TOKEN"


class NotFoundError(BlogAPIError):
    """Raised when a resource is not found."""

    status_code = APIStatus.NOT_FOUND
    default_message = "Resource not found"
    default_error_code = "NOT_FOUND"


class ConflictError(BlogAPIError):
    """Raised when a unique constraint is violated."""

    status_code = APIStatus.CONFLICT
    default_message = "Resource conflict"
    default_error_code = "CONFLICT"


class UnprocessableEntityError(BlogAPIError):
    """Raised when the store rejects a field value."""

    status_code = APIStatus.UNPROCESSABLE_ENTITY
    default_message = "Validation failed"
    default_error_code = "UNPROCESSABLE_ENTITY"


class InternalError(BlogAPIError):
    """Raised for store failures and unclassified faults."""


# Persistence errors, raised by the store and normalized by the services


class StoreError(Exception):
    """Base class for persistence failures."""


class UniqueConstraintViolation(StoreError):
    """Raised when a write collides with existing unique values."""

    def __init__(self, fields: Sequence[str]):
        self.fields = list(fields)
        super().__init__(", ".join(f"{field} already exists" for field in self.fields))


class FieldValidationError(StoreError):
    """Raised when a model level validator rejects a value."""

    def __init__(self, fields: Sequence[str]):
        self.fields = list(fields)
        super().__init__(", ".join(f"Invalid {field}" for field in self.fields))


class DatabaseError(StoreError):
    """Raised when the database fails for a reason other than the above."""
