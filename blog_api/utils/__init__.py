"""Utility modules."""

from .exceptions import (
    BlankFieldError,
    BlogAPIError,
    ConflictError,
    DatabaseError,
    FieldValidationError,
    ForbiddenError,
    InternalError,
    InvalidCredentialError,
    InvalidFieldError,
    InvalidIdentifierError,
    InvalidInputError,
    NotFoundError,
    StoreError,
    UnauthorizedError,
    UniqueConstraintViolation,
    UnprocessableEntityError,
)

__all__ = [
    "BlogAPIError",
    "InvalidInputError",
    "InvalidIdentifierError",
    "InvalidFieldError",
    "BlankFieldError",
    "UnauthorizedError",
    "ForbiddenError",
    "InvalidCredentialError",
    "NotFoundError",
    "ConflictError",
    "UnprocessableEntityError",
    "InternalError",
    "StoreError",
    "UniqueConstraintViolation",
    "FieldValidationError",
    "DatabaseError",
]
