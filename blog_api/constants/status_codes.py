"""HTTP status code constants with semantic names."""

from enum import IntEnum


class APIStatus(IntEnum):
    """Semantic HTTP status codes for API responses."""

    # Success
    SUCCESS = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client errors
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422

    # Server errors
    INTERNAL_ERROR = 500
