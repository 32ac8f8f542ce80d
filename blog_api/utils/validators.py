"""Validation rules applied to request payloads before any store work.

Every rule trims free text before judging it, so a value made only of
whitespace counts as blank. Rules raise subclasses of ``InvalidInputError``;
they never touch the store.

Update payloads are checked against explicit, ordered field tuples. The first
supplied field that is blank after trimming wins, which pins down the error a
caller sees when several fields are wrong at once.
"""

import re
import uuid
from collections.abc import Mapping, Sequence
from typing import Any

from blog_api.constants import PostStatus, Role

from .exceptions import BlankFieldError, InvalidFieldError, InvalidIdentifierError, InvalidInputError

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)
NUMERIC_ID_PATTERN = re.compile(r"^\d+$")
# Largest value a 64-bit signed INTEGER column holds
MAX_NUMERIC_ID = 2**63 - 1

# Update check order, first violation wins
USER_UPDATE_FIELDS = ("username", "password", "email", "role")
POST_UPDATE_FIELDS = ("title", "content", "status")
COMMENT_UPDATE_FIELDS = ("content",)
CATEGORY_UPDATE_FIELDS = ("name", "description")

USER_REQUIRED_MESSAGE = "Username, email, and password are required"
POST_REQUIRED_MESSAGE = "Title, content are required"
COMMENT_REQUIRED_MESSAGE = "Content is required"
CATEGORY_REQUIRED_MESSAGE = "Category name and description are required and cannot be blank"
LOGIN_REQUIRED_MESSAGE = "Username and password are required"

USER_UPDATE_REQUIRED_MESSAGE = (
    "At least one of username, password, email, or role must be provided and non-blank"
)
POST_UPDATE_REQUIRED_MESSAGE = (
    "At least one of title, content or status must be provided and non-blank for update"
)
CATEGORY_UPDATE_REQUIRED_MESSAGE = "At least one field (name or description) must be provided"


def clean_text(field: str, value: Any) -> str | None:
    """Return ``value`` trimmed, or None when it is absent."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidFieldError(field)
    return value.strip()


def is_blank(value: Any) -> bool:
    """Check whether a value is missing or whitespace only."""
    return value is None or (isinstance(value, str) and not value.strip())


def validate_uuid(value: Any, message: str) -> uuid.UUID:
    """Validate a canonical hyphenated UUID and return it parsed."""
    if isinstance(value, uuid.UUID):
        return value
    if not isinstance(value, str) or not UUID_PATTERN.match(value):
        raise InvalidIdentifierError(message)
    return uuid.UUID(value)


def validate_numeric_id(value: Any, message: str) -> int:
    """Validate a non-negative integer identifier."""
    if isinstance(value, bool):
        raise InvalidIdentifierError(message)
    if isinstance(value, str) and NUMERIC_ID_PATTERN.match(value.strip()):
        value = int(value.strip())
    if not isinstance(value, int) or not 0 <= value <= MAX_NUMERIC_ID:
        raise InvalidIdentifierError(message)
    return value


def require_fields(payload: Mapping[str, Any], fields: Sequence[str], message: str) -> dict[str, str]:
    """Return the trimmed required ``fields``, raising ``message`` if any is blank."""
    if not isinstance(payload, Mapping):
        raise InvalidInputError(message)

    cleaned = {}
    for field in fields:
        value = clean_text(field, payload.get(field))
        if not value:
            raise InvalidInputError(message)
        cleaned[field] = value
    return cleaned


def collect_updates(payload: Mapping[str, Any], fields: Sequence[str]) -> dict[str, str]:
    """Collect the supplied update fields in order, rejecting blank ones."""
    if not isinstance(payload, Mapping):
        raise InvalidInputError("Request body must be an object")

    changes = {}
    for field in fields:
        value = clean_text(field, payload.get(field))
        if value is None:
            continue
        if not value:
            raise BlankFieldError(field)
        changes[field] = value
    return changes


def validate_role(value: str) -> Role:
    """Validate a role name."""
    try:
        return Role(value)
    except ValueError:
        raise InvalidFieldError("role", "Invalid role specified")


def validate_post_status(value: str) -> PostStatus:
    """Validate a post status name."""
    try:
        return PostStatus(value)
    except ValueError:
        raise InvalidFieldError("status", "Invalid Post status specified")


def validate_user_create(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a registration payload."""
    data: dict[str, Any] = require_fields(
        payload, ("username", "email", "password"), USER_REQUIRED_MESSAGE
    )

    role = clean_text("role", payload.get("role"))
    if role is not None:
        data["role"] = validate_role(role)
    return data


def validate_user_update(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a user update payload."""
    changes: dict[str, Any] = collect_updates(payload, USER_UPDATE_FIELDS)
    if not changes:
        raise InvalidInputError(USER_UPDATE_REQUIRED_MESSAGE)

    if "role" in changes:
        changes["role"] = validate_role(changes["role"])
    return changes


def validate_login(payload: Mapping[str, Any]) -> dict[str, str]:
    """Validate login credentials."""
    return require_fields(payload, ("username", "password"), LOGIN_REQUIRED_MESSAGE)


def validate_post_create(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a new post payload."""
    data: dict[str, Any] = require_fields(payload, ("title", "content"), POST_REQUIRED_MESSAGE)

    status = clean_text("status", payload.get("status"))
    if status is not None:
        data["status"] = validate_post_status(status)

    if payload.get("category_id") is not None:
        data["category_id"] = validate_numeric_id(payload["category_id"], "Invalid category ID")
    return data


def validate_post_update(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a post update payload."""
    changes: dict[str, Any] = collect_updates(payload, POST_UPDATE_FIELDS)

    if payload.get("category_id") is not None:
        changes["category_id"] = validate_numeric_id(payload["category_id"], "Invalid category ID")

    if not changes:
        raise InvalidInputError(POST_UPDATE_REQUIRED_MESSAGE)

    if "status" in changes:
        changes["status"] = validate_post_status(changes["status"])
    return changes


def validate_comment_content(payload: Mapping[str, Any]) -> str:
    """Validate the content of a new comment."""
    return require_fields(payload, ("content",), COMMENT_REQUIRED_MESSAGE)["content"]


def validate_comment_update(payload: Mapping[str, Any]) -> dict[str, str]:
    """Validate a comment edit payload."""
    changes = collect_updates(payload, COMMENT_UPDATE_FIELDS)
    if not changes:
        raise InvalidInputError(COMMENT_REQUIRED_MESSAGE)
    return changes


def validate_category(item: Any) -> dict[str, str]:
    """Validate a single category payload."""
    return require_fields(item, ("name", "description"), CATEGORY_REQUIRED_MESSAGE)


def validate_category_batch(payload: Any) -> list[dict[str, str]]:
    """Validate one category or a list of them; every item must pass."""
    items = [payload] if isinstance(payload, Mapping) else payload
    if not isinstance(items, Sequence) or isinstance(items, str) or not items:
        raise InvalidInputError(CATEGORY_REQUIRED_MESSAGE)
    return [validate_category(item) for item in items]


def validate_category_update(payload: Mapping[str, Any]) -> dict[str, str]:
    """Validate a category update payload."""
    changes = collect_updates(payload, CATEGORY_UPDATE_FIELDS)
    if not changes:
        raise InvalidInputError(CATEGORY_UPDATE_REQUIRED_MESSAGE)
    return changes
