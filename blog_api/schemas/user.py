"""User schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from blog_api.constants import Role


class UserCreate(BaseModel):
    """Registration payload. Presence and blankness are judged by the service."""

    username: str | None = Field(None, description="Unique username")
    email: str | None = Field(None, description="Unique email address")
    password: str | None = Field(None, description="Plain text password, hashed before storage")
    role: str | None = Field(None, description="user or admin, defaults to user")


class UserUpdate(BaseModel):
    """Partial user update payload."""

    username: str | None = None
    password: str | None = None
    email: str | None = None
    role: str | None = None


class UserResponse(BaseModel):
    """Public user representation. Never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    username: str
    email: str
    role: Role
    created_at: datetime
    updated_at: datetime
