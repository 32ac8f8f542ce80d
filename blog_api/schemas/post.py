"""Post schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from blog_api.constants import PostStatus


class PostCreate(BaseModel):
    """New post payload."""

    title: str | None = None
    content: str | None = None
    status: str | None = Field(None, description="draft or published, defaults to draft")
    category_id: int | str | None = Field(None, description="Optional category id")


class PostUpdate(BaseModel):
    """Partial post update payload."""

    title: str | None = None
    content: str | None = None
    status: str | None = None
    category_id: int | str | None = None


class PostResponse(BaseModel):
    """Post representation."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    content: str
    status: PostStatus
    author_id: uuid.UUID
    category_id: int | None
    created_at: datetime
    updated_at: datetime
