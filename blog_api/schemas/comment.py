"""Comment schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CommentCreate(BaseModel):
    """New comment payload."""

    post_id: str | None = None
    content: str | None = None


class CommentUpdate(BaseModel):
    """Comment edit payload."""

    content: str | None = None


class CommentResponse(BaseModel):
    """Comment representation."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    content: str
    post_id: uuid.UUID
    author_id: uuid.UUID
    created_at: datetime
