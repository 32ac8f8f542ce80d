"""Category schemas."""

from pydantic import BaseModel, ConfigDict


class CategoryCreate(BaseModel):
    """A single category in a create request."""

    name: str | None = None
    description: str | None = None


class CategoryUpdate(BaseModel):
    """Partial category update payload."""

    name: str | None = None
    description: str | None = None


class CategoryResponse(BaseModel):
    """Category representation."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
