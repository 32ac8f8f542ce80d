"""Common Pydantic schemas."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Success body shared by every endpoint."""

    message: str = Field(..., description="Human readable outcome")
    data: T


class ErrorResponse(BaseModel):
    """Error body rendered by the exception handlers."""

    message: str
    error_code: str


class HealthResponse(BaseModel):
    """Liveness probe body."""

    status: str = "healthy"
    version: str
