"""Authentication schemas."""

from pydantic import BaseModel, Field

from .user import UserResponse


class LoginRequest(BaseModel):
    """Login request schema."""

    username: str | None = Field(None, description="Account username")
    password: str | None = Field(None, description="Account password")


class TokenResponse(BaseModel):
    """Token issued on successful login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="Bearer", description="Token type")
    expires_in: int = Field(..., description="Access token expiration in seconds")
    user: UserResponse
