"""JWT service for token generation and validation."""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from blog_api.config.settings import settings
from blog_api.constants import Role
from blog_api.models import User
from blog_api.policies import Identity
from blog_api.utils.exceptions import InvalidCredentialError


class JWTService:
    """Service for JWT token operations."""

    def __init__(self):
        self.secret_key = settings.JWT_SECRET_KEY
        self.algorithm = settings.JWT_ALGORITHM
        self.issuer = settings.JWT_ISSUER
        self.access_token_expire_minutes = settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES

    @property
    def expires_in(self) -> int:
        """Access token lifetime in seconds."""
        return self.access_token_expire_minutes * 60

    def create_access_token(self, user: User) -> str:
        """Create a signed access token carrying the caller identity."""
        now = datetime.now(timezone.utc)
        expire = now + timedelta(minutes=self.access_token_expire_minutes)

        payload = {
            "id": str(user.id),
            "username": user.username,
            "role": Role(user.role).value,
            "iat": now,  # Issued at
            "exp": expire,  # Expiration time
            "iss": self.issuer,  # Issuer
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """Decode and validate a JWT token."""
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={"require": ["exp", "iat", "id", "username", "role"]},
            )
        except ExpiredSignatureError:
            raise InvalidCredentialError(details={"reason": "Token has expired"})
        except InvalidTokenError as e:
            raise InvalidCredentialError(details={"reason": str(e)})

    def decode_access_token(self, token: str) -> Identity:
        """Decode an access token into the caller identity."""
        payload = self.decode_token(token)

        try:
            return Identity(
                id=uuid.UUID(str(payload["id"])),
                username=str(payload["username"]),
                role=Role(payload["role"]),
            )
        except (TypeError, ValueError):
            raise InvalidCredentialError(details={"reason": "Malformed identity claims"})
