"""Authentication dependencies for FastAPI."""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from blog_api.policies import Identity
from blog_api.services.jwt_service import JWTService
from blog_api.utils.exceptions import UnauthorizedError

# Security scheme for Bearer tokens
security = HTTPBearer(auto_error=False)


def get_jwt_service() -> JWTService:
    """Get JWTService instance."""
    return JWTService()


async def get_optional_identity(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> Identity | None:
    """Resolve the caller from a bearer token, if one was sent.

    A token that fails verification is rejected rather than ignored.
    """
    if not credentials:
        return None

    identity = jwt_service.decode_access_token(credentials.credentials)
    request.state.user_id = str(identity.id)
    return identity


async def get_current_identity(
    identity: Identity | None = Depends(get_optional_identity),
) -> Identity:
    """Require an authenticated caller."""
    if identity is None:
        raise UnauthorizedError("Access token is required")
    return identity
