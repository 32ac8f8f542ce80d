"""User management routes."""

from fastapi import APIRouter, Depends, Response, status

from blog_api.dependencies.auth import get_current_identity
from blog_api.dependencies.services import get_user_service
from blog_api.policies import Identity
from blog_api.schemas.auth import LoginRequest, TokenResponse
from blog_api.schemas.common import Envelope
from blog_api.schemas.user import UserCreate, UserResponse, UserUpdate
from blog_api.services.user_service import UserService

router = APIRouter()


@router.post("", response_model=Envelope[UserResponse], status_code=status.HTTP_201_CREATED)
async def create_user(
    user_create: UserCreate,
    user_service: UserService = Depends(get_user_service),
):
    """Register a new user."""
    user = await user_service.create_user(user_create.model_dump(exclude_none=True))
    return Envelope(message="User created successfully", data=UserResponse.model_validate(user))


@router.post("/login", response_model=Envelope[TokenResponse])
async def login(
    login_request: LoginRequest,
    user_service: UserService = Depends(get_user_service),
):
    """Exchange a username and password for an access token."""
    token, user = await user_service.login(login_request.model_dump(exclude_none=True))
    return Envelope(
        message="Login successful",
        data=TokenResponse(
            access_token=token,
            expires_in=user_service.jwt_service.expires_in,
            user=UserResponse.model_validate(user),
        ),
    )


@router.get("", response_model=Envelope[list[UserResponse]])
async def list_users(
    identity: Identity = Depends(get_current_identity),
    user_service: UserService = Depends(get_user_service),
):
    """List users."""
    users = await user_service.list_users(identity)
    return Envelope(
        message="Users fetched successfully",
        data=[UserResponse.model_validate(user) for user in users],
    )


@router.get("/{user_id}", response_model=Envelope[UserResponse])
async def get_user(
    user_id: str,
    identity: Identity = Depends(get_current_identity),
    user_service: UserService = Depends(get_user_service),
):
    """Get a user by id."""
    user = await user_service.get_user(user_id, identity)
    return Envelope(message="User fetched successfully", data=UserResponse.model_validate(user))


@router.put("/{user_id}", response_model=Envelope[UserResponse])
async def update_user(
    user_id: str,
    user_update: UserUpdate,
    identity: Identity = Depends(get_current_identity),
    user_service: UserService = Depends(get_user_service),
):
    """Update a user."""
    user = await user_service.update_user(
        user_id, user_update.model_dump(exclude_none=True), identity
    )
    return Envelope(message="User updated successfully", data=UserResponse.model_validate(user))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    identity: Identity = Depends(get_current_identity),
    user_service: UserService = Depends(get_user_service),
):
    """Delete a user."""
    await user_service.delete_user(user_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
