"""Post routes."""

from fastapi import APIRouter, Depends, Response, status

from blog_api.dependencies.auth import get_current_identity
from blog_api.dependencies.services import get_post_service
from blog_api.policies import Identity
from blog_api.schemas.common import Envelope
from blog_api.schemas.post import PostCreate, PostResponse, PostUpdate
from blog_api.services.post_service import PostService

router = APIRouter()


@router.post("", response_model=Envelope[PostResponse], status_code=status.HTTP_201_CREATED)
async def create_post(
    post_create: PostCreate,
    identity: Identity = Depends(get_current_identity),
    post_service: PostService = Depends(get_post_service),
):
    """Create a post."""
    post = await post_service.create_post(post_create.model_dump(exclude_none=True), identity)
    return Envelope(message="Post created successfully", data=PostResponse.model_validate(post))


@router.get("", response_model=Envelope[list[PostResponse]])
async def list_posts(post_service: PostService = Depends(get_post_service)):
    """List posts."""
    posts = await post_service.list_posts()
    return Envelope(
        message="Posts fetched successfully",
        data=[PostResponse.model_validate(post) for post in posts],
    )


@router.get("/category/{category_id}", response_model=Envelope[list[PostResponse]])
async def list_posts_by_category(
    category_id: str,
    post_service: PostService = Depends(get_post_service),
):
    """List the posts in a category."""
    posts = await post_service.list_posts_by_category(category_id)
    return Envelope(
        message="Posts fetched successfully",
        data=[PostResponse.model_validate(post) for post in posts],
    )


@router.get("/{post_id}", response_model=Envelope[PostResponse])
async def get_post(post_id: str, post_service: PostService = Depends(get_post_service)):
    """Get a post by id."""
    post = await post_service.get_post(post_id)
    return Envelope(message="Post fetched successfully", data=PostResponse.model_validate(post))


@router.put("/{post_id}", response_model=Envelope[PostResponse])
async def update_post(
    post_id: str,
    post_update: PostUpdate,
    identity: Identity = Depends(get_current_identity),
    post_service: PostService = Depends(get_post_service),
):
    """Update a post."""
    post = await post_service.update_post(
        post_id, post_update.model_dump(exclude_none=True), identity
    )
    return Envelope(message="Post updated successfully", data=PostResponse.model_validate(post))


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    identity: Identity = Depends(get_current_identity),
    post_service: PostService = Depends(get_post_service),
):
    """Delete a post."""
    await post_service.delete_post(post_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
