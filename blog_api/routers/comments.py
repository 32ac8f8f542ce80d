"""Comment routes. Every endpoint requires a bearer token."""

from fastapi import APIRouter, Depends, Response, status

from blog_api.dependencies.auth import get_current_identity
from blog_api.dependencies.services import get_comment_service
from blog_api.policies import Identity
from blog_api.schemas.comment import CommentCreate, CommentResponse, CommentUpdate
from blog_api.schemas.common import Envelope
from blog_api.services.comment_service import CommentService

router = APIRouter()


@router.post("", response_model=Envelope[CommentResponse], status_code=status.HTTP_201_CREATED)
async def create_comment(
    comment_create: CommentCreate,
    identity: Identity = Depends(get_current_identity),
    comment_service: CommentService = Depends(get_comment_service),
):
    comment = await comment_service.create_comment(
        comment_create.model_dump(exclude_none=True), identity
    )
    return Envelope(
        message="Comment created successfully", data=CommentResponse.model_validate(comment)
    )


@router.get("/post/{post_id}", response_model=Envelope[list[CommentResponse]])
async def list_comments_by_post(
    post_id: str,
    identity: Identity = Depends(get_current_identity),
    comment_service: CommentService = Depends(get_comment_service),
):
    comments = await comment_service.list_comments_by_post(post_id, identity)
    return Envelope(
        message="Comments fetched successfully",
        data=[CommentResponse.model_validate(comment) for comment in comments],
    )


@router.get("/{comment_id}", response_model=Envelope[CommentResponse])
async def get_comment(
    comment_id: str,
    identity: Identity = Depends(get_current_identity),
    comment_service: CommentService = Depends(get_comment_service),
):
    comment = await comment_service.get_comment(comment_id, identity)
    return Envelope(
        message="Comment fetched successfully", data=CommentResponse.model_validate(comment)
    )


@router.put("/{comment_id}", response_model=Envelope[CommentResponse])
async def update_comment(
    comment_id: str,
    comment_update: CommentUpdate,
    identity: Identity = Depends(get_current_identity),
    comment_service: CommentService = Depends(get_comment_service),
):
    comment = await comment_service.update_comment(
        comment_id, comment_update.model_dump(exclude_none=True), identity
    )
    return Envelope(
        message="Comment updated successfully", data=CommentResponse.model_validate(comment)
    )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    identity: Identity = Depends(get_current_identity),
    comment_service: CommentService = Depends(get_comment_service),
):
    await comment_service.delete_comment(comment_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
