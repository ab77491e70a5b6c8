"""Threaded reply endpoints."""

from fastapi import APIRouter, status

from nonna_kitchen.models import Post
from nonna_kitchen.schemas.common import StatusMessage
from nonna_kitchen.schemas.post import PostCreate, PostResponse, PostUpdate
from nonna_kitchen.services import posts as post_service

from ..dependencies import CurrentIdentityDep, ModerationGateDep, SessionDep

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: PostCreate,
    db: SessionDep,
    current_user: CurrentIdentityDep,
    gate: ModerationGateDep,
) -> Post:
    """Reply to a thread, or to a post within it.

    Raises:
        NotFound: If the thread or parent post does not exist
        ValidationFailed: If the reply is empty, too long, too deep or flagged
    """
    return await post_service.create_post(
        db,
        gate=gate,
        author=current_user,
        thread_id=payload.thread_id,
        content=payload.content,
        parent_post_id=payload.parent_post_id,
        attachments=payload.attachments,
    )


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: int, db: SessionDep) -> Post:
    return post_service.get_post_or_404(db, post_id)


@router.patch("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: int,
    payload: PostUpdate,
    db: SessionDep,
    current_user: CurrentIdentityDep,
    gate: ModerationGateDep,
) -> Post:
    """Edit the text of an own post."""
    return await post_service.update_post(
        db,
        gate=gate,
        actor=current_user,
        post_id=post_id,
        content=payload.content,
    )


@router.delete("/{post_id}", response_model=StatusMessage)
async def delete_post(
    post_id: int,
    db: SessionDep,
    current_user: CurrentIdentityDep,
) -> StatusMessage:
    """Delete an own post and every reply beneath it."""
    removed = post_service.delete_post(db, actor=current_user, post_id=post_id)
    return StatusMessage(message=f"Post deleted ({removed} removed)")
