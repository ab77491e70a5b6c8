"""Recipe comment endpoints."""

from fastapi import APIRouter, Query, status

from nonna_kitchen.models import RecipeComment
from nonna_kitchen.schemas.common import StatusMessage
from nonna_kitchen.schemas.recipe_comment import (
    RecipeCommentCreate,
    RecipeCommentResponse,
    RecipeCommentTree,
    RecipeCommentUpdate,
)
from nonna_kitchen.services import recipe_comments as comment_service

from ..dependencies import CurrentIdentityDep, ModerationGateDep, SessionDep

router = APIRouter(prefix="/recipe-comments", tags=["recipe-comments"])


@router.get("/", response_model=RecipeCommentTree)
async def list_comments(
    db: SessionDep,
    recipe_id: int = Query(..., description="Recipe whose comments to list"),
) -> RecipeCommentTree:
    """Return the recipe's comments nested under their parents."""
    roots, count = comment_service.list_comment_tree(db, recipe_id)
    return RecipeCommentTree(comments=roots, count=count)


@router.post("/", response_model=RecipeCommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment(
    payload: RecipeCommentCreate,
    db: SessionDep,
    current_user: CurrentIdentityDep,
    gate: ModerationGateDep,
) -> RecipeComment:
    return await comment_service.create_comment(
        db,
        gate=gate,
        author=current_user,
        recipe_id=payload.recipe_id,
        content=payload.content,
        parent_comment_id=payload.parent_comment_id,
    )


@router.patch("/{comment_id}", response_model=RecipeCommentResponse)
async def update_comment(
    comment_id: int,
    payload: RecipeCommentUpdate,
    db: SessionDep,
    current_user: CurrentIdentityDep,
    gate: ModerationGateDep,
) -> RecipeComment:
    return await comment_service.update_comment(
        db,
        gate=gate,
        actor=current_user,
        comment_id=comment_id,
        content=payload.content,
    )


@router.delete("/{comment_id}", response_model=StatusMessage)
async def delete_comment(
    comment_id: int,
    db: SessionDep,
    current_user: CurrentIdentityDep,
) -> StatusMessage:
    """Delete an own comment and its replies."""
    comment_service.delete_comment(db, actor=current_user, comment_id=comment_id)
    return StatusMessage(message="Comment deleted")
