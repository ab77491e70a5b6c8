"""Like endpoints for threads, posts and comments."""

from fastapi import APIRouter, Query, Response, status

from nonna_kitchen.schemas.like import (
    LikeableType,
    LikeResponse,
    LikeSummary,
    LikeToggle,
    LikeToggleResponse,
)
from nonna_kitchen.services import likes as like_service

from ..dependencies import CurrentIdentityDep, OptionalIdentityDep, SessionDep

router = APIRouter(prefix="/likes", tags=["likes"])


@router.post("/", response_model=LikeToggleResponse, status_code=status.HTTP_201_CREATED)
async def toggle_like(
    payload: LikeToggle,
    response: Response,
    db: SessionDep,
    current_user: CurrentIdentityDep,
) -> LikeToggleResponse:
    """Like the target, or remove the caller's like if it already exists.

    Returns 201 when a like was added and 200 when it was removed.
    """
    result = like_service.toggle_like(
        db,
        user=current_user,
        likeable_id=payload.likeable_id,
        likeable_type=payload.likeable_type,
    )
    if not result.liked:
        response.status_code = status.HTTP_200_OK
        return LikeToggleResponse(liked=False, message="Unliked")

    like = LikeResponse.model_validate(result.like) if result.like is not None else None
    return LikeToggleResponse(liked=True, message="Liked", like=like)


@router.get("/summary", response_model=LikeSummary)
async def like_summary(
    db: SessionDep,
    current_user: OptionalIdentityDep,
    likeable_id: int = Query(..., description="Identifier of the liked entity"),
    likeable_type: LikeableType = Query(..., description='"thread", "post" or "comment"'),
) -> LikeSummary:
    """Return the like count of an entity and whether the caller liked it."""
    count, liked = like_service.like_summary(
        db,
        likeable_id=likeable_id,
        likeable_type=likeable_type,
        user=current_user,
    )
    return LikeSummary(
        likeable_id=likeable_id,
        likeable_type=likeable_type,
        count=count,
        liked=liked,
    )
