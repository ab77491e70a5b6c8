"""Like toggling for threads, posts and comments."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from nonna_kitchen.core.security import Identity
from nonna_kitchen.models import Like
from nonna_kitchen.models.like import LIKEABLE_TYPES
from nonna_kitchen.services.errors import ValidationFailed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToggleResult:
    """State of the like after a toggle."""

    liked: bool
    like: Like | None = None


def _validate_target(likeable_id: int | None, likeable_type: str | None) -> None:
    if not likeable_id or not likeable_type:
        raise ValidationFailed("Missing required fields")
    if likeable_type not in LIKEABLE_TYPES:
        raise ValidationFailed(
            'Invalid likeable_type. Must be "thread", "post", or "comment"'
        )


def _find_like(db: Session, user_id: str, likeable_id: int, likeable_type: str) -> Like | None:
    return db.scalars(
        select(Like).where(
            Like.user_id == user_id,
            Like.likeable_id == likeable_id,
            Like.likeable_type == likeable_type,
        )
    ).first()


def toggle_like(
    db: Session,
    *,
    user: Identity,
    likeable_id: int,
    likeable_type: str,
) -> ToggleResult:
    """Remove the caller's like if present, otherwise add it.

    The delete runs first so an existing like is removed in one statement.
    The insert runs in a savepoint; if a concurrent request inserted the same
    triple first, the unique constraint rejects ours and the stored row is
    reported instead, so both callers observe ``liked=True``.
    """
    _validate_target(likeable_id, likeable_type)

    removed = db.execute(
        delete(Like).where(
            Like.user_id == user.id,
            Like.likeable_id == likeable_id,
            Like.likeable_type == likeable_type,
        )
    ).rowcount
    if removed:
        db.commit()
        return ToggleResult(liked=False)

    like = Like(user_id=user.id, likeable_id=likeable_id, likeable_type=likeable_type)
    try:
        with db.begin_nested():
            db.add(like)
    except IntegrityError:
        logger.info(
            "Concurrent like on %s %s by %s; keeping stored row",
            likeable_type,
            likeable_id,
            user.id,
        )
        existing = _find_like(db, user.id, likeable_id, likeable_type)
        db.commit()
        return ToggleResult(liked=True, like=existing)

    db.commit()
    db.refresh(like)
    return ToggleResult(liked=True, like=like)


def like_summary(
    db: Session,
    *,
    likeable_id: int,
    likeable_type: str,
    user: Identity | None = None,
) -> tuple[int, bool]:
    """Return the like count of an entity and whether ``user`` liked it."""
    _validate_target(likeable_id, likeable_type)
    count = db.scalar(
        select(func.count(Like.id)).where(
            Like.likeable_id == likeable_id,
            Like.likeable_type == likeable_type,
        )
    ) or 0
    liked = False
    if user is not None:
        liked = _find_like(db, user.id, likeable_id, likeable_type) is not None
    return int(count), liked
