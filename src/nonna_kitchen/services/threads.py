"""Service-level helpers for regional discussion threads."""
from __future__ import annotations

from typing import Literal

from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.orm import Session

from nonna_kitchen.core.security import Identity
from nonna_kitchen.core.settings import settings
from nonna_kitchen.models import Like, Post, Thread
from nonna_kitchen.models.thread import THREAD_SCOPES
from nonna_kitchen.services.access import ensure_owner
from nonna_kitchen.services.errors import NotFound, ValidationFailed
from nonna_kitchen.services.moderation import ModerationGate

ThreadSort = Literal["newest", "top", "relevant"]

# Weight of one like against one view in the "relevant" ordering.
RELEVANCE_LIKE_WEIGHT = 5


async def create_thread(
    db: Session,
    *,
    gate: ModerationGate,
    author: Identity,
    region: str,
    scope: str,
    category: str,
    title: str,
    content: str,
) -> Thread:
    """Validate, screen and persist a new thread."""
    if not all((region, scope, category, title, content)):
        raise ValidationFailed("Missing required fields")
    if scope not in THREAD_SCOPES:
        raise ValidationFailed('Invalid scope. Must be "country" or "state"')
    if len(title) > settings.thread_title_max_length:
        raise ValidationFailed(
            f"Title must be {settings.thread_title_max_length} characters or less"
        )
    if len(content) > settings.post_content_max_length:
        raise ValidationFailed(
            f"Content must be {settings.post_content_max_length} characters or less"
        )

    if await gate.is_flagged(f"{title}\n{content}"):
        raise ValidationFailed("Content flagged as inappropriate.")

    thread = Thread(
        region=region,
        scope=scope,
        category=category,
        title=title,
        content=content,
        user_id=author.id,
        author_name=author.display_name or author.id,
        view_count=0,
    )
    db.add(thread)
    db.commit()
    db.refresh(thread)
    return thread


def list_threads(
    db: Session,
    *,
    region: str | None = None,
    scope: str | None = None,
    category: str | None = None,
    sort: ThreadSort = "newest",
) -> list[tuple[Thread, int]]:
    """Return ``(thread, like_count)`` pairs matching the filters."""
    like_count = func.count(Like.id)
    stmt = (
        select(Thread, like_count)
        .outerjoin(
            Like,
            and_(Like.likeable_id == Thread.id, Like.likeable_type == "thread"),
        )
        .group_by(Thread.id)
    )

    if region:
        stmt = stmt.where(Thread.region == region)
    if scope in THREAD_SCOPES:
        stmt = stmt.where(Thread.scope == scope)
    if category:
        stmt = stmt.where(Thread.category == category)

    if sort == "top":
        stmt = stmt.order_by(like_count.desc(), Thread.created_at.desc())
    elif sort == "relevant":
        score = like_count * RELEVANCE_LIKE_WEIGHT + Thread.view_count
        stmt = stmt.order_by(score.desc(), Thread.created_at.desc())
    else:
        stmt = stmt.order_by(Thread.created_at.desc(), Thread.id.desc())

    return [(thread, int(count)) for thread, count in db.execute(stmt).all()]


def view_thread(db: Session, thread_id: int) -> Thread:
    """Fetch a thread and count the view."""
    db.execute(
        update(Thread)
        .where(Thread.id == thread_id)
        .values(view_count=Thread.view_count + 1)
        .execution_options(synchronize_session=False)
    )
    db.commit()

    thread = db.get(Thread, thread_id, populate_existing=True)
    if thread is None:
        raise NotFound("Thread not found")
    return thread


def delete_thread(db: Session, *, actor: Identity, thread_id: int) -> None:
    """Delete a thread owned by ``actor``; its posts go with it."""
    thread = db.get(Thread, thread_id)
    if thread is None:
        raise NotFound("Thread not found")
    ensure_owner(thread.user_id, actor)

    post_ids = list(db.scalars(select(Post.id).where(Post.thread_id == thread_id)))
    if post_ids:
        db.execute(
            delete(Like).where(Like.likeable_type == "post", Like.likeable_id.in_(post_ids))
        )
        db.execute(delete(Post).where(Post.id.in_(post_ids)))
    db.execute(
        delete(Like).where(Like.likeable_type == "thread", Like.likeable_id == thread_id)
    )
    db.delete(thread)
    db.commit()
