"""Service-level helpers for threaded replies.

Posts form a tree under a thread. A direct reply has depth 0, a reply to a
post sits one level below its parent, and nothing may be nested deeper than
``settings.max_post_depth``.
"""
from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from nonna_kitchen.core.security import Identity
from nonna_kitchen.core.settings import settings
from nonna_kitchen.db.time import utcnow
from nonna_kitchen.models import Like, Post, Thread
from nonna_kitchen.services.access import ensure_owner
from nonna_kitchen.services.errors import NotFound, ValidationFailed
from nonna_kitchen.services.moderation import ModerationGate

# Stored when the identity provider has no display name for the author.
ANONYMOUS_AUTHOR = "--"


def validate_post_content(content: str | None, *, required: bool = True) -> None:
    """Check presence and length of post text."""
    if required and not (content and content.strip()):
        raise ValidationFailed("Content is required")
    limit = settings.post_content_max_length
    if content and len(content) > limit:
        raise ValidationFailed(f"Content must be {limit} characters or less")


def compute_depth(parent: Post | None) -> int:
    """Return the depth of a reply to ``parent``.

    Raises:
        ValidationFailed: If the reply would nest deeper than allowed.
    """
    if parent is None:
        return 0
    depth = (parent.depth or 0) + 1
    if depth > settings.max_post_depth:
        raise ValidationFailed(
            f"Maximum nesting depth ({settings.max_post_depth}) exceeded"
        )
    return depth


def get_post_or_404(db: Session, post_id: int) -> Post:
    post = db.get(Post, post_id)
    if post is None:
        raise NotFound("Post not found")
    return post


def list_thread_posts(db: Session, thread_id: int) -> list[Post]:
    """Return every post of a thread, oldest first."""
    stmt = (
        select(Post)
        .where(Post.thread_id == thread_id)
        .order_by(Post.created_at.asc(), Post.id.asc())
    )
    return list(db.scalars(stmt))


async def create_post(
    db: Session,
    *,
    gate: ModerationGate,
    author: Identity,
    thread_id: int,
    content: str | None,
    parent_post_id: int | None = None,
    attachments: list[str] | None = None,
) -> Post:
    """Create a reply after depth and moderation checks.

    Checks run in order: presence/length, thread and parent existence, depth,
    moderation. Nothing is written unless all of them pass.
    """
    has_content = bool(content and content.strip())
    has_attachments = bool(attachments)
    if not has_content and not has_attachments:
        raise ValidationFailed("Missing required fields (content or attachments)")
    validate_post_content(content, required=False)

    if db.get(Thread, thread_id) is None:
        raise NotFound("Thread not found")

    parent: Post | None = None
    if parent_post_id is not None:
        parent = db.get(Post, parent_post_id)
        if parent is None:
            raise NotFound("Parent post not found")
        if parent.thread_id != thread_id:
            raise ValidationFailed("Parent post belongs to a different thread")

    depth = compute_depth(parent)

    if has_content and await gate.is_flagged(content or ""):
        raise ValidationFailed("Content flagged as inappropriate.")

    now = utcnow()
    post = Post(
        thread_id=thread_id,
        parent_post_id=parent_post_id,
        user_id=author.id,
        author_name=author.display_name or ANONYMOUS_AUTHOR,
        content=content or "",
        attachments=attachments or None,
        depth=depth,
        created_at=now,
        updated_at=now,
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


async def update_post(
    db: Session,
    *,
    gate: ModerationGate,
    actor: Identity,
    post_id: int,
    content: str,
) -> Post:
    """Replace the text of a post owned by ``actor``."""
    validate_post_content(content)
    post = get_post_or_404(db, post_id)
    ensure_owner(post.user_id, actor)

    if await gate.is_flagged(content):
        raise ValidationFailed("Content flagged as inappropriate.")

    post.content = content
    post.updated_at = utcnow()
    db.commit()
    db.refresh(post)
    return post


def collect_descendant_ids(db: Session, root_id: int) -> list[int]:
    """Return ``root_id`` followed by the ids of all posts below it."""
    collected = [root_id]
    frontier = [root_id]
    while frontier:
        children = list(
            db.scalars(select(Post.id).where(Post.parent_post_id.in_(frontier)))
        )
        collected.extend(children)
        frontier = children
    return collected


def delete_post(db: Session, *, actor: Identity, post_id: int) -> int:
    """Delete a post owned by ``actor`` together with all of its descendants.

    Returns:
        Number of posts removed.
    """
    post = get_post_or_404(db, post_id)
    ensure_owner(post.user_id, actor)

    doomed = collect_descendant_ids(db, post.id)
    db.execute(
        delete(Like).where(Like.likeable_type == "post", Like.likeable_id.in_(doomed))
    )
    db.execute(delete(Post).where(Post.id.in_(doomed)))
    db.commit()
    return len(doomed)
