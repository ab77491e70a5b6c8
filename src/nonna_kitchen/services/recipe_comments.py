"""Comments and reply threads on recipes."""
from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from nonna_kitchen.core.security import Identity
from nonna_kitchen.core.settings import settings
from nonna_kitchen.db.time import utcnow
from nonna_kitchen.models import Like, Recipe, RecipeComment
from nonna_kitchen.schemas.recipe_comment import RecipeCommentNode
from nonna_kitchen.services.access import ensure_owner
from nonna_kitchen.services.errors import NotFound, ValidationFailed
from nonna_kitchen.services.moderation import ModerationGate


def validate_comment_content(content: str | None) -> str:
    """Return the stripped comment text or raise ``ValidationFailed``."""
    text = (content or "").strip()
    if not text:
        raise ValidationFailed("Content is required")
    limit = settings.comment_content_max_length
    if len(text) > limit:
        raise ValidationFailed(f"Comment must be {limit} characters or less")
    return text


def get_comment_or_404(db: Session, comment_id: int) -> RecipeComment:
    comment = db.get(RecipeComment, comment_id)
    if comment is None:
        raise NotFound("Comment not found")
    return comment


async def create_comment(
    db: Session,
    *,
    gate: ModerationGate,
    author: Identity,
    recipe_id: int,
    content: str | None,
    parent_comment_id: int | None = None,
) -> RecipeComment:
    """Comment on a recipe, or reply to one of its comments."""
    text = validate_comment_content(content)

    if db.get(Recipe, recipe_id) is None:
        raise NotFound("Recipe not found")

    depth = 0
    if parent_comment_id is not None:
        parent = db.get(RecipeComment, parent_comment_id)
        if parent is None:
            raise NotFound("Parent comment not found")
        if parent.recipe_id != recipe_id:
            raise ValidationFailed("Parent comment belongs to a different recipe")
        depth = (parent.depth or 0) + 1

    if await gate.is_flagged(text):
        raise ValidationFailed("Content flagged as inappropriate.")

    now = utcnow()
    comment = RecipeComment(
        recipe_id=recipe_id,
        parent_comment_id=parent_comment_id,
        user_id=author.id,
        author_name=author.display_name or author.id,
        content=text,
        depth=depth,
        created_at=now,
        updated_at=now,
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment


def build_comment_tree(comments: list[RecipeComment]) -> list[RecipeCommentNode]:
    """Nest flat comments under their parents, keeping the input order."""
    nodes = {comment.id: RecipeCommentNode.model_validate(comment) for comment in comments}
    roots: list[RecipeCommentNode] = []
    for comment in comments:
        node = nodes[comment.id]
        parent = nodes.get(comment.parent_comment_id) if comment.parent_comment_id else None
        if parent is None:
            roots.append(node)
        else:
            parent.replies.append(node)
    return roots


def list_comment_tree(db: Session, recipe_id: int) -> tuple[list[RecipeCommentNode], int]:
    """Return the recipe's comment tree (newest first) and its total size."""
    stmt = (
        select(RecipeComment)
        .where(RecipeComment.recipe_id == recipe_id)
        .order_by(RecipeComment.created_at.desc(), RecipeComment.id.desc())
    )
    comments = list(db.scalars(stmt))
    return build_comment_tree(comments), len(comments)


async def update_comment(
    db: Session,
    *,
    gate: ModerationGate,
    actor: Identity,
    comment_id: int,
    content: str | None,
) -> RecipeComment:
    comment = get_comment_or_404(db, comment_id)
    ensure_owner(comment.user_id, actor)
    text = validate_comment_content(content)

    if await gate.is_flagged(text):
        raise ValidationFailed("Content flagged as inappropriate.")

    comment.content = text
    comment.updated_at = utcnow()
    db.commit()
    db.refresh(comment)
    return comment


def _collect_reply_ids(db: Session, root_id: int) -> list[int]:
    collected = [root_id]
    frontier = [root_id]
    while frontier:
        children = list(
            db.scalars(
                select(RecipeComment.id).where(RecipeComment.parent_comment_id.in_(frontier))
            )
        )
        collected.extend(children)
        frontier = children
    return collected


def delete_comment(db: Session, *, actor: Identity, comment_id: int) -> int:
    """Delete an own comment and every reply below it; returns the count."""
    comment = get_comment_or_404(db, comment_id)
    ensure_owner(comment.user_id, actor)

    doomed = _collect_reply_ids(db, comment.id)
    db.execute(
        delete(Like).where(Like.likeable_type == "comment", Like.likeable_id.in_(doomed))
    )
    db.execute(delete(RecipeComment).where(RecipeComment.id.in_(doomed)))
    db.commit()
    return len(doomed)
