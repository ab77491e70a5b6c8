# tests/services/test_posts.py
import pytest
from sqlalchemy.orm import Session

from nonna_kitchen.core.security import Identity
from nonna_kitchen.models import Post, Thread
from nonna_kitchen.services import posts as post_service
from nonna_kitchen.services.errors import ValidationFailed
from nonna_kitchen.services.moderation import ModerationGate


def test_compute_depth_limits() -> None:
    assert post_service.compute_depth(None) == 0
    assert post_service.compute_depth(Post(depth=4)) == 5
    with pytest.raises(ValidationFailed, match=r"Maximum nesting depth \(5\) exceeded"):
        post_service.compute_depth(Post(depth=5))


@pytest.mark.asyncio
async def test_create_post_uses_placeholder_author(
    db_session: Session, thread: Thread, moderation_gate: ModerationGate
) -> None:
    post = await post_service.create_post(
        db_session,
        gate=moderation_gate,
        author=Identity(id="c3"),
        thread_id=thread.id,
        content="Brava!",
    )
    assert post.author_name == post_service.ANONYMOUS_AUTHOR
    assert post.depth == 0


@pytest.mark.asyncio
async def test_collect_descendants_walks_every_level(
    db_session: Session, thread: Thread, alice: Identity, moderation_gate: ModerationGate
) -> None:
    root = await post_service.create_post(
        db_session, gate=moderation_gate, author=alice, thread_id=thread.id, content="Root"
    )
    left = await post_service.create_post(
        db_session,
        gate=moderation_gate,
        author=alice,
        thread_id=thread.id,
        content="Left",
        parent_post_id=root.id,
    )
    right = await post_service.create_post(
        db_session,
        gate=moderation_gate,
        author=alice,
        thread_id=thread.id,
        content="Right",
        parent_post_id=root.id,
    )
    leaf = await post_service.create_post(
        db_session,
        gate=moderation_gate,
        author=alice,
        thread_id=thread.id,
        content="Leaf",
        parent_post_id=left.id,
    )

    collected = post_service.collect_descendant_ids(db_session, root.id)
    assert collected[0] == root.id
    assert set(collected) == {root.id, left.id, right.id, leaf.id}
    assert post_service.collect_descendant_ids(db_session, right.id) == [right.id]

    assert post_service.delete_post(db_session, actor=alice, post_id=root.id) == 4
