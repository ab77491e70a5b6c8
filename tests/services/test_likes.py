# tests/services/test_likes.py
import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from nonna_kitchen.core.security import Identity
from nonna_kitchen.models import Like
from nonna_kitchen.services import likes as like_service
from nonna_kitchen.services.errors import ValidationFailed


def test_toggle_inserts_then_removes(db_session: Session, alice: Identity) -> None:
    added = like_service.toggle_like(db_session, user=alice, likeable_id=7, likeable_type="post")
    assert added.liked is True
    assert added.like is not None and added.like.likeable_id == 7

    removed = like_service.toggle_like(db_session, user=alice, likeable_id=7, likeable_type="post")
    assert removed.liked is False
    assert removed.like is None


def test_lost_insert_race_reports_liked(
    db_session: Session, alice: Identity, monkeypatch: pytest.MonkeyPatch
) -> None:
    # Another request stores the same triple between our delete and our insert.
    db_session.add(Like(user_id=alice.id, likeable_id=3, likeable_type="comment"))
    db_session.commit()

    original_execute = db_session.execute
    calls = {"n": 0}

    class _NoRows:
        rowcount = 0

    def execute_skipping_first_delete(statement, *args, **kwargs):  # type: ignore[no-untyped-def]
        calls["n"] += 1
        if calls["n"] == 1:
            return _NoRows()
        return original_execute(statement, *args, **kwargs)

    monkeypatch.setattr(db_session, "execute", execute_skipping_first_delete)
    result = like_service.toggle_like(
        db_session, user=alice, likeable_id=3, likeable_type="comment"
    )
    monkeypatch.undo()

    assert result.liked is True
    assert result.like is not None
    count = db_session.scalar(
        select(func.count(Like.id)).where(Like.user_id == alice.id, Like.likeable_id == 3)
    )
    assert count == 1


def test_unknown_type_is_rejected(db_session: Session, alice: Identity) -> None:
    with pytest.raises(ValidationFailed):
        like_service.toggle_like(db_session, user=alice, likeable_id=1, likeable_type="recipe")
