# tests/api/test_likes.py
from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from nonna_kitchen.models import Like, Thread


def _like_count(db: Session) -> int:
    return db.scalar(select(func.count(Like.id))) or 0


def test_toggle_requires_authentication(client: TestClient, thread: Thread) -> None:
    response = client.post(
        "/api/v1/likes/",
        json={"likeable_id": thread.id, "likeable_type": "thread"},
    )
    assert response.status_code == 401


def test_toggle_twice_restores_original_state(
    client: TestClient,
    db_session: Session,
    thread: Thread,
    alice_headers: dict[str, str],
) -> None:
    body = {"likeable_id": thread.id, "likeable_type": "thread"}

    first = client.post("/api/v1/likes/", json=body, headers=alice_headers)
    assert first.status_code == 201
    assert first.json()["liked"] is True
    assert first.json()["like"]["user_id"] == "a1"
    assert _like_count(db_session) == 1

    second = client.post("/api/v1/likes/", json=body, headers=alice_headers)
    assert second.status_code == 200
    assert second.json()["liked"] is False
    assert _like_count(db_session) == 0


def test_likes_are_per_user(
    client: TestClient,
    thread: Thread,
    alice_headers: dict[str, str],
    bob_headers: dict[str, str],
) -> None:
    body = {"likeable_id": thread.id, "likeable_type": "thread"}
    assert client.post("/api/v1/likes/", json=body, headers=alice_headers).status_code == 201
    assert client.post("/api/v1/likes/", json=body, headers=bob_headers).status_code == 201

    summary = client.get(
        "/api/v1/likes/summary",
        params={"likeable_id": thread.id, "likeable_type": "thread"},
        headers=bob_headers,
    )
    assert summary.status_code == 200
    assert summary.json() == {
        "likeable_id": thread.id,
        "likeable_type": "thread",
        "count": 2,
        "liked": True,
    }


def test_summary_for_anonymous_caller(client: TestClient, thread: Thread) -> None:
    response = client.get(
        "/api/v1/likes/summary",
        params={"likeable_id": thread.id, "likeable_type": "thread"},
    )
    assert response.status_code == 200
    assert response.json()["count"] == 0
    assert response.json()["liked"] is False


def test_invalid_likeable_type_rejected(
    client: TestClient, alice_headers: dict[str, str]
) -> None:
    response = client.post(
        "/api/v1/likes/",
        json={"likeable_id": 1, "likeable_type": "recipe"},
        headers=alice_headers,
    )
    assert response.status_code == 400


def test_missing_fields_rejected(client: TestClient, alice_headers: dict[str, str]) -> None:
    response = client.post("/api/v1/likes/", json={"likeable_type": "post"}, headers=alice_headers)
    assert response.status_code == 400
