# tests/api/test_threads.py
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.orm import Session

from nonna_kitchen.models import Post, Thread


def _thread_body(**overrides: Any) -> dict[str, Any]:
    body: dict[str, Any] = {
        "region": "Campania",
        "scope": "state",
        "category": "Pasta",
        "title": "Ragù napoletano",
        "content": "How many hours do you simmer it?",
    }
    body.update(overrides)
    return body


def test_create_thread(client: TestClient, alice_headers: dict[str, str]) -> None:
    response = client.post("/api/v1/threads/", json=_thread_body(), headers=alice_headers)
    assert response.status_code == 201
    data = response.json()
    assert data["user_id"] == "a1"
    assert data["author_name"] == "Alice"
    assert data["view_count"] == 0


def test_create_thread_validation(client: TestClient, alice_headers: dict[str, str]) -> None:
    bad_scope = client.post(
        "/api/v1/threads/", json=_thread_body(scope="city"), headers=alice_headers
    )
    assert bad_scope.status_code == 400

    long_title = client.post(
        "/api/v1/threads/", json=_thread_body(title="x" * 121), headers=alice_headers
    )
    assert long_title.status_code == 400

    flagged_title = client.post(
        "/api/v1/threads/", json=_thread_body(title="I hate raisins"), headers=alice_headers
    )
    assert flagged_title.status_code == 400


def test_create_thread_requires_authentication(client: TestClient) -> None:
    assert client.post("/api/v1/threads/", json=_thread_body()).status_code == 401


def test_get_thread_counts_views(client: TestClient, thread: Thread) -> None:
    first = client.get(f"/api/v1/threads/{thread.id}")
    second = client.get(f"/api/v1/threads/{thread.id}")
    assert first.status_code == 200
    assert first.json()["view_count"] == 1
    assert second.json()["view_count"] == 2
    assert client.get("/api/v1/threads/9999").status_code == 404


def test_list_filters_and_sorting(
    client: TestClient,
    alice_headers: dict[str, str],
    bob_headers: dict[str, str],
) -> None:
    quiet = client.post(
        "/api/v1/threads/", json=_thread_body(title="Quiet"), headers=alice_headers
    ).json()
    popular = client.post(
        "/api/v1/threads/", json=_thread_body(title="Popular"), headers=alice_headers
    ).json()
    client.post(
        "/api/v1/threads/",
        json=_thread_body(region="Tuscany", title="Elsewhere"),
        headers=alice_headers,
    )
    for headers in (alice_headers, bob_headers):
        client.post(
            "/api/v1/likes/",
            json={"likeable_id": popular["id"], "likeable_type": "thread"},
            headers=headers,
        )

    newest = client.get("/api/v1/threads/", params={"region": "Campania"}).json()
    assert [t["title"] for t in newest] == ["Popular", "Quiet"]

    top = client.get("/api/v1/threads/", params={"region": "Campania", "sort": "top"}).json()
    assert top[0]["id"] == popular["id"]
    assert top[0]["like_count"] == 2
    assert top[1]["like_count"] == 0

    for _ in range(11):
        client.get(f"/api/v1/threads/{quiet['id']}")
    relevant = client.get(
        "/api/v1/threads/", params={"region": "Campania", "sort": "relevant"}
    ).json()
    assert relevant[0]["id"] == quiet["id"]


def test_delete_thread_cascades_posts(
    client: TestClient,
    db_session: Session,
    thread: Thread,
    alice_headers: dict[str, str],
    bob_headers: dict[str, str],
) -> None:
    client.post(
        "/api/v1/posts/", json={"thread_id": thread.id, "content": "Eggplant!"}, headers=bob_headers
    )

    assert client.delete(f"/api/v1/threads/{thread.id}", headers=bob_headers).status_code == 403
    assert client.delete("/api/v1/threads/9999", headers=bob_headers).status_code == 404

    response = client.delete(f"/api/v1/threads/{thread.id}", headers=alice_headers)
    assert response.status_code == 200
    assert db_session.get(Thread, thread.id) is None
    assert list(db_session.scalars(select(Post.id))) == []
