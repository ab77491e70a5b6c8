# tests/api/test_recipe_comments.py
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from nonna_kitchen.core.security import Identity
from nonna_kitchen.models import Like, Recipe, RecipeComment
from tests.conftest import headers_for, recipe_payload


def _comment(
    client: TestClient,
    headers: dict[str, str],
    recipe_id: int,
    content: str = "Grazie for sharing!",
    parent_comment_id: int | None = None,
) -> Any:
    body: dict[str, Any] = {"recipe_id": recipe_id, "content": content}
    if parent_comment_id is not None:
        body["parent_comment_id"] = parent_comment_id
    return client.post("/api/v1/recipe-comments/", json=body, headers=headers)


def test_comment_and_reply_tree(
    client: TestClient,
    published_recipe: Recipe,
    alice_headers: dict[str, str],
    bob_headers: dict[str, str],
) -> None:
    root = _comment(client, bob_headers, published_recipe.id)
    assert root.status_code == 201
    assert root.json()["depth"] == 0
    assert root.json()["author_name"] == "Bob"

    reply = _comment(
        client, alice_headers, published_recipe.id, "Made with love", root.json()["id"]
    )
    assert reply.status_code == 201
    assert reply.json()["depth"] == 1

    later = _comment(client, alice_headers, published_recipe.id, "Tried it again")

    tree = client.get("/api/v1/recipe-comments/", params={"recipe_id": published_recipe.id})
    assert tree.status_code == 200
    data = tree.json()
    assert data["count"] == 3
    assert [c["id"] for c in data["comments"]] == [later.json()["id"], root.json()["id"]]
    assert [r["id"] for r in data["comments"][1]["replies"]] == [reply.json()["id"]]


def test_comment_author_name_falls_back_to_user_id(
    client: TestClient, published_recipe: Recipe, db_session: Session
) -> None:
    headers = headers_for(Identity(id="c3"))
    response = _comment(client, headers, published_recipe.id)
    assert response.status_code == 201
    assert response.json()["author_name"] == "c3"

    stored = db_session.get(RecipeComment, response.json()["id"])
    assert stored is not None
    assert stored.author_name == "c3"


def test_replies_are_not_depth_limited(
    client: TestClient, published_recipe: Recipe, alice_headers: dict[str, str]
) -> None:
    parent_id = None
    for _ in range(8):
        response = _comment(client, alice_headers, published_recipe.id, parent_comment_id=parent_id)
        assert response.status_code == 201
        parent_id = response.json()["id"]
    assert response.json()["depth"] == 7


def test_comment_validation(
    client: TestClient,
    db_session: Session,
    published_recipe: Recipe,
    alice_headers: dict[str, str],
) -> None:
    assert _comment(client, alice_headers, 9999).status_code == 404
    assert _comment(client, alice_headers, published_recipe.id, parent_comment_id=9999).status_code == 404
    assert _comment(client, alice_headers, published_recipe.id, "   ").status_code == 400
    assert _comment(client, alice_headers, published_recipe.id, "a" * 2001).status_code == 400
    assert _comment(client, alice_headers, published_recipe.id, "What a dick move").status_code == 400

    other = Recipe(user_id="a1", published=True, **recipe_payload(recipe_title="Cassata"))
    db_session.add(other)
    db_session.commit()
    foreign_parent = _comment(client, alice_headers, other.id).json()["id"]
    mismatched = _comment(
        client, alice_headers, published_recipe.id, parent_comment_id=foreign_parent
    )
    assert mismatched.status_code == 400


def test_update_and_delete_ownership(
    client: TestClient,
    db_session: Session,
    published_recipe: Recipe,
    alice_headers: dict[str, str],
    bob_headers: dict[str, str],
) -> None:
    root_id = _comment(client, alice_headers, published_recipe.id).json()["id"]
    reply_id = _comment(
        client, bob_headers, published_recipe.id, "Same here", root_id
    ).json()["id"]
    client.post(
        "/api/v1/likes/",
        json={"likeable_id": reply_id, "likeable_type": "comment"},
        headers=alice_headers,
    )

    assert client.patch(
        "/api/v1/recipe-comments/9999", json={"content": "x"}, headers=bob_headers
    ).status_code == 404
    assert client.patch(
        f"/api/v1/recipe-comments/{root_id}", json={"content": "x"}, headers=bob_headers
    ).status_code == 403

    edited = client.patch(
        f"/api/v1/recipe-comments/{root_id}",
        json={"content": "Grazie mille!"},
        headers=alice_headers,
    )
    assert edited.status_code == 200
    assert edited.json()["content"] == "Grazie mille!"

    assert client.delete(f"/api/v1/recipe-comments/{root_id}", headers=bob_headers).status_code == 403
    assert client.delete(f"/api/v1/recipe-comments/{root_id}", headers=alice_headers).status_code == 200

    assert db_session.scalar(select(func.count(RecipeComment.id))) == 0
    assert db_session.scalar(select(func.count(Like.id))) == 0
