# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator, Mapping
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-nonna-kitchen")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.pop("OPENAI_API_KEY", None)

from nonna_kitchen.api.v1 import dependencies  # noqa: E402
from nonna_kitchen.core.security import Identity, create_access_token  # noqa: E402
from nonna_kitchen.core.settings import settings  # noqa: E402
from nonna_kitchen.db.session import Base  # noqa: E402
from nonna_kitchen.db.session import get_db as app_get_session  # noqa: E402
from nonna_kitchen.main import app as fastapi_app  # noqa: E402
from nonna_kitchen.models import Recipe, Thread  # noqa: E402
from nonna_kitchen.services.moderation import ModerationGate  # noqa: E402
from nonna_kitchen.services.translation import TranslationError  # noqa: E402

TEST_DB_URL = "sqlite://"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    # Service commits release a savepoint; nested savepoints in services still work.
    SessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )
    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Start every test from empty tables.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


class FakeRelay:
    """Records realtime publishes instead of sending them."""

    def __init__(self) -> None:
        self.published: list[tuple[str, str, dict[str, Any]]] = []

    async def publish_quietly(self, room: str, event: str, data: Mapping[str, Any]) -> bool:
        self.published.append((room, event, dict(data)))
        return True

    async def close(self) -> None:
        return None


class FakeTranslator:
    """Prefixes text with the target language; can be told to fail."""

    def __init__(self) -> None:
        self.fail = False
        self.calls: list[tuple[str, str]] = []

    async def translate(self, text: str, target_lang: str) -> str:
        self.calls.append((text, target_lang))
        if self.fail:
            raise TranslationError("Translation failed")
        return f"[{target_lang}] {text}"

    async def close(self) -> None:
        return None


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture()
def moderation_gate() -> ModerationGate:
    """Keyword-only gate; the classifier is never contacted in tests."""
    return ModerationGate(client=None)


@pytest.fixture()
def relay() -> FakeRelay:
    return FakeRelay()


@pytest.fixture()
def translator() -> FakeTranslator:
    return FakeTranslator()


@pytest.fixture(autouse=True)
def override_dependencies(
    app: FastAPI,
    db_session: Session,
    moderation_gate: ModerationGate,
    relay: FakeRelay,
    translator: FakeTranslator,
) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    overrides: dict[Callable[..., Any], Callable[..., Any]] = {
        app_get_session: _get_session_override,
        dependencies.get_moderation_gate_dep: lambda: moderation_gate,
        dependencies.get_relay_client_dep: lambda: relay,
        dependencies.get_translation_client_dep: lambda: translator,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield
    finally:
        for key in overrides:
            app.dependency_overrides.pop(key, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def alice() -> Identity:
    return Identity(id="a1", display_name="Alice", email="alice@example.com")


@pytest.fixture()
def bob() -> Identity:
    return Identity(id="b2", display_name="Bob")


@pytest.fixture()
def admin() -> Identity:
    return Identity(id="admin-1", display_name="Nonna", roles=frozenset({settings.admin_role}))


def headers_for(identity: Identity) -> dict[str, str]:
    token = create_access_token(
        identity.id,
        display_name=identity.display_name,
        email=identity.email,
        roles=identity.roles,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def alice_headers(alice: Identity) -> dict[str, str]:
    return headers_for(alice)


@pytest.fixture()
def bob_headers(bob: Identity) -> dict[str, str]:
    return headers_for(bob)


@pytest.fixture()
def admin_headers(admin: Identity) -> dict[str, str]:
    return headers_for(admin)


@pytest.fixture()
def thread(db_session: Session, alice: Identity) -> Thread:
    """A thread opened by Alice."""
    row = Thread(
        region="Sicily",
        scope="state",
        category="Sunday lunch",
        title="Caponata variations",
        content="Which version did your family make?",
        user_id=alice.id,
        author_name=alice.display_name,
        view_count=0,
    )
    db_session.add(row)
    db_session.commit()
    db_session.refresh(row)
    return row


def recipe_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "grandmother_title": "Nonna",
        "first_name": "Maria",
        "last_name": "Russo",
        "recipe_title": "Pasta alla Norma",
        "country": "Italy",
        "region": "Sicily",
        "history": "Made every Sunday in Catania.",
        "recipe": "Eggplant, tomatoes, ricotta salata, basil.",
        "directions": "Fry the eggplant, simmer the sauce, toss with pasta.",
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def published_recipe(db_session: Session, alice: Identity) -> Recipe:
    """A published recipe submitted by Alice."""
    row = Recipe(user_id=alice.id, published=True, **recipe_payload())
    db_session.add(row)
    db_session.commit()
    db_session.refresh(row)
    return row
