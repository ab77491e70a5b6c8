# tests/api/test_payments.py
import json
from collections.abc import Iterator
from typing import Any
from urllib.parse import parse_qs

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from nonna_kitchen.api.v1.dependencies import get_payment_client_dep
from nonna_kitchen.models import Payment
from nonna_kitchen.services.payments import PaymentClient


class FakeProvider:
    """In-memory stand-in for the checkout API."""

    def __init__(self) -> None:
        self.sessions: dict[str, dict[str, Any]] = {}
        self.created: list[dict[str, list[str]]] = []
        self.down = False

    def add_session(
        self,
        session_id: str,
        *,
        user_id: str,
        status: str = "succeeded",
        intent_id: str | None = "pi_123",
        amount: int = 1000,
    ) -> None:
        intent = {"id": intent_id, "status": status} if intent_id else None
        self.sessions[session_id] = {
            "id": session_id,
            "amount_total": amount,
            "metadata": {"user_id": user_id},
            "payment_intent": intent,
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        if self.down:
            return httpx.Response(502, json={"error": {"message": "bad gateway"}})
        assert request.headers["Authorization"] == "Bearer sk_test_nonna"
        if request.method == "POST" and request.url.path == "/v1/checkout/sessions":
            form = parse_qs(request.content.decode())
            self.created.append(form)
            return httpx.Response(
                200, json={"id": "cs_new", "url": "https://checkout.example.com/cs_new"}
            )
        session_id = request.url.path.rsplit("/", 1)[-1]
        if session_id in self.sessions:
            assert request.url.params.get("expand[]") == "payment_intent"
            return httpx.Response(200, content=json.dumps(self.sessions[session_id]))
        return httpx.Response(404, json={"error": {"message": "No such session"}})


@pytest.fixture()
def provider(app: FastAPI) -> Iterator[FakeProvider]:
    fake = FakeProvider()
    payment_client = PaymentClient(
        "sk_test_nonna",
        base_url="https://payments.example.com",
        transport=httpx.MockTransport(fake.handler),
    )
    app.dependency_overrides[get_payment_client_dep] = lambda: payment_client
    try:
        yield fake
    finally:
        app.dependency_overrides.pop(get_payment_client_dep, None)


def test_checkout_returns_hosted_url(
    client: TestClient, provider: FakeProvider, alice_headers: dict[str, str]
) -> None:
    response = client.post(
        "/api/v1/payments/checkout",
        json={"success_url": "https://nonna.example.com/ok", "cancel_url": "https://nonna.example.com/no"},
        headers=alice_headers,
    )
    assert response.status_code == 200
    assert response.json() == {"url": "https://checkout.example.com/cs_new"}

    form = provider.created[0]
    assert form["line_items[0][price_data][unit_amount]"] == ["1000"]
    assert form["line_items[0][price_data][currency]"] == ["usd"]
    assert form["metadata[user_id]"] == ["a1"]
    assert form["success_url"] == [
        "https://nonna.example.com/ok?session_id={CHECKOUT_SESSION_ID}"
    ]


def test_checkout_requires_authentication(client: TestClient, provider: FakeProvider) -> None:
    response = client.post(
        "/api/v1/payments/checkout",
        json={"success_url": "https://a.example", "cancel_url": "https://b.example"},
    )
    assert response.status_code == 401


def test_verify_records_payment_once(
    client: TestClient,
    db_session: Session,
    provider: FakeProvider,
    alice_headers: dict[str, str],
) -> None:
    provider.add_session("cs_paid", user_id="a1")

    first = client.post(
        "/api/v1/payments/verify", json={"session_id": "cs_paid"}, headers=alice_headers
    )
    assert first.status_code == 201
    assert first.json() == {
        "message": "Payment recorded successfully",
        "payment_intent_id": "pi_123",
        "amount": 1000,
    }

    again = client.post(
        "/api/v1/payments/verify", json={"session_id": "cs_paid"}, headers=alice_headers
    )
    assert again.status_code == 201
    assert db_session.scalar(select(func.count(Payment.id))) == 1

    payment = db_session.scalars(select(Payment)).one()
    assert payment.user_id == "a1"
    assert payment.status == "succeeded"


def test_verify_rejects_unpaid_or_foreign_sessions(
    client: TestClient,
    db_session: Session,
    provider: FakeProvider,
    alice_headers: dict[str, str],
    bob_headers: dict[str, str],
) -> None:
    provider.add_session("cs_pending", user_id="a1", status="processing", intent_id="pi_9")
    provider.add_session("cs_no_intent", user_id="a1", intent_id=None)
    provider.add_session("cs_alice", user_id="a1", intent_id="pi_7")

    pending = client.post(
        "/api/v1/payments/verify", json={"session_id": "cs_pending"}, headers=alice_headers
    )
    assert pending.status_code == 400
    assert pending.json()["detail"] == "Payment not successful"

    no_intent = client.post(
        "/api/v1/payments/verify", json={"session_id": "cs_no_intent"}, headers=alice_headers
    )
    assert no_intent.status_code == 400
    assert no_intent.json()["detail"] == "Payment intent not found"

    foreign = client.post(
        "/api/v1/payments/verify", json={"session_id": "cs_alice"}, headers=bob_headers
    )
    assert foreign.status_code == 403
    assert db_session.scalar(select(func.count(Payment.id))) == 0


def test_provider_failure_returns_500(
    client: TestClient, provider: FakeProvider, alice_headers: dict[str, str]
) -> None:
    missing = client.post(
        "/api/v1/payments/verify", json={"session_id": "cs_unknown"}, headers=alice_headers
    )
    assert missing.status_code == 500
    assert missing.json()["detail"] == "Payment verification error"

    provider.down = True
    checkout = client.post(
        "/api/v1/payments/checkout",
        json={"success_url": "https://a.example", "cancel_url": "https://b.example"},
        headers=alice_headers,
    )
    assert checkout.status_code == 500
