"""Print payments through a Stripe-compatible checkout API."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import httpx
from sqlalchemy import select
from sqlalchemy.orm import Session

from nonna_kitchen.core.security import Identity
from nonna_kitchen.core.settings import settings
from nonna_kitchen.models import Payment
from nonna_kitchen.models.payment import PAYMENT_STATUSES
from nonna_kitchen.services.errors import Forbidden, ValidationFailed

# Configure logger for this module
logger = logging.getLogger(__name__)

# Placeholder the provider substitutes with the real session id on redirect.
SESSION_ID_PLACEHOLDER = "{CHECKOUT_SESSION_ID}"


class PaymentError(RuntimeError):
    """Raised when the payment provider cannot complete a request."""


@dataclass(frozen=True)
class CheckoutSession:
    """Hosted checkout page created by the provider."""

    id: str
    url: str


@dataclass(frozen=True)
class SessionSummary:
    """Fields of a retrieved checkout session needed for verification."""

    id: str
    amount_total: int
    user_id: str | None
    payment_intent_id: str | None
    payment_intent_status: str | None


def _parse_session_summary(payload: dict[str, Any]) -> SessionSummary:
    intent = payload.get("payment_intent")
    intent_id: str | None = None
    intent_status: str | None = None
    if isinstance(intent, dict):
        intent_id = intent.get("id")
        intent_status = intent.get("status")
    elif isinstance(intent, str):
        intent_id = intent

    metadata = payload.get("metadata") or {}
    return SessionSummary(
        id=str(payload["id"]),
        amount_total=int(payload.get("amount_total") or 0),
        user_id=metadata.get("user_id") or payload.get("client_reference_id"),
        payment_intent_id=intent_id,
        payment_intent_status=intent_status,
    )


class PaymentClient:
    """HTTP client wrapper for the payment provider."""

    def __init__(
        self,
        secret_key: str | None = None,
        *,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.secret_key = secret_key if secret_key is not None else settings.payment_secret_key
        self.base_url = base_url or settings.payment_base_url
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._client_lock = asyncio.Lock()

    @property
    def enabled(self) -> bool:
        return bool(self.secret_key)

    async def _ensure_client(self) -> httpx.AsyncClient:
        if not self.enabled:
            raise PaymentError("Payment provider is not configured")
        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(
                    base_url=self.base_url,
                    timeout=httpx.Timeout(settings.payment_timeout_seconds),
                    headers={"Authorization": f"Bearer {self.secret_key}"},
                    transport=self._transport,
                )
        return self._client

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        client = await self._ensure_client()
        try:
            response = await client.request(method, path, **kwargs)
            response.raise_for_status()
            payload: dict[str, Any] = response.json()
        except httpx.HTTPError as exc:
            raise PaymentError(f"Payment provider request failed: {exc}") from exc
        except ValueError as exc:
            raise PaymentError("Payment provider returned invalid JSON") from exc
        return payload

    async def create_checkout_session(
        self,
        *,
        user_id: str,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        """Create a one-item card checkout for a print order."""
        form = {
            "mode": "payment",
            "payment_method_types[0]": "card",
            "line_items[0][quantity]": "1",
            "line_items[0][price_data][currency]": settings.print_price_currency,
            "line_items[0][price_data][unit_amount]": str(settings.print_price_amount),
            "line_items[0][price_data][product_data][name]": settings.print_product_name,
            "success_url": f"{success_url}?session_id={SESSION_ID_PLACEHOLDER}",
            "cancel_url": cancel_url,
            "client_reference_id": user_id,
            "metadata[user_id]": user_id,
        }
        payload = await self._request("POST", "/v1/checkout/sessions", data=form)
        try:
            return CheckoutSession(id=str(payload["id"]), url=str(payload["url"]))
        except KeyError as exc:
            raise PaymentError("Checkout session response missing fields") from exc

    async def retrieve_session(self, session_id: str) -> SessionSummary:
        """Fetch a checkout session with its payment intent expanded."""
        payload = await self._request(
            "GET",
            f"/v1/checkout/sessions/{session_id}",
            params={"expand[]": "payment_intent"},
        )
        try:
            return _parse_session_summary(payload)
        except (KeyError, TypeError, ValueError) as exc:
            raise PaymentError("Checkout session response missing fields") from exc

    async def close(self) -> None:
        async with self._client_lock:
            if self._client is not None:
                await self._client.aclose()
                self._client = None


class _PaymentClientSingleton:
    _instance: PaymentClient | None = None

    @classmethod
    def get_instance(cls) -> PaymentClient:
        if cls._instance is None:
            cls._instance = PaymentClient()
        return cls._instance


def get_payment_client() -> PaymentClient:
    """Return a singleton payment client instance."""
    return _PaymentClientSingleton.get_instance()


async def verify_checkout(
    db: Session,
    *,
    client: PaymentClient,
    user: Identity,
    session_id: str,
) -> Payment:
    """Record the payment behind a completed checkout session.

    Verifying the same session twice returns the payment recorded the first
    time.
    """
    summary = await client.retrieve_session(session_id)

    if not summary.payment_intent_id:
        raise ValidationFailed("Payment intent not found")
    if summary.payment_intent_status != "succeeded":
        raise ValidationFailed("Payment not successful")
    if summary.user_id and summary.user_id != user.id:
        raise Forbidden("Forbidden")

    existing = db.scalars(
        select(Payment).where(Payment.provider_reference == summary.payment_intent_id)
    ).first()
    if existing is not None:
        return existing

    status = summary.payment_intent_status
    payment = Payment(
        user_id=summary.user_id or user.id,
        amount=summary.amount_total,
        status=status if status in PAYMENT_STATUSES else "canceled",
        provider_reference=summary.payment_intent_id,
    )
    db.add(payment)
    db.commit()
    db.refresh(payment)
    logger.info("Recorded payment %s for %s (%d)", payment.id, payment.user_id, payment.amount)
    return payment
