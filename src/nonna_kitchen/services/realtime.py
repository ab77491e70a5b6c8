"""Publisher for the realtime message relay.

New messages are pushed to a room per conversation so the other
participant's open session receives them without polling. Delivery is best
effort: the database row is the durable copy, so publish failures are
logged and dropped.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from nonna_kitchen.core.settings import settings

# Configure logger for this module
logger = logging.getLogger(__name__)


class RelayError(RuntimeError):
    """Raised when the relay rejects or cannot receive a publish."""


@dataclass(frozen=True)
class RelayConfig:
    """Immutable configuration for the relay client."""

    base_url: str | None
    api_key: str | None
    timeout_seconds: float


def load_relay_config() -> RelayConfig:
    """Build configuration object from global settings."""
    return RelayConfig(
        base_url=settings.relay_base_url,
        api_key=settings.relay_api_key,
        timeout_seconds=float(settings.relay_timeout_seconds),
    )


def conversation_room(conversation_id: int) -> str:
    """Return the relay room carrying a conversation's messages."""
    return f"conversation:{conversation_id}"


class RelayClient:
    """HTTP client wrapper for the realtime relay."""

    def __init__(
        self,
        config: RelayConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or load_relay_config()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._client_lock = asyncio.Lock()

    @property
    def enabled(self) -> bool:
        return bool(self.config.base_url)

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._client_lock:
            if self._client is None:
                headers = {}
                if self.config.api_key:
                    headers["Authorization"] = f"Bearer {self.config.api_key}"
                self._client = httpx.AsyncClient(
                    base_url=self.config.base_url or "",
                    timeout=httpx.Timeout(self.config.timeout_seconds),
                    headers=headers,
                    transport=self._transport,
                )
        return self._client

    async def publish(self, room: str, event: str, data: Mapping[str, Any]) -> None:
        """Publish ``event`` with ``data`` to everyone joined to ``room``."""
        if not self.enabled:
            return

        client = await self._ensure_client()
        try:
            response = await client.post(
                "/publish",
                json={"room": room, "event": event, "data": dict(data)},
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise RelayError(f"Relay publish failed: {exc}") from exc

    async def publish_quietly(self, room: str, event: str, data: Mapping[str, Any]) -> bool:
        """Publish and log instead of raising; returns True on success."""
        try:
            await self.publish(room, event, data)
        except RelayError as exc:
            logger.warning("Dropping realtime event %s for %s: %s", event, room, exc)
            return False
        return True

    async def close(self) -> None:
        """Clean up underlying HTTP client resources."""
        async with self._client_lock:
            if self._client is not None:
                await self._client.aclose()
                self._client = None


class _RelayClientSingleton:
    """Singleton wrapper for RelayClient."""

    _instance: RelayClient | None = None

    @classmethod
    def get_instance(cls) -> RelayClient:
        if cls._instance is None:
            cls._instance = RelayClient()
        return cls._instance


def get_relay_client() -> RelayClient:
    """Return a singleton relay client instance."""
    return _RelayClientSingleton.get_instance()
