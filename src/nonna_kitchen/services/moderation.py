"""Content moderation gate for user-submitted text.

Text is first sent to an OpenAI-compatible moderation classifier. Whatever
the classifier says (or when it is unavailable), the text is also checked
against a fixed keyword blocklist, so the gate always returns a verdict.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from nonna_kitchen.core.settings import settings

# Configure logger for this module
logger = logging.getLogger(__name__)

BLOCKED_TERMS: tuple[str, ...] = (
    "spam",
    "inappropriate",
    "offensive",
    "fuck",
    "shit",
    "bitch",
    "asshole",
    "dick",
    "stupid",
    "idiot",
    "hate",
    "kill",
    "die",
)


class ModerationServiceError(RuntimeError):
    """Raised when the moderation classifier cannot produce a verdict."""


@dataclass(frozen=True)
class ModerationVerdict:
    """Classifier result for one piece of text."""

    flagged: bool
    categories: Mapping[str, bool] = field(default_factory=dict)


@dataclass(frozen=True)
class ModerationConfig:
    """Immutable configuration for the moderation classifier."""

    api_key: str | None
    base_url: str
    model: str
    timeout_seconds: float


def load_moderation_config() -> ModerationConfig:
    """Build configuration object from global settings."""
    return ModerationConfig(
        api_key=settings.moderation_api_key,
        base_url=settings.moderation_base_url,
        model=settings.moderation_model,
        timeout_seconds=float(settings.moderation_timeout_seconds),
    )


class ModerationClient:
    """HTTP client for the external moderation classifier."""

    def __init__(
        self,
        config: ModerationConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or load_moderation_config()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._client_lock = asyncio.Lock()

    @property
    def enabled(self) -> bool:
        return bool(self.config.api_key)

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(
                    base_url=self.config.base_url,
                    timeout=httpx.Timeout(self.config.timeout_seconds),
                    transport=self._transport,
                )
        return self._client

    async def classify(self, text: str) -> ModerationVerdict:
        """Classify ``text`` and return the first result of the response."""
        if not self.enabled:
            raise ModerationServiceError("Moderation classifier is not configured")

        client = await self._ensure_client()
        try:
            response = await client.post(
                "/v1/moderations",
                json={"model": self.config.model, "input": text},
                headers={"Authorization": f"Bearer {self.config.api_key}"},
            )
            response.raise_for_status()
            payload: dict[str, Any] = response.json()
            result = payload["results"][0]
            if not isinstance(result, dict):
                raise TypeError("moderation result is not an object")
            return ModerationVerdict(
                flagged=bool(result.get("flagged")),
                categories=dict(result.get("categories") or {}),
            )
        except httpx.HTTPError as exc:
            raise ModerationServiceError(f"Moderation request failed: {exc}") from exc
        except (AttributeError, KeyError, IndexError, TypeError, ValueError) as exc:
            raise ModerationServiceError("Malformed moderation response") from exc

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def contains_blocked_term(text: str, terms: Iterable[str] = BLOCKED_TERMS) -> bool:
    """Return True if any blocked term occurs anywhere in the lower-cased text."""
    lowered = text.lower()
    return any(term in lowered for term in terms)


class ModerationGate:
    """Classifier-plus-keyword check applied before persisting free text."""

    def __init__(
        self,
        client: ModerationClient | None = None,
        blocked_terms: Iterable[str] = BLOCKED_TERMS,
    ) -> None:
        self.client = client
        self.blocked_terms = tuple(blocked_terms)

    async def is_flagged(self, text: str) -> bool:
        """Return True when ``text`` must not be stored."""
        if self.client is not None and self.client.enabled:
            try:
                verdict = await self.client.classify(text)
            except ModerationServiceError as exc:
                logger.error("Moderation classifier unavailable, using keyword check: %s", exc)
            else:
                if verdict.flagged:
                    flagged = sorted(name for name, hit in verdict.categories.items() if hit)
                    logger.info("Content flagged by classifier: %s", ", ".join(flagged))
                    return True
        else:
            logger.debug("Moderation classifier not configured, using keyword check")

        return contains_blocked_term(text, self.blocked_terms)


class _ModerationGateSingleton:
    """Singleton holder for the process-wide moderation gate."""

    _instance: ModerationGate | None = None

    @classmethod
    def get_instance(cls) -> ModerationGate:
        if cls._instance is None:
            cls._instance = ModerationGate(ModerationClient())
        return cls._instance

    @classmethod
    async def reset(cls) -> None:
        if cls._instance is not None and cls._instance.client is not None:
            await cls._instance.client.close()
        cls._instance = None


def get_moderation_gate() -> ModerationGate:
    """Return the shared moderation gate."""
    return _ModerationGateSingleton.get_instance()


async def close_moderation_gate() -> None:
    """Release the gate's HTTP resources."""
    await _ModerationGateSingleton.reset()
