"""Machine translation client (LibreTranslate-compatible)."""

from __future__ import annotations

import asyncio
import logging

import httpx

from nonna_kitchen.core.settings import settings

logger = logging.getLogger(__name__)


class TranslationError(RuntimeError):
    """Raised when a text could not be translated."""


class TranslationClient:
    """Thin async client around the translation service's ``/translate`` call."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url if base_url is not None else settings.translate_base_url
        self.timeout_seconds = timeout_seconds or settings.translate_timeout_seconds
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._client_lock = asyncio.Lock()

    @property
    def enabled(self) -> bool:
        return bool(self.base_url)

    async def _ensure_client(self) -> httpx.AsyncClient:
        if not self.enabled:
            raise TranslationError("Translation service is not configured")
        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(
                    base_url=self.base_url or "",
                    timeout=httpx.Timeout(self.timeout_seconds),
                    transport=self._transport,
                )
        return self._client

    async def translate(self, text: str, target_lang: str) -> str:
        """Translate ``text`` (HTML allowed) into ``target_lang``."""
        client = await self._ensure_client()
        try:
            response = await client.post(
                "/translate",
                json={"q": text, "source": "auto", "target": target_lang, "format": "html"},
            )
            response.raise_for_status()
            translated = response.json()["translatedText"]
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as exc:
            logger.error("Translation to %s failed: %s", target_lang, exc)
            raise TranslationError("Translation failed") from exc
        return str(translated)

    async def close(self) -> None:
        async with self._client_lock:
            if self._client is not None:
                await self._client.aclose()
                self._client = None


class _TranslationClientSingleton:
    _instance: TranslationClient | None = None

    @classmethod
    def get_instance(cls) -> TranslationClient:
        if cls._instance is None:
            cls._instance = TranslationClient()
        return cls._instance


def get_translation_client() -> TranslationClient:
    """Return a singleton translation client instance."""
    return _TranslationClientSingleton.get_instance()
