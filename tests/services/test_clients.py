# tests/services/test_clients.py
import json

import httpx
import pytest

from nonna_kitchen.services.realtime import RelayClient, RelayConfig, conversation_room
from nonna_kitchen.services.translation import TranslationClient, TranslationError


@pytest.mark.asyncio
async def test_translation_client_posts_html_request() -> None:
    captured: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(json.loads(request.content))
        return httpx.Response(200, json={"translatedText": "<p>Ciao</p>"})

    client = TranslationClient(
        "https://translate.example.com", transport=httpx.MockTransport(handler)
    )
    assert await client.translate("<p>Hello</p>", "it") == "<p>Ciao</p>"
    assert captured == [{"q": "<p>Hello</p>", "source": "auto", "target": "it", "format": "html"}]
    await client.close()


@pytest.mark.asyncio
async def test_translation_client_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    client = TranslationClient(
        "https://translate.example.com", transport=httpx.MockTransport(handler)
    )
    with pytest.raises(TranslationError):
        await client.translate("Hello", "fr")

    unconfigured = TranslationClient("")
    with pytest.raises(TranslationError):
        await unconfigured.translate("Hello", "fr")


@pytest.mark.asyncio
async def test_relay_publish_and_quiet_failure() -> None:
    received: list[dict] = []
    healthy = {"up": True}

    def handler(request: httpx.Request) -> httpx.Response:
        if not healthy["up"]:
            return httpx.Response(503)
        assert request.headers["Authorization"] == "Bearer relay-key"
        received.append(json.loads(request.content))
        return httpx.Response(202)

    client = RelayClient(
        RelayConfig(base_url="https://relay.example.com", api_key="relay-key", timeout_seconds=1.0),
        transport=httpx.MockTransport(handler),
    )
    room = conversation_room(42)
    assert await client.publish_quietly(room, "message.created", {"id": 1}) is True
    assert received == [{"room": "conversation:42", "event": "message.created", "data": {"id": 1}}]

    healthy["up"] = False
    assert await client.publish_quietly(room, "message.created", {"id": 2}) is False
    await client.close()


@pytest.mark.asyncio
async def test_relay_without_url_is_a_no_op() -> None:
    client = RelayClient(RelayConfig(base_url=None, api_key=None, timeout_seconds=1.0))
    assert client.enabled is False
    assert await client.publish_quietly("conversation:1", "message.created", {}) is True
