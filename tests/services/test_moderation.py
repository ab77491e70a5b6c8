# tests/services/test_moderation.py
import httpx
import pytest

from nonna_kitchen.services.moderation import (
    ModerationClient,
    ModerationConfig,
    ModerationGate,
    ModerationServiceError,
    contains_blocked_term,
)

CONFIG = ModerationConfig(
    api_key="sk-test",
    base_url="https://moderation.example.com",
    model="omni-moderation-latest",
    timeout_seconds=1.0,
)


def _client(handler) -> ModerationClient:  # type: ignore[no-untyped-def]
    return ModerationClient(CONFIG, transport=httpx.MockTransport(handler))


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Nonna's Sunday ragù", False),
        ("KILL the heat after ten minutes", True),
        ("what a Stupid idea", True),
        ("", False),
    ],
)
def test_keyword_check(text: str, expected: bool) -> None:
    assert contains_blocked_term(text) is expected


@pytest.mark.asyncio
async def test_classifier_verdict_flags() -> None:
    seen: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append({"auth": request.headers["Authorization"], "body": request.read()})
        return httpx.Response(
            200,
            json={"results": [{"flagged": True, "categories": {"harassment": True, "violence": False}}]},
        )

    gate = ModerationGate(_client(handler))
    assert await gate.is_flagged("a perfectly polite sentence") is True
    assert seen[0]["auth"] == "Bearer sk-test"
    assert b"omni-moderation-latest" in seen[0]["body"]


@pytest.mark.asyncio
async def test_clean_classifier_verdict_still_checks_keywords() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"results": [{"flagged": False, "categories": {}}]})

    gate = ModerationGate(_client(handler))
    assert await gate.is_flagged("Grandma's focaccia") is False
    assert await gate.is_flagged("this is spam") is True


@pytest.mark.asyncio
async def test_unreachable_classifier_falls_back_to_keywords() -> None:
    gate = ModerationGate(_client(_unreachable))
    assert await gate.is_flagged("kill") is True
    assert await gate.is_flagged("Grandma's focaccia") is False


@pytest.mark.asyncio
async def test_malformed_classifier_reply_falls_back() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"unexpected": []})

    client = _client(handler)
    with pytest.raises(ModerationServiceError):
        await client.classify("anything")

    gate = ModerationGate(client)
    assert await gate.is_flagged("offensive remark") is True
    await client.close()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"results": ["oops"]},
        {"results": [{"flagged": True, "categories": ["violence"]}]},
    ],
)
async def test_misshapen_classifier_result_falls_back(payload: dict) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    client = _client(handler)
    with pytest.raises(ModerationServiceError):
        await client.classify("please kill it")

    gate = ModerationGate(client)
    assert await gate.is_flagged("please kill it") is True
    assert await gate.is_flagged("Slow-cooked ragù") is False
    await client.close()


@pytest.mark.asyncio
async def test_unconfigured_classifier_is_skipped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - must not run
        raise AssertionError("classifier should not be called")

    config = ModerationConfig(
        api_key=None, base_url=CONFIG.base_url, model=CONFIG.model, timeout_seconds=1.0
    )
    client = ModerationClient(config, transport=httpx.MockTransport(handler))
    gate = ModerationGate(client)
    assert client.enabled is False
    assert await gate.is_flagged("Grandma's focaccia") is False
    assert await gate.is_flagged("idiot") is True
