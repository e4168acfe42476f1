"""Shared fixtures: settings and a fake Turnstile/Telegram upstream."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from formrelay.config import Settings, get_settings
from formrelay.main import app
from formrelay.routers.submit import get_http_client

TURNSTILE_HOST = "challenges.cloudflare.com"
TELEGRAM_HOST = "api.telegram.org"


class FakeUpstream:
    """Answers Turnstile and Telegram calls and records every request.

    A reply is either an exception to raise, or a (status, body) tuple where
    body is a JSON-able object or raw bytes.
    """

    def __init__(self):
        self.requests = []
        self.turnstile_reply = (200, {"success": True, "error-codes": []})
        self.telegram_reply = (200, {"ok": True, "result": {"message_id": 1}})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == TURNSTILE_HOST:
            reply = self.turnstile_reply
        elif request.url.host == TELEGRAM_HOST:
            reply = self.telegram_reply
        else:
            return httpx.Response(404)

        if isinstance(reply, Exception):
            raise reply
        status, body = reply
        if isinstance(body, bytes):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def calls_to(self, host):
        return [r for r in self.requests if r.url.host == host]

    @property
    def turnstile_calls(self):
        return self.calls_to(TURNSTILE_HOST)

    @property
    def telegram_calls(self):
        return self.calls_to(TELEGRAM_HOST)

    @staticmethod
    def body(request: httpx.Request) -> dict:
        return json.loads(request.content)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        telegram_bot_token="123456:TEST-TOKEN",
        telegram_chat_id="-1001234567890",
        turnstile_secret_key="turnstile-secret",
    )


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def api(settings, upstream):
    """TestClient wired to the fake upstream and test settings."""

    async def override_http_client():
        async with upstream.client() as client:
            yield client

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_client] = override_http_client
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def valid_form():
    return {
        "cf-turnstile-response": "token-abc",
        "name": "Kim_Min",
        "contact": "010-1234-5678",
        "privacy_agree": "on",
        "third_party_agree": "on",
        "marketing_agree": "on",
    }
