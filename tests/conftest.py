import json

import httpx
import pytest

MODELS = [{"id": "model-a"}, {"id": "model-b"}]
VALID_KEY = "valid-key-123"


def gemini_handler(calls=None):
    """Fake Gemini: 200 for VALID_KEY, 403 without a key, 400 API_KEY_INVALID otherwise."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        key = request.headers.get("x-goog-api-key")
        if key is None:
            return httpx.Response(403, json={"error": {"code": 403, "status": "PERMISSION_DENIED"}})
        if key != VALID_KEY:
            return httpx.Response(
                400,
                json={"error": {"code": 400, "status": "INVALID_ARGUMENT",
                                "details": [{"reason": "API_KEY_INVALID"}]}},
            )
        return httpx.Response(200, content=json.dumps({"models": MODELS}))

    return handler


def refuse_connection(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


@pytest.fixture
def calls():
    return []


@pytest.fixture
def gemini_client(calls):
    return httpx.AsyncClient(transport=httpx.MockTransport(gemini_handler(calls)))


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # no stray .env or real credentials
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_BASE", raising=False)
    return monkeypatch


@pytest.fixture
def patch_transport(monkeypatch):
    """Route every httpx.AsyncClient the lister opens on its own to a mock transport."""
    from gemini_models import lister as lister_mod

    real_client = httpx.AsyncClient

    def install(handler):
        def factory(**kwargs):
            return real_client(transport=httpx.MockTransport(handler), **kwargs)

        monkeypatch.setattr(lister_mod.httpx, "AsyncClient", factory)

    return install
