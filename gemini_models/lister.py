import time
from typing import Any, Dict, Optional, Tuple

import httpx

from gemini_models.errors import AuthenticationError, TransportError
from gemini_models.log import log_event
from gemini_models.settings import DEFAULT_BASE_URL, Settings

AUTH_STATUS = {401, 403}


def _now_ms() -> float:
    return time.time() * 1000.0


def _is_auth_rejection(r: httpx.Response) -> bool:
    if r.status_code in AUTH_STATUS:
        return True
    # Gemini answers a bad key with 400 + reason API_KEY_INVALID
    return r.status_code == 400 and "API_KEY_INVALID" in r.text


class ModelLister:
    """
    Lists the models an API key can access.

    Construction does no I/O and does not look at the key; an empty or missing
    key goes to the service untouched and the service decides.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings, client: Optional[httpx.AsyncClient] = None) -> "ModelLister":
        return cls(settings.api_key, base_url=settings.base_url, client=client)

    @property
    def url(self) -> str:
        return f"{self.base_url}/models"

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key is not None:
            headers["x-goog-api-key"] = self.api_key
        return headers

    async def _get(self) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(self.url, headers=self._headers())
        async with httpx.AsyncClient() as client:
            return await client.get(self.url, headers=self._headers())

    async def list_models(self) -> Tuple[Dict[str, Any], ...]:
        """One GET per call. Errors are raised as-is: no retry, no fallback."""
        start_ms = _now_ms()
        event: Dict[str, Any] = {"service": "gemini_models", "event": "list_models", "url": self.url}

        try:
            r = await self._get()
        except httpx.TransportError as e:
            log_event({**event, "status": "transport_error", "status_code": None,
                       "error": str(e), "latency_ms": round(_now_ms() - start_ms, 2)})
            raise TransportError(f"Could not reach {self.url}: {e}") from e

        latency_ms = round(_now_ms() - start_ms, 2)

        if _is_auth_rejection(r):
            log_event({**event, "status": "auth_error", "status_code": r.status_code, "latency_ms": latency_ms})
            raise AuthenticationError(
                f"API key rejected (HTTP {r.status_code})", status_code=r.status_code, detail=r.text
            )

        try:
            r.raise_for_status()
            body = r.json()
            if not isinstance(body, dict):
                raise ValueError("expected a JSON object")
            models = body.get("models", [])
            if not isinstance(models, list):
                raise ValueError("expected `models` to be a JSON array")
        except (httpx.HTTPStatusError, ValueError) as e:
            log_event({**event, "status": "transport_error", "status_code": r.status_code, "latency_ms": latency_ms})
            raise TransportError(
                f"Model listing failed (HTTP {r.status_code})", status_code=r.status_code, detail=r.text
            ) from e

        models = tuple(models)
        log_event({**event, "status": "ok", "status_code": r.status_code,
                   "count": len(models), "latency_ms": latency_ms})
        return models
