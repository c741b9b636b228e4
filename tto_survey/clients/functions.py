"""HTTP client for invoking hosted edge functions.

Mirrors the platform's ``functions.invoke`` contract: HTTP-level problems
are returned in ``FunctionResponse.error`` instead of being raised. Only a
missing base URL raises, because that is a local misconfiguration rather than
a remote outcome.
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional

import aiohttp

from tto_survey.core.settings import get_settings


class FunctionsClientError(RuntimeError):
    """Raised when the client cannot build a request (missing configuration)."""


class FunctionsError(Exception):
    """Base class for errors reported by a function invocation."""

    def __init__(self, message: str, context: Any = None) -> None:
        super().__init__(message)
        self.context = context


class FunctionsFetchError(FunctionsError):
    def __init__(self, context: Any = None) -> None:
        super().__init__("Failed to send a request to the Edge Function", context)


class FunctionsRelayError(FunctionsError):
    def __init__(self, context: Any = None) -> None:
        super().__init__("Relay Error invoking the Edge Function", context)


class FunctionsHttpError(FunctionsError):
    def __init__(self, status: int, context: Any = None) -> None:
        super().__init__(f"Edge Function returned a non-2xx status code: {status}", context)
        self.status = status


@dataclass(frozen=True)
class FunctionResponse:
    data: Any = None
    error: Optional[FunctionsError] = None


async def _decode_body(resp: aiohttp.ClientResponse) -> Any:
    text = await resp.text(errors="replace")
    content_type = (resp.headers.get("Content-Type") or "").split(";", 1)[0].strip().lower()
    if content_type == "application/json" and text:
        try:
            return json.loads(text)
        except ValueError:
            return text
    return text


class FunctionsClient:
    def __init__(self, base_url: Optional[str], api_key: str = "", *, timeout: float = 0.0) -> None:
        self._base_url = (base_url or "").strip().rstrip("/")
        self._api_key = (api_key or "").strip()
        self._timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self._base_url)

    def function_url(self, name: str) -> str:
        return f"{self._base_url}/functions/v1/{name}"

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
            headers["apikey"] = self._api_key
        return headers

    async def invoke(self, name: str, body: dict[str, Any]) -> FunctionResponse:
        if not self._base_url:
            raise FunctionsClientError("SUPABASE_URL is not configured")

        url = self.function_url(name)
        timeout = aiohttp.ClientTimeout(total=self._timeout or None)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(url, headers=self._headers(), json=body) as resp:
                    status = resp.status
                    relay_error = (resp.headers.get("x-relay-error") or "").lower() == "true"
                    data = await _decode_body(resp)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            return FunctionResponse(error=FunctionsFetchError(exc))

        if relay_error:
            return FunctionResponse(error=FunctionsRelayError(data))
        if not 200 <= status < 300:
            return FunctionResponse(error=FunctionsHttpError(status, data))
        return FunctionResponse(data=data)


@lru_cache(maxsize=1)
def get_functions_client() -> FunctionsClient:
    settings = get_settings()
    return FunctionsClient(
        settings.supabase_url,
        settings.supabase_anon_key,
        timeout=settings.functions_timeout_seconds,
    )


__all__ = [
    "FunctionResponse",
    "FunctionsClient",
    "FunctionsClientError",
    "FunctionsError",
    "FunctionsFetchError",
    "FunctionsHttpError",
    "FunctionsRelayError",
    "get_functions_client",
]
