from __future__ import annotations

import asyncio
import logging
from typing import Any, AsyncIterator

import aiohttp

from tto_survey.core.error_handler import describe_exception
from tto_survey.core.settings import Settings

from .base import AIProviderError

logger = logging.getLogger(__name__)


class GatewayStream:
    """Open gateway response; owns its client session until closed."""

    def __init__(self, session: aiohttp.ClientSession, response: aiohttp.ClientResponse) -> None:
        self._session = session
        self._response = response
        self._closed = False
        self.status = int(response.status)

    async def read_text(self) -> str:
        return await self._response.text(errors="replace")

    async def iter_chunks(self) -> AsyncIterator[bytes]:
        async for chunk in self._response.content.iter_any():
            yield chunk

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._response.close()
        await self._session.close()


class AIGatewayProvider:
    """OpenAI-compatible chat-completions gateway, always in streaming mode."""

    name = "gateway"

    def __init__(self, settings: Settings) -> None:
        self._url = settings.ai_gateway_url
        self._timeout_seconds = settings.ai_gateway_timeout_seconds

    async def open_chat_stream(
        self,
        *,
        api_key: str,
        model: str,
        messages: list[Any],
    ) -> GatewayStream:
        if not api_key:
            raise AIProviderError("AI gateway API key is missing")

        payload = {"model": model, "messages": messages, "stream": True}
        headers = {"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"}
        # total=None disables aiohttp's default 5 minute cap on the stream.
        timeout = aiohttp.ClientTimeout(total=self._timeout_seconds or None)
        session = aiohttp.ClientSession(timeout=timeout)
        try:
            response = await session.post(self._url, headers=headers, json=payload)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            await session.close()
            logger.warning("ai.gateway.request_failed", exc_info=True)
            raise AIProviderError(f"AI gateway request failed: {describe_exception(exc)}") from exc
        except BaseException:
            await session.close()
            raise
        return GatewayStream(session, response)
