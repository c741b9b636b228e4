from __future__ import annotations

from typing import Any, AsyncIterator, Protocol


class AIProviderError(RuntimeError):
    """Raised when an AI provider cannot be reached or returns garbage."""


class UpstreamStream(Protocol):
    """An opened upstream response whose body has not been consumed yet."""

    status: int

    async def read_text(self) -> str:
        """Read the whole body as text (used for error responses only)."""

    def iter_chunks(self) -> AsyncIterator[bytes]:
        """Yield body chunks as they arrive from the network."""

    async def close(self) -> None:
        """Release the connection. Safe to call more than once."""


class AIProvider(Protocol):
    name: str

    async def open_chat_stream(
        self,
        *,
        api_key: str,
        model: str,
        messages: list[Any],
    ) -> UpstreamStream:
        """Send a streamed chat-completion request and return the open response.

        Implementations must not log message contents.
        """
