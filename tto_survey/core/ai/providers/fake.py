from __future__ import annotations

import json
from typing import Any, AsyncIterator, Iterable, Optional

DEFAULT_REPLY = "Copilot is running with the fake provider. No model was called."


def _sse_event(data: str) -> bytes:
    return f"data: {data}\n\n".encode("utf-8")


def canned_sse_chunks(text: str = DEFAULT_REPLY) -> list[bytes]:
    """Chat-completions style SSE events spelling out ``text`` word by word."""
    chunks: list[bytes] = []
    for word in text.split(" "):
        delta = {"choices": [{"index": 0, "delta": {"content": word + " "}}]}
        chunks.append(_sse_event(json.dumps(delta, ensure_ascii=False)))
    chunks.append(_sse_event("[DONE]"))
    return chunks


class FakeStream:
    def __init__(self, *, status: int, chunks: Iterable[bytes], body: str) -> None:
        self.status = status
        self._chunks = list(chunks)
        self._body = body
        self.closed = False

    async def read_text(self) -> str:
        return self._body

    async def iter_chunks(self) -> AsyncIterator[bytes]:
        for chunk in self._chunks:
            yield chunk

    async def close(self) -> None:
        self.closed = True


class FakeProvider:
    """Deterministic provider for tests and local runs.

    Records every call and answers with a fixed status and body. With the
    default arguments it streams a short canned SSE reply.
    """

    name = "fake"

    def __init__(
        self,
        *,
        status: int = 200,
        chunks: Optional[Iterable[bytes]] = None,
        body: str = "",
    ) -> None:
        self._status = status
        self._chunks = list(chunks) if chunks is not None else canned_sse_chunks()
        self._body = body
        self.calls: list[dict[str, Any]] = []
        self.streams: list[FakeStream] = []

    async def open_chat_stream(
        self,
        *,
        api_key: str,
        model: str,
        messages: list[Any],
    ) -> FakeStream:
        self.calls.append({"api_key": api_key, "model": model, "messages": messages})
        stream = FakeStream(status=self._status, chunks=self._chunks, body=self._body)
        self.streams.append(stream)
        return stream
