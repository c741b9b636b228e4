from __future__ import annotations

from typing import AsyncIterator

from .providers.base import UpstreamStream


async def pipe(upstream: UpstreamStream) -> AsyncIterator[bytes]:
    """Forward upstream body chunks one by one, untouched.

    Each chunk is yielded as soon as it is read, so the consumer's pace decides
    how fast the upstream is drained. An upstream error propagates to the
    consumer. The upstream is always closed once iteration stops,
    whether it finished normally or not.
    """
    try:
        async for chunk in upstream.iter_chunks():
            if chunk:
                yield chunk
    finally:
        await upstream.close()


__all__ = ["pipe"]
