"""AI provider implementations (pluggable chat backends).

- ``AIGatewayProvider``: production provider streaming from the AI gateway.
- ``FakeProvider``: deterministic stub for tests and local runs.
- ``AIProvider`` / ``UpstreamStream``: Protocol interfaces both implement.
"""

from .base import AIProvider, AIProviderError, UpstreamStream
from .fake import FakeProvider, FakeStream
from .gateway import AIGatewayProvider, GatewayStream

__all__ = [
    "AIGatewayProvider",
    "AIProvider",
    "AIProviderError",
    "FakeProvider",
    "FakeStream",
    "GatewayStream",
    "UpstreamStream",
]
