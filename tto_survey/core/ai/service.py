"""CopilotService: forwards interview chat to the AI gateway.

Responsibilities:
- Secret lookup (gateway API key via a ``SecretProvider``).
- System prompt assembly (protocol prompt + stage + session context).
- Provider dispatch (gateway or fake).
- Upstream status translation into caller-facing errors.

The service never buffers a successful reply: it hands the open upstream
stream back to the caller, who pipes it out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from tto_survey.core.error_handler import ConfigurationError
from tto_survey.core.result import Failure, Result, Success
from tto_survey.core.secrets import AI_GATEWAY_API_KEY, EnvSecretProvider, SecretProvider
from tto_survey.core.settings import Settings, get_settings

from .prompts import copilot_system_prompt
from .providers import AIGatewayProvider, AIProvider, FakeProvider, UpstreamStream
from .schemas import CopilotRequest

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."
PAYMENT_REQUIRED_MESSAGE = "Payment required. Please add credits."
AI_SERVICE_ERROR_MESSAGE = "AI service error"

_TRANSLATED_STATUSES = {
    429: RATE_LIMIT_MESSAGE,
    402: PAYMENT_REQUIRED_MESSAGE,
}


@dataclass(frozen=True)
class CopilotError:
    """Caller-facing error derived from an upstream failure."""

    status_code: int
    message: str

    def as_body(self) -> dict[str, str]:
        return {"error": self.message}


def provider_for_settings(settings: Settings) -> AIProvider:
    """Instantiate the AI provider from current settings (gateway or fake)."""
    if settings.ai_provider == "fake":
        return FakeProvider()
    return AIGatewayProvider(settings)


class CopilotService:
    def __init__(self, *, provider: AIProvider, secrets: SecretProvider, model: str) -> None:
        self._provider = provider
        self._secrets = secrets
        self._model = model

    def build_messages(self, request: CopilotRequest) -> list[Any]:
        system_prompt = copilot_system_prompt(
            stage=request.stage,
            session_context=request.session_context,
        )
        return [{"role": "system", "content": system_prompt}, *request.messages]

    async def open_stream(self, request: CopilotRequest) -> Result[UpstreamStream, CopilotError]:
        """Open the upstream reply stream.

        Raises ``ConfigurationError`` when the gateway key is missing and lets
        provider exceptions propagate; upstream HTTP failures come back as
        ``Failure(CopilotError)``.
        """
        api_key = self._secrets.get(AI_GATEWAY_API_KEY)
        if not api_key:
            raise ConfigurationError(f"{AI_GATEWAY_API_KEY} is not configured")

        upstream = await self._provider.open_chat_stream(
            api_key=api_key,
            model=self._model,
            messages=self.build_messages(request),
        )
        if 200 <= upstream.status < 300:
            return Success(upstream)

        try:
            message = _TRANSLATED_STATUSES.get(upstream.status)
            if message is not None:
                logger.warning("ai.copilot.upstream_rejected", extra={"upstream_status": upstream.status})
                return Failure(CopilotError(status_code=upstream.status, message=message))
            error_text = await upstream.read_text()
            logger.error("AI gateway error: %s %s", upstream.status, error_text[:4000])
            return Failure(CopilotError(status_code=500, message=AI_SERVICE_ERROR_MESSAGE))
        finally:
            await upstream.close()


def get_copilot_service() -> CopilotService:
    """FastAPI dependency that provides a CopilotService per request."""
    settings = get_settings()
    return CopilotService(
        provider=provider_for_settings(settings),
        secrets=EnvSecretProvider(),
        model=settings.ai_model,
    )


__all__ = [
    "AI_SERVICE_ERROR_MESSAGE",
    "CopilotError",
    "CopilotService",
    "PAYMENT_REQUIRED_MESSAGE",
    "RATE_LIMIT_MESSAGE",
    "get_copilot_service",
    "provider_for_settings",
]
